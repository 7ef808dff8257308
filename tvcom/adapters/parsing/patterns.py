"""
Motifs d'extraction pour les pages TV.com.

Tous les motifs supposent un document normalise (chaque ligne debarrassee
de ses espaces de debut et de fin, lignes jointes par "\\n"), a l'exception
de ceux appliques ligne par ligne sur les pages de recherche et de liste
d'episodes.

Ces motifs sont volontairement lies a la mise en page actuelle du site :
une refonte du site les rendra caducs.
"""

import re

# --- Page resume d'une serie (/show/<id>/summary.html) ---

SERIES_NAME = re.compile(
    r'<div\sid="content-head".*?>\n\n?'
    r"<h1>(.*?)</h1>\n"
)

# Bloc "More Pictures" optionnel avant le texte du resume
SERIES_SUMMARY = re.compile(
    r'<div\sclass="mt-10">\n'
    r'(?:<a\sclass="default-image\smore"\shref=[^\n]*?>\n'
    r"<img\ssrc=[^\n]*?\s/>More\sPictures\s*</a>\n)?"
    r"(.*?)\n"
    r"</div>\n",
    re.DOTALL,
)

SERIES_IMAGE = re.compile(
    r'<a\sclass="default-image\smore"\shref="[^"]+;image">\n'
    r'<img\ssrc="([^"]+)"\salt="[^"]*"\s/>More\sPictures\s*</a>'
)

GENRES_ROW = re.compile(r"Show\sCategories:\n(<a\shref=.*</a>)")

GENRE_ANCHOR = re.compile(r'<a\shref="[^"]+">(.*?)</a>')

CAST_ANCHOR = re.compile(
    r'<a\s[^>]*?href="[^"]*person/\d+/summary\.html\?[^"]*tag=cast;name;\d+">'
    r"(.*?)</a>"
)

# --- Liste des episodes (/show/<id>/episode_listings.html) ---

EPISODE_LINK = re.compile(
    r'<a\shref="[^"]*/episode/(\d+)/summary\.html[^"]*">(.*?)</a>'
)

# --- Recherche (/search.php?stype=program) ---

SEARCH_RESULT = re.compile(
    r'^\s*<a\s(?:.*?\s)?href="[^"]*show/(\d+)/summary\.html'
    r'\?q=[^"]*?&(?:amp;)?tag=search_results'
)

# --- Page resume d'un episode (/episode/<id>/summary.html) ---

EPISODE_NAME = re.compile(
    r'<td\svalign="top"\sclass="pr-10\spl-10">\n'
    r"<h1>(.*?)</h1>\n"
)

EPISODE_SUMMARY = re.compile(
    r'<div\sid="full-col-wrap">\n+'
    r'<div\sid="main-col">\n+'
    r"<div>\n"
    r"(.*?)"
    r'<div\sclass="ta-r\smt-10\sf-bold">\n',
    re.DOTALL,
)

# Numero d'episode, saison et date de diffusion sur une meme ligne
VITALS = re.compile(
    r'<span\sclass="f-bold\sf-666">\s*'
    r"Episode\sNumber:\s(\d+)\s*&nbsp;&nbsp;\s*"
    r"Season\sNum:\s(\d+)\s*&nbsp;&nbsp;\s*"
    r"First\sAired:\s(n/a|(?:[A-Za-z]+,?\s)?[A-Za-z]+\s\d\d?,\s\d{4})",
    re.DOTALL,
)

# "Monday August 29, 2005" ou "August 29, 2005"
AIR_DATE = re.compile(
    r"^(?:[A-Za-z]+,?\s+)?([A-Za-z]+)\s*(\d{1,2}),\s*(\d{4})$"
)

PERSON_ANCHOR = re.compile(r'<a\shref="[^"]+">(.*?)</a>')

SERIES_BACKREF = re.compile(r'<a\shref="[^"]*/show/(\d+)/cast\.html[^"]*"')

LINE_BREAK = re.compile(r"<br(?:\s*/)?>", re.IGNORECASE)


def people_row(label: str) -> re.Pattern:
    """
    Construit le motif d'une ligne de tableau "Label:" suivie de sa cellule.

    L'ancrage en debut de ligne evite que "Star:" corresponde a "Guest Star:".

    Args:
        label: Libelle sans les deux-points (ex: "Guest Star")

    Returns:
        Motif capturant le contenu de la cellule (liste d'ancres)
    """
    escaped = r"\s".join(re.escape(word) for word in label.split())
    return re.compile(
        rf"^{escaped}:\n</td>\n<td>\n(<a\shref=.*)",
        re.MULTILINE,
    )


STARS_ROW = people_row("Star")
GUEST_STARS_ROW = people_row("Guest Star")
RECURRING_ROLES_ROW = people_row("Recurring Role")
WRITERS_ROW = people_row("Writer")
DIRECTORS_ROW = people_row("Director")
