"""
Extraction des champs depuis les pages HTML de TV.com.

Fonctions pures : un document normalise en entree, une valeur typee en
sortie. Un motif qui ne correspond pas n'est jamais une erreur, la
fonction retourne None ou une liste vide.

Usage:
    document = normalize_document(html)
    name = extract_field(document, "series.name")
    vitals = extract_vitals(document)
"""

from typing import Any, Callable, NamedTuple, Optional

from loguru import logger

from tvcom.adapters.parsing import patterns
from tvcom.core.value_objects.field_state import NOT_APPLICABLE
from tvcom.utils.constants import MONTHS


class Vitals(NamedTuple):
    """Numero d'episode, saison et date de diffusion extraits ensemble."""

    season_number: Optional[int] = None
    episode_number: Optional[int] = None
    first_aired: Optional[str] = None


class EpisodeLink(NamedTuple):
    """Lien vers un episode trouve dans une liste d'episodes."""

    episode_id: int
    name: str


def normalize_document(html: str) -> str:
    """
    Normalise une page HTML pour les motifs d'extraction.

    Chaque ligne est debarrassee de ses espaces de debut et de fin, puis
    les lignes sont jointes par "\\n".
    """
    return "\n".join(line.strip() for line in html.splitlines())


def strip_line_breaks(text: str) -> str:
    """Supprime les balises <br> et <br /> d'un texte."""
    return patterns.LINE_BREAK.sub("", text)


def _first_group(pattern, document: str) -> Optional[str]:
    match = pattern.search(document)
    return match.group(1) if match else None


# --- Series ---


def extract_series_name(document: str) -> Optional[str]:
    """Premier titre <h1> de la zone content-head."""
    return _first_group(patterns.SERIES_NAME, document)


def extract_series_summary(document: str) -> Optional[str]:
    """Resume de la serie, apres l'eventuel bloc "More Pictures"."""
    summary = _first_group(patterns.SERIES_SUMMARY, document)
    if summary is None:
        return None
    return strip_line_breaks(summary)


def extract_genres(document: str) -> list[str]:
    """
    Liste ordonnee des genres suivant le libelle "Show Categories:".

    Chaque entree est debarrassee de son ancre pour ne garder que le texte.
    """
    row = _first_group(patterns.GENRES_ROW, document)
    if row is None:
        return []

    genres = []
    for token in row.split(","):
        match = patterns.GENRE_ANCHOR.search(token)
        genre = match.group(1) if match else token
        genre = genre.strip()
        if genre:
            genres.append(genre)
    return genres


def extract_image(document: str) -> Optional[str]:
    """URL de la vignette du lien "More Pictures"."""
    return _first_group(patterns.SERIES_IMAGE, document)


def extract_cast(document: str) -> list[str]:
    """Noms des membres du casting, dans l'ordre du document."""
    return [match.group(1) for match in patterns.CAST_ANCHOR.finditer(document)]


def extract_episode_links(html: str) -> list[EpisodeLink]:
    """
    Liens d'episodes d'une page de liste, dans l'ordre du document.

    Les lignes sans lien d'episode ne produisent rien.
    """
    links = []
    for line in html.splitlines():
        for match in patterns.EPISODE_LINK.finditer(line):
            links.append(EpisodeLink(int(match.group(1)), match.group(2)))
    return links


def extract_search_result(html: str) -> Optional[int]:
    """ID de la premiere serie trouvee dans une page de resultats de recherche."""
    for line in html.splitlines():
        match = patterns.SEARCH_RESULT.search(line)
        if match:
            return int(match.group(1))
    return None


# --- Episode ---


def extract_episode_name(document: str) -> Optional[str]:
    """Titre <h1> de l'episode."""
    return _first_group(patterns.EPISODE_NAME, document)


def extract_episode_summary(document: str) -> Optional[str]:
    """Resume de l'episode, balises <br> supprimees."""
    summary = _first_group(patterns.EPISODE_SUMMARY, document)
    if summary is None:
        return None
    return strip_line_breaks(summary).strip()


def parse_air_date(raw: Optional[str]) -> Optional[str]:
    """
    Convertit une date TV.com en YYYY-MM-DD.

    Args:
        raw: "Monday August 29, 2005", "August 29, 2005" ou "n/a"

    Returns:
        Date ISO, NOT_APPLICABLE pour "n/a", None si non reconnue
    """
    if raw is None:
        return None
    if raw.strip().lower() == NOT_APPLICABLE:
        return NOT_APPLICABLE

    match = patterns.AIR_DATE.match(raw.strip())
    if not match:
        return None
    month_name, day, year = match.groups()
    month = MONTHS.get(month_name.capitalize())
    if month is None:
        logger.debug("Mois inconnu dans la date de diffusion", raw=raw)
        return None
    return f"{int(year):04d}-{month:02d}-{int(day):02d}"


def extract_vitals(document: str) -> Vitals:
    """
    Numero d'episode, saison et date de diffusion en une seule passe.

    Retourne un Vitals entierement vide si le motif ne correspond pas.
    """
    match = patterns.VITALS.search(document)
    if not match:
        return Vitals()
    episode_number, season_number, first_aired = match.groups()
    return Vitals(
        season_number=int(season_number),
        episode_number=int(episode_number),
        first_aired=parse_air_date(first_aired),
    )


def extract_people(document: str, row_pattern) -> list[str]:
    """
    Noms des personnes d'une ligne de tableau (Star:, Writer:...).

    Seul le texte de chaque ancre est conserve, la note de role entre
    parentheses est ignoree. Un nom peut contenir une virgule
    ("Sammy Davis, Jr.") : la cellule n'est pas decoupee.
    """
    row = _first_group(row_pattern, document)
    if row is None:
        return []
    return [
        match.group(1).strip()
        for match in patterns.PERSON_ANCHOR.finditer(row)
        if match.group(1).strip()
    ]


def extract_series_id(document: str) -> Optional[int]:
    """ID de la serie parente, depuis le lien vers sa page de casting."""
    series_id = _first_group(patterns.SERIES_BACKREF, document)
    return int(series_id) if series_id is not None else None


EXTRACTORS: dict[str, Callable[[str], Any]] = {
    "series.name": extract_series_name,
    "series.summary": extract_series_summary,
    "series.genres": extract_genres,
    "series.image": extract_image,
    "series.cast": extract_cast,
    "episode.name": extract_episode_name,
    "episode.summary": extract_episode_summary,
    "episode.vitals": extract_vitals,
    "episode.stars": lambda doc: extract_people(doc, patterns.STARS_ROW),
    "episode.guest_stars": lambda doc: extract_people(doc, patterns.GUEST_STARS_ROW),
    "episode.recurring_roles": lambda doc: extract_people(
        doc, patterns.RECURRING_ROLES_ROW
    ),
    "episode.writers": lambda doc: extract_people(doc, patterns.WRITERS_ROW),
    "episode.directors": lambda doc: extract_people(doc, patterns.DIRECTORS_ROW),
    "episode.series_id": extract_series_id,
}


def extract_field(document: str, tag: str) -> Any:
    """
    Extrait un champ par son identifiant (ex: "series.genres").

    Raises:
        KeyError: Si le champ n'existe pas dans le catalogue
    """
    value = EXTRACTORS[tag](document)
    if value is None or value == []:
        logger.debug("Motif sans correspondance", field=tag)
    return value
