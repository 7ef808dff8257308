"""
Constantes globales pour tvcom.

Ce module contient :
- Les URLs canoniques de TV.com (series, episodes, listes, recherche)
- Le User-Agent par defaut
- La table des mois pour la conversion des dates de diffusion
- Le gabarit par defaut de Episode.format_details
"""

from urllib.parse import quote_plus

BASE_URL = "http://www.tv.com"

DEFAULT_AGENT = "tvcom-scraper/0.1.0"

# Saison 0 = toutes les saisons
ALL_SEASONS = 0

# Gabarit par defaut : "Prison Break.s01e01 - Pilot"
DEFAULT_EPISODE_FORMAT = "%N.s%Se%E - %n"

MONTHS = {
    "January": 1,
    "February": 2,
    "March": 3,
    "April": 4,
    "May": 5,
    "June": 6,
    "July": 7,
    "August": 8,
    "September": 9,
    "October": 10,
    "November": 11,
    "December": 12,
}


def series_url(series_id: int) -> str:
    """URL de la page resume d'une serie."""
    return f"{BASE_URL}/show/{series_id}/summary.html"


def episode_listing_url(series_id: int, season: int = ALL_SEASONS) -> str:
    """URL de la liste des episodes d'une serie, filtree par saison."""
    return f"{BASE_URL}/show/{series_id}/episode_listings.html?season={season}"


def episode_url(episode_id: int) -> str:
    """URL de la page resume d'un episode."""
    return f"{BASE_URL}/episode/{episode_id}/summary.html"


def search_url(name: str) -> str:
    """URL de recherche de programmes par nom (nom encode pour la query string)."""
    return f"{BASE_URL}/search.php?stype=program&qs={quote_plus(name)}"
