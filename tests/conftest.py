"""
Fixtures pytest partagees pour les tests tvcom.

Ce module contient les fixtures communes utilisees dans les tests:
- Transport en memoire pre-charge avec les pages TV.com simulees
- Transport vide (toutes les requetes echouent)
"""

import pytest

from tests.fixtures.stub_transport import StubTransport
from tests.fixtures.tvcom_pages import (
    ALLEN_ID,
    ALLEN_PAGE,
    FINALE_ID,
    FINALE_PAGE,
    LISTING_ALL_SEASONS,
    LISTING_SEASON_1,
    PILOT_ID,
    PILOT_PAGE,
    SEARCH_PAGE,
    SERIES_ID,
    SERIES_PAGE,
)
from tvcom.utils.constants import (
    episode_listing_url,
    episode_url,
    search_url,
    series_url,
)


@pytest.fixture
def stub_transport() -> StubTransport:
    """
    Transport pre-charge avec la serie Prison Break et trois episodes.

    Pages disponibles : resume de la serie, listes saison 1 et toutes
    saisons, recherche "Prison Break", episodes Pilot, Allen et finale.
    """
    return StubTransport(
        {
            series_url(SERIES_ID): SERIES_PAGE,
            episode_listing_url(SERIES_ID, 1): LISTING_SEASON_1,
            episode_listing_url(SERIES_ID, 0): LISTING_ALL_SEASONS,
            search_url("Prison Break"): SEARCH_PAGE,
            episode_url(PILOT_ID): PILOT_PAGE,
            episode_url(ALLEN_ID): ALLEN_PAGE,
            episode_url(FINALE_ID): FINALE_PAGE,
        }
    )


@pytest.fixture
def empty_transport() -> StubTransport:
    """Transport sans aucune page : toutes les requetes echouent."""
    return StubTransport()
