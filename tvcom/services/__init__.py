"""
Couche application : entites a remplissage paresseux et services associes.

- Series : serie TV, champs et listes d'episodes a la demande
- Episode : episode TV, champs a la demande, reference vers la serie
- SeriesResolver : resolution nom -> ID via la recherche TV.com
- PageCache : page HTML normalisee, telechargee une seule fois
"""

from tvcom.services.episode import Episode
from tvcom.services.page_cache import PageCache
from tvcom.services.series import Series
from tvcom.services.series_resolver import SeriesResolver

__all__ = [
    "Episode",
    "PageCache",
    "Series",
    "SeriesResolver",
]
