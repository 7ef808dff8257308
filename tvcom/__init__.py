"""
tvcom-scraper - Extraction des metadonnees series/episodes depuis TV.com.

Ce package interroge les pages HTML de TV.com a la demande et en extrait
les champs (nom, resume, genres, casting, episodes, dates de diffusion).

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (ports, exceptions, objets valeur, snapshots)
- services/ : Series et Episode avec remplissage paresseux des champs
- adapters/ : Couche infrastructure (transport HTTP, extraction HTML, CLI)
"""

from tvcom.core.exceptions import (
    FetchFailed,
    InvalidArgument,
    LookupFailed,
    NotFound,
    TVComError,
)
from tvcom.services.episode import Episode
from tvcom.services.series import Series

__version__ = "0.1.0"

__all__ = [
    "Episode",
    "Series",
    "TVComError",
    "InvalidArgument",
    "LookupFailed",
    "NotFound",
    "FetchFailed",
    "__version__",
]
