"""
Immutable snapshots of scraped entities.

Exports:
- SeriesDetails: Series metadata snapshot
- EpisodeDetails: Episode metadata snapshot
"""

from tvcom.core.entities.media import EpisodeDetails, SeriesDetails

__all__ = [
    "EpisodeDetails",
    "SeriesDetails",
]
