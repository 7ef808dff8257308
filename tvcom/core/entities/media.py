"""
Media metadata snapshots.

Immutable views of what a Series or an Episode has extracted so far,
used for display and JSON export by the CLI.
"""

from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class EpisodeDetails:
    """
    Episode metadata scraped from TV.com.

    Attributes:
        id: TV.com episode ID
        name: Episode title
        series_id: TV.com ID of the parent series
        season_number: Season number
        episode_number: Overall airing order in the series
        first_aired: Air date (YYYY-MM-DD) or "n/a"
        summary: Episode description
        stars: Starring cast names
        guest_stars: Guest star names
        recurring_roles: Recurring role names
        writers: Writer names
        directors: Director names
    """

    id: int
    name: Optional[str] = None
    series_id: Optional[int] = None
    season_number: Optional[int] = None
    episode_number: Optional[int] = None
    first_aired: Optional[str] = None
    summary: Optional[str] = None
    stars: tuple[str, ...] = ()
    guest_stars: tuple[str, ...] = ()
    recurring_roles: tuple[str, ...] = ()
    writers: tuple[str, ...] = ()
    directors: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dict."""
        return asdict(self)


@dataclass(frozen=True)
class SeriesDetails:
    """
    TV series metadata scraped from TV.com.

    Attributes:
        id: TV.com show ID
        name: Series title
        summary: Series description
        genres: Genre names, in page order
        cast: Cast member names, in page order
        image: Thumbnail URL
        episodes: Episode snapshots (empty unless requested)
    """

    id: int
    name: Optional[str] = None
    summary: Optional[str] = None
    genres: tuple[str, ...] = ()
    cast: tuple[str, ...] = ()
    image: Optional[str] = None
    episodes: tuple[EpisodeDetails, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dict."""
        return asdict(self)
