"""
Series TV.com avec remplissage paresseux des champs.

Une Series ne connait que son ID a la construction. La page resume est
telechargee au premier acces a un champ (nom, resume, genres, casting,
image) puis reutilisee. Les listes d'episodes sont telechargees une fois
par saison demandee.

Usage:
    transport = HttpxTransport()
    series = Series.by_name("Prison Break", transport=transport)
    print(series.name, series.genres)
    for episode in series.episodes(season=1):
        print(episode.id, episode.name)
"""

from typing import TYPE_CHECKING, Optional, Union

from tvcom.adapters.parsing.extractors import extract_episode_links, extract_field
from tvcom.core.entities.media import EpisodeDetails, SeriesDetails
from tvcom.core.exceptions import InvalidArgument
from tvcom.core.ports.transport import ITransport
from tvcom.core.value_objects.field_state import FieldCache
from tvcom.services.identity import is_id_token, validate_id, validate_season
from tvcom.services.page_cache import PageCache, fetch_document
from tvcom.services.series_resolver import SeriesResolver
from tvcom.utils.constants import (
    ALL_SEASONS,
    DEFAULT_AGENT,
    episode_listing_url,
    series_url,
)

if TYPE_CHECKING:
    from tvcom.services.episode import Episode


class Series:
    """
    Serie TV identifiee par son ID TV.com.

    Attributes:
        id: ID TV.com (immutable)
        season: Saison par defaut de episodes() (0 = toutes)
        agent: User-Agent utilise pour toutes les requetes de cette serie
    """

    def __init__(
        self,
        series_id: Union[int, str],
        *,
        transport: ITransport,
        season: Union[int, str, None] = ALL_SEASONS,
        agent: str = DEFAULT_AGENT,
    ) -> None:
        """
        Initialise une serie par son ID, sans requete HTTP.

        Args:
            series_id: ID TV.com (entier ou chaine de chiffres)
            transport: Transport HTTP utilise pour toutes les requetes
            season: Saison par defaut pour episodes() (0 = toutes)
            agent: User-Agent

        Raises:
            InvalidArgument: Si l'ID n'est pas un entier positif ou nul
        """
        self._id = validate_id(series_id, "series")
        self._season = validate_season(season)
        self._agent = agent
        self._transport = transport
        self._fields = FieldCache()
        self._page = PageCache(transport, self.url, agent, self._id)

    @classmethod
    def by_id(
        cls,
        series_id: Union[int, str],
        *,
        transport: ITransport,
        season: Union[int, str, None] = ALL_SEASONS,
        agent: str = DEFAULT_AGENT,
    ) -> "Series":
        """Construit une serie a partir d'un ID connu."""
        return cls(series_id, transport=transport, season=season, agent=agent)

    @classmethod
    def by_name(
        cls,
        name: str,
        *,
        transport: ITransport,
        season: Union[int, str, None] = ALL_SEASONS,
        agent: str = DEFAULT_AGENT,
        resolver: Optional[SeriesResolver] = None,
    ) -> "Series":
        """
        Construit une serie en recherchant son nom sur TV.com.

        Effectue exactement une requete de recherche ; l'ID du premier
        resultat est retenu.

        Raises:
            InvalidArgument: Si le nom est vide
            LookupFailed: Si la requete de recherche echoue
            NotFound: Si aucune serie ne correspond
        """
        if not name or not name.strip():
            raise InvalidArgument("No id or name given")
        resolver = resolver or SeriesResolver(transport, agent)
        series_id = resolver.resolve(name)
        return cls(series_id, transport=transport, season=season, agent=agent)

    @classmethod
    def from_token(
        cls,
        token: Union[int, str, None],
        *,
        transport: ITransport,
        season: Union[int, str, None] = ALL_SEASONS,
        agent: str = DEFAULT_AGENT,
        resolver: Optional[SeriesResolver] = None,
    ) -> "Series":
        """
        Construit une serie a partir d'un argument ambigu.

        Une chaine composee uniquement de chiffres est un ID, tout le reste
        est un nom a rechercher. Une serie nommee "24" ne peut donc pas
        etre trouvee par ce biais : utiliser by_name().
        """
        if token is None or (isinstance(token, str) and not token.strip()):
            raise InvalidArgument("No id or name given")
        if is_id_token(token):
            return cls.by_id(token, transport=transport, season=season, agent=agent)
        return cls.by_name(
            str(token),
            transport=transport,
            season=season,
            agent=agent,
            resolver=resolver,
        )

    @property
    def id(self) -> int:
        return self._id

    @property
    def season(self) -> int:
        return self._season

    @property
    def agent(self) -> str:
        return self._agent

    @property
    def url(self) -> str:
        """URL de la page resume de la serie."""
        return series_url(self._id)

    def episode_url(self, season: Union[int, str, None] = None) -> str:
        """URL de la liste des episodes pour une saison (defaut : saison de la serie)."""
        season = self._season if season is None else validate_season(season)
        return episode_listing_url(self._id, season)

    def _field(self, tag: str):
        return self._fields.get_or_fill(
            tag, lambda: extract_field(self._page.document, f"series.{tag}")
        )

    @property
    def name(self) -> Optional[str]:
        """Nom de la serie."""
        return self._field("name")

    @property
    def summary(self) -> Optional[str]:
        """Resume de la serie."""
        return self._field("summary")

    @property
    def genres(self) -> list[str]:
        """
        Genres attribues par TV.com, dans l'ordre de la page.

        Pour une chaine unique : ", ".join(series.genres)
        """
        return self._field("genres")

    @property
    def cast(self) -> list[str]:
        """
        Membres du casting dans l'ordre de TV.com (en general le casting principal d'abord).
        """
        return self._field("cast")

    @property
    def image(self) -> Optional[str]:
        """URL d'une image identifiant la serie."""
        return self._field("image")

    def episodes(self, season: Union[int, str, None] = None) -> list["Episode"]:
        """
        Episodes de la serie, dans l'ordre de la liste TV.com.

        Chaque saison demandee (0 = toutes) est telechargee une seule fois.
        Les episodes retournes ont leur nom pre-rempli.

        Args:
            season: Saison a lister (defaut : saison de la serie)

        Raises:
            FetchFailed: Si la liste ne peut pas etre telechargee
        """
        season = self._season if season is None else validate_season(season)
        return self._fields.get_or_fill(
            ("episodes", season), lambda: self._fetch_episodes(season)
        )

    def _fetch_episodes(self, season: int) -> list["Episode"]:
        from tvcom.services.episode import Episode

        html = fetch_document(
            self._transport,
            self.episode_url(season),
            self._agent,
            self._id,
            normalize=False,
        )
        return [
            Episode(
                link.episode_id,
                name=link.name,
                transport=self._transport,
                agent=self._agent,
            )
            for link in extract_episode_links(html)
            if link.episode_id > 0
        ]

    def to_details(self, include_episodes: bool = False) -> SeriesDetails:
        """
        Snapshot immutable de la serie (declenche le telechargement si besoin).

        Args:
            include_episodes: True pour inclure les episodes de la saison par
                defaut (ID et nom uniquement, sans telecharger leurs pages)
        """
        episodes: tuple[EpisodeDetails, ...] = ()
        if include_episodes:
            episodes = tuple(
                EpisodeDetails(id=episode.id, name=episode.name)
                for episode in self.episodes()
            )
        return SeriesDetails(
            id=self._id,
            name=self.name,
            summary=self.summary,
            genres=tuple(self.genres),
            cast=tuple(self.cast),
            image=self.image,
            episodes=episodes,
        )

    def __repr__(self) -> str:
        return f"Series(id={self._id}, season={self._season})"
