"""
Episode TV.com avec remplissage paresseux des champs.

Il n'existe pas de recherche d'episode par nom sur TV.com : pour retrouver
un episode par son nom, parcourir Series.episodes().
"""

from typing import TYPE_CHECKING, Optional, Union

from tvcom.adapters.parsing.extractors import Vitals, extract_field
from tvcom.core.entities.media import EpisodeDetails
from tvcom.core.exceptions import InvalidArgument
from tvcom.core.ports.transport import ITransport
from tvcom.core.value_objects.field_state import FieldCache
from tvcom.services.episode_formatter import format_episode
from tvcom.services.identity import validate_id
from tvcom.services.page_cache import PageCache
from tvcom.utils.constants import DEFAULT_AGENT, episode_url

if TYPE_CHECKING:
    from tvcom.services.series import Series


class Episode:
    """
    Episode identifie par son ID TV.com.

    Le nom peut etre fourni a la construction (c'est ce que fait
    Series.episodes()) : il n'est alors jamais extrait de la page.
    Tous les autres champs sont extraits au premier acces.

    Example:
        episode = Episode(475567, transport=transport)
        print(episode.first_aired, episode.format_details())
    """

    def __init__(
        self,
        episode_id: Union[int, str],
        *,
        transport: ITransport,
        name: Optional[str] = None,
        agent: str = DEFAULT_AGENT,
    ) -> None:
        """
        Args:
            episode_id: ID TV.com (entier strictement positif)
            transport: Transport HTTP
            name: Nom deja connu, pour eviter un telechargement
            agent: User-Agent

        Raises:
            InvalidArgument: Si l'ID n'est pas un entier strictement positif
        """
        self._id = validate_id(episode_id, "episode", allow_zero=False)
        self._agent = agent
        self._transport = transport
        self._fields = FieldCache()
        self._page = PageCache(transport, self.url, agent, self._id)
        if name:
            self._fields.fill("name", name)

    @classmethod
    def by_id(
        cls,
        episode_id: Union[int, str],
        *,
        transport: ITransport,
        name: Optional[str] = None,
        agent: str = DEFAULT_AGENT,
    ) -> "Episode":
        """Construit un episode a partir de son ID."""
        return cls(episode_id, transport=transport, name=name, agent=agent)

    @classmethod
    def from_token(
        cls,
        token: Union[int, str, None],
        *,
        transport: ITransport,
        agent: str = DEFAULT_AGENT,
    ) -> "Episode":
        """Construit un episode a partir d'un argument unique, toujours traite comme un ID."""
        return cls(token, transport=transport, agent=agent)

    @property
    def id(self) -> int:
        return self._id

    @property
    def agent(self) -> str:
        return self._agent

    @property
    def url(self) -> str:
        """URL de la page resume de l'episode."""
        return episode_url(self._id)

    def _field(self, tag: str):
        return self._fields.get_or_fill(
            tag, lambda: extract_field(self._page.document, f"episode.{tag}")
        )

    def _vitals(self) -> Vitals:
        # Saison, numero et date sont remplis ensemble
        return self._field("vitals")

    @property
    def name(self) -> Optional[str]:
        """Titre de l'episode."""
        return self._field("name")

    @property
    def summary(self) -> Optional[str]:
        """Resume de l'episode, sans balises <br>."""
        return self._field("summary")

    @property
    def season_number(self) -> Optional[int]:
        """Saison dans laquelle l'episode a ete diffuse."""
        return self._vitals().season_number

    @property
    def episode_number(self) -> Optional[int]:
        """
        Numero global de l'episode dans la serie.

        Ordre de diffusion, pas forcement l'ordre de production.
        """
        return self._vitals().episode_number

    @property
    def first_aired(self) -> Optional[str]:
        """Date de premiere diffusion (YYYY-MM-DD), ou "n/a" si le site l'ignore."""
        return self._vitals().first_aired

    @property
    def stars(self) -> list[str]:
        """Acteurs principaux de l'episode."""
        return self._field("stars")

    @property
    def guest_stars(self) -> list[str]:
        """Invites de l'episode."""
        return self._field("guest_stars")

    @property
    def recurring_roles(self) -> list[str]:
        """Personnes ayant un role recurrent dans l'episode."""
        return self._field("recurring_roles")

    @property
    def writers(self) -> list[str]:
        """Scenaristes de l'episode."""
        return self._field("writers")

    @property
    def directors(self) -> list[str]:
        """Realisateurs de l'episode."""
        return self._field("directors")

    @property
    def series_id(self) -> Optional[int]:
        """ID TV.com de la serie parente."""
        return self._field("series_id")

    def series(self) -> "Series":
        """
        Nouvelle Series pour la serie parente de cet episode.

        Chaque appel construit une nouvelle instance (pas de cache partage).

        Raises:
            InvalidArgument: Si la page ne contient pas de lien vers la serie
        """
        from tvcom.services.series import Series

        series_id = self.series_id
        if series_id is None:
            raise InvalidArgument(f"No series id found for episode {self._id}")
        return Series(series_id, transport=self._transport, agent=self._agent)

    def season(self) -> list["Episode"]:
        """
        Episodes de la meme saison que celui-ci.

        Recupere la liste de la saison aupres de la serie puis ne garde
        que les episodes dont le numero de saison correspond, ce qui
        telecharge la page de chacun.
        """
        season_number = self.season_number
        if season_number is None:
            return []
        return [
            episode
            for episode in self.series().episodes(season_number)
            if episode.season_number == season_number
        ]

    def format_details(self, template: Optional[str] = None) -> str:
        """
        Formate l'episode selon un gabarit (voir episode_formatter).

        Defaut : "%N.s%Se%E - %n", soit "Prison Break.s01e01 - Pilot".
        """
        return format_episode(self, template)

    def to_details(self) -> EpisodeDetails:
        """Snapshot immutable de l'episode (declenche le telechargement si besoin)."""
        return EpisodeDetails(
            id=self._id,
            name=self.name,
            series_id=self.series_id,
            season_number=self.season_number,
            episode_number=self.episode_number,
            first_aired=self.first_aired,
            summary=self.summary,
            stars=tuple(self.stars),
            guest_stars=tuple(self.guest_stars),
            recurring_roles=tuple(self.recurring_roles),
            writers=tuple(self.writers),
            directors=tuple(self.directors),
        )

    def __repr__(self) -> str:
        return f"Episode(id={self._id})"
