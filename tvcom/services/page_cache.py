"""
Cache d'une page HTML normalisee par entite.

Chaque Series et chaque Episode possede son propre PageCache : la page
resume est telechargee au premier acces a un champ, normalisee, puis
reutilisee pour tous les champs suivants. Pas d'invalidation.
"""

from typing import Optional

from loguru import logger

from tvcom.adapters.parsing.extractors import normalize_document
from tvcom.core.exceptions import FetchFailed
from tvcom.core.ports.transport import ITransport


class PageCache:
    """
    Memoisation paresseuse d'un document HTML normalise.

    Un echec de telechargement leve FetchFailed et n'est pas mis en cache :
    l'acces suivant retente la requete.
    """

    def __init__(
        self,
        transport: ITransport,
        url: str,
        agent: str,
        entity_id: int,
    ) -> None:
        """
        Args:
            transport: Transport HTTP
            url: URL de la page a recuperer
            agent: User-Agent de l'entite proprietaire
            entity_id: ID de l'entite, remonte dans FetchFailed
        """
        self._transport = transport
        self._url = url
        self._agent = agent
        self._entity_id = entity_id
        self._document: Optional[str] = None

    @property
    def is_fetched(self) -> bool:
        """Indique si le document est deja en cache."""
        return self._document is not None

    @property
    def document(self) -> str:
        """
        Retourne le document normalise, en le telechargeant si necessaire.

        Raises:
            FetchFailed: Si le transport signale un echec
        """
        if self._document is None:
            self._document = fetch_document(
                self._transport, self._url, self._agent, self._entity_id
            )
        return self._document


def fetch_document(
    transport: ITransport,
    url: str,
    agent: str,
    entity_id: int,
    normalize: bool = True,
) -> str:
    """
    Telecharge une page et la normalise.

    Args:
        transport: Transport HTTP
        url: URL a recuperer
        agent: User-Agent
        entity_id: ID de l'entite, remonte dans FetchFailed
        normalize: False pour conserver le corps brut

    Raises:
        FetchFailed: Si le transport signale un echec
    """
    result = transport.fetch(url, agent)
    if not result.ok:
        logger.warning("Page indisponible", entity_id=entity_id, url=url, error=result.error)
        raise FetchFailed(entity_id, url, result.error)

    logger.debug("Page recuperee", entity_id=entity_id, url=url, size=len(result.body))
    return normalize_document(result.body) if normalize else result.body
