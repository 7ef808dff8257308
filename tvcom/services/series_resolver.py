"""
Resolution d'un nom de serie en ID TV.com via la page de recherche.
"""

from loguru import logger

from tvcom.adapters.parsing.extractors import extract_search_result
from tvcom.core.exceptions import LookupFailed, NotFound
from tvcom.core.ports.transport import ITransport
from tvcom.utils.constants import DEFAULT_AGENT, search_url


class SeriesResolver:
    """
    Recherche de programmes par nom.

    Une seule requete par resolution, sans retry. Le premier resultat de
    type serie est retenu : mieux vaut connaitre l'ID a l'avance, le
    premier resultat n'est pas toujours celui attendu.
    """

    def __init__(self, transport: ITransport, agent: str = DEFAULT_AGENT) -> None:
        self._transport = transport
        self._agent = agent

    def resolve(self, name: str) -> int:
        """
        Retourne l'ID de la premiere serie trouvee pour ce nom.

        Raises:
            LookupFailed: Si la requete de recherche echoue
            NotFound: Si aucun resultat ne correspond a une serie
        """
        url = search_url(name)
        result = self._transport.fetch(url, self._agent)
        if not result.ok:
            raise LookupFailed(name, result.error)

        series_id = extract_search_result(result.body)
        if series_id is None:
            raise NotFound(name)

        logger.debug("Serie resolue", name=name, series_id=series_id)
        return series_id
