"""
Transport HTTP base sur httpx.

Implemente ITransport avec un httpx.Client synchrone partage, pour
beneficier du connection pooling entre Series et Episode. Aucune
politique de retry : une requete en echec est remontee telle quelle.
"""

from typing import Optional

import httpx
from loguru import logger

from tvcom.core.ports.transport import FetchResult, ITransport


class HttpxTransport(ITransport):
    """
    Client HTTP bloquant pour TV.com.

    Les erreurs reseau et les statuts non-2xx sont convertis en
    FetchResult en echec, aucune exception httpx ne remonte.

    Example:
        transport = HttpxTransport(timeout=30.0)
        result = transport.fetch("http://www.tv.com/show/31635/summary.html", "tvcom/0.1")
        transport.close()
    """

    def __init__(
        self,
        timeout: float = 30.0,
        connect_timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Initialise le transport.

        Args:
            timeout: Delai maximum d'une requete en secondes
            connect_timeout: Delai maximum d'etablissement de connexion
            client: Client httpx preconfigure (tests), cree a la demande sinon
        """
        self._timeout = httpx.Timeout(timeout, connect=connect_timeout)
        self._client = client

    def _get_client(self) -> httpx.Client:
        """Retourne le client HTTP, cree s'il n'existe pas."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self._timeout,
                follow_redirects=True,
            )
        return self._client

    def fetch(self, url: str, agent: str) -> FetchResult:
        """
        Effectue un GET avec le User-Agent fourni.

        Args:
            url: URL complete
            agent: Valeur du header User-Agent

        Returns:
            FetchResult en succes avec le corps, ou en echec avec le motif
        """
        logger.debug("GET", url=url, agent=agent)
        try:
            response = self._get_client().get(url, headers={"User-Agent": agent})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("Reponse HTTP en erreur", url=url, status=status)
            return FetchResult.failure(f"HTTP {status}", status_code=status)
        except httpx.HTTPError as e:
            logger.warning("Echec de la requete", url=url, error=str(e))
            return FetchResult.failure(str(e) or type(e).__name__)

        return FetchResult.success(response.text, status_code=response.status_code)

    def close(self) -> None:
        """Ferme le client HTTP et libere les ressources."""
        if self._client:
            self._client.close()
            self._client = None
