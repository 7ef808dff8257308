"""
Interface port pour le transport HTTP.

Le domaine n'a besoin que d'un GET : une URL et une chaine d'identification
du client (User-Agent) en entree, un succes avec le corps de la reponse ou
un echec avec un message en sortie. L'adaptateur concret (httpx) est fourni
par adapters/http.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FetchResult:
    """
    Resultat d'une requete GET.

    Attributs :
        ok : True si la requete a abouti (statut 2xx)
        body : Corps de la reponse (vide en cas d'echec)
        error : Message d'erreur en cas d'echec
        status_code : Code HTTP si une reponse a ete recue
    """

    ok: bool
    body: str = ""
    error: Optional[str] = None
    status_code: Optional[int] = None

    @classmethod
    def success(cls, body: str, status_code: int = 200) -> "FetchResult":
        """Construit un resultat en succes."""
        return cls(ok=True, body=body, status_code=status_code)

    @classmethod
    def failure(cls, error: str, status_code: Optional[int] = None) -> "FetchResult":
        """Construit un resultat en echec."""
        return cls(ok=False, error=error, status_code=status_code)


class ITransport(ABC):
    """
    Interface du transport HTTP consomme par Series, Episode et SeriesResolver.

    Les implementations ne doivent pas lever d'exception pour une erreur
    reseau ou un statut non-2xx : elles retournent un FetchResult en echec.
    """

    @abstractmethod
    def fetch(self, url: str, agent: str) -> FetchResult:
        """
        Effectue un GET bloquant.

        Args :
            url : URL complete a recuperer
            agent : Chaine d'identification du client (User-Agent)

        Retourne :
            FetchResult en succes ou en echec
        """
        ...
