"""
Exceptions metier de tvcom.

Toutes les erreurs heritent de TVComError pour permettre a l'appelant
(et a la CLI) de les intercepter en un seul point. Aucune n'est relancee
automatiquement : un echec est immediat et definitif pour l'appel en cours.
"""

from typing import Optional


class TVComError(Exception):
    """Classe de base des erreurs tvcom."""


class InvalidArgument(TVComError, ValueError):
    """Identifiant ou nom absent/invalide a la construction d'une entite."""


class LookupFailed(TVComError):
    """
    La requete de recherche par nom a echoue au niveau transport.

    Attributes:
        name: Nom de serie recherche
        reason: Message d'erreur remonte par le transport
    """

    def __init__(self, name: str, reason: Optional[str] = None) -> None:
        self.name = name
        self.reason = reason
        message = f"Unable to get search results for {name}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class NotFound(TVComError):
    """La recherche a abouti mais aucun resultat ne correspond a une serie."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unable to find a show in the search results for {name}")


class FetchFailed(TVComError):
    """
    Le telechargement d'une page a echoue.

    Attributes:
        entity_id: ID de la serie ou de l'episode concerne
        url: URL demandee
        reason: Message d'erreur remonte par le transport
    """

    def __init__(
        self,
        entity_id: int,
        url: str,
        reason: Optional[str] = None,
    ) -> None:
        self.entity_id = entity_id
        self.url = url
        self.reason = reason
        message = f"Unable to fetch page for {entity_id} ({url})"
        if reason:
            message += f": {reason}"
        super().__init__(message)
