"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports transport : Contrat du client HTTP
- ITransport : GET bloquant avec User-Agent
- FetchResult : Resultat succes/echec d'une requete
"""

from tvcom.core.ports.transport import FetchResult, ITransport

__all__ = [
    "FetchResult",
    "ITransport",
]
