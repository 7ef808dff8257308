"""
Transport en memoire pour les tests.

Remplace HttpxTransport : les pages sont servies depuis un dict et chaque
requete est comptee par URL, ce qui permet de verifier qu'un champ ne
declenche qu'un seul telechargement.
"""

from collections import Counter
from typing import Optional

from tvcom.core.ports.transport import FetchResult, ITransport


class StubTransport(ITransport):
    """
    Les URLs absentes de pages repondent en echec (HTTP 404). Les URLs
    listees dans failures echouent jusqu'a ce qu'on les retire.
    """

    def __init__(self, pages: Optional[dict[str, str]] = None) -> None:
        self.pages: dict[str, str] = dict(pages or {})
        self.failures: set[str] = set()
        self.calls: Counter = Counter()
        self.agents: list[str] = []
        self.closed = False

    def fetch(self, url: str, agent: str) -> FetchResult:
        self.calls[url] += 1
        self.agents.append(agent)
        if url in self.failures:
            return FetchResult.failure("connection reset")
        if url not in self.pages:
            return FetchResult.failure("HTTP 404", status_code=404)
        return FetchResult.success(self.pages[url])

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())

    def close(self) -> None:
        self.closed = True
