"""
Etat de remplissage des champs paresseux.

Chaque champ d'une entite est soit non recupere (absent du cache), soit
recupere avec une valeur, cette valeur pouvant etre vide quand le motif
d'extraction n'a rien trouve. Un champ recupere n'est jamais recalcule.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Optional, TypeVar

T = TypeVar("T")

# Marqueur "non applicable" : la page indique explicitement l'absence de date
NOT_APPLICABLE = "n/a"


@dataclass(frozen=True)
class Fetched(Generic[T]):
    """Valeur d'un champ deja recupere (eventuellement vide)."""

    value: T


def _thaw(value: Any) -> Any:
    # Les NamedTuple (Vitals) sont deja immuables et restent tels quels
    return list(value) if type(value) is tuple else value


class FieldCache:
    """
    Cache par entite associant une cle de champ a son etat Fetched.

    Une cle absente signifie "non recupere". Les cles sont libres :
    "name", "vitals", ("episodes", 2)...

    Example:
        cache = FieldCache()
        name = cache.get_or_fill("name", lambda: extract_name(document))
    """

    def __init__(self) -> None:
        self._states: dict[Hashable, Fetched[Any]] = {}

    def get(self, key: Hashable) -> Optional[Fetched[Any]]:
        """Retourne l'etat Fetched du champ, ou None s'il n'est pas recupere."""
        return self._states.get(key)

    def is_fetched(self, key: Hashable) -> bool:
        """Indique si le champ a deja ete recupere."""
        return key in self._states

    def fill(self, key: Hashable, value: T) -> T:
        """
        Marque le champ comme recupere avec sa valeur et la retourne.

        Une liste est stockee sous forme de tuple ; l'appelant recoit une
        copie qu'il peut modifier sans alterer le cache.
        """
        stored = tuple(value) if isinstance(value, list) else value
        self._states[key] = Fetched(stored)
        return _thaw(stored)

    def get_or_fill(self, key: Hashable, producer: Callable[[], T]) -> T:
        """
        Retourne la valeur en cache ou la produit puis la stocke.

        Si producer leve une exception (echec de telechargement), le champ
        reste non recupere et sera retente au prochain acces.
        """
        state = self._states.get(key)
        if state is not None:
            return _thaw(state.value)
        return self.fill(key, producer())
