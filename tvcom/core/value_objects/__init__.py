"""
Objets valeur immutables du domaine.

Exports :
- Fetched : Valeur d'un champ deja recupere
- FieldCache : Cache par entite des champs recuperes
- NOT_APPLICABLE : Marqueur de date explicitement inconnue ("n/a")
"""

from tvcom.core.value_objects.field_state import NOT_APPLICABLE, Fetched, FieldCache

__all__ = [
    "Fetched",
    "FieldCache",
    "NOT_APPLICABLE",
]
