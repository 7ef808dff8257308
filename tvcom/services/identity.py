"""
Validation des identifiants TV.com.
"""

import re
from typing import Union

from tvcom.core.exceptions import InvalidArgument

_DIGITS = re.compile(r"^\d+$")


def is_id_token(token: Union[int, str]) -> bool:
    """Indique si un argument unique doit etre traite comme un ID (tout en chiffres)."""
    if isinstance(token, bool):
        return False
    if isinstance(token, int):
        return token >= 0
    return bool(_DIGITS.match(str(token).strip()))


def validate_id(value: Union[int, str, None], kind: str, allow_zero: bool = True) -> int:
    """
    Convertit et valide un identifiant.

    Args:
        value: ID sous forme d'entier ou de chaine de chiffres
        kind: "series" ou "episode", pour le message d'erreur
        allow_zero: False pour exiger un entier strictement positif

    Returns:
        L'identifiant entier

    Raises:
        InvalidArgument: Si l'ID est absent ou n'est pas un entier valide
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidArgument(f"No {kind} id given")
    if not is_id_token(value):
        raise InvalidArgument(f"Invalid {kind} id: {value!r}")

    identifier = int(str(value).strip())
    if identifier == 0 and not allow_zero:
        raise InvalidArgument(f"Invalid {kind} id: {value!r}")
    return identifier


def validate_season(season: Union[int, str, None]) -> int:
    """Valide un selecteur de saison (0 = toutes les saisons)."""
    if season is None:
        return 0
    if not is_id_token(season):
        raise InvalidArgument(f"Invalid season: {season!r}")
    return int(str(season).strip())
