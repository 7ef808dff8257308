"""
Formatage d'un episode selon un gabarit a jetons de deux caracteres.

Jetons reconnus :
    %I  ID de la serie
    %N  Nom de la serie
    %s  Numero de saison
    %S  Numero de saison sur deux chiffres
    %i  ID de l'episode
    %e  Numero d'episode
    %E  Numero d'episode sur deux chiffres
    %n  Nom de l'episode
    %d  Date de premiere diffusion

Un jeton inconnu est recopie tel quel. Seuls les jetons presents dans le
gabarit sont evalues : "%i - %n" ne telecharge pas la page de la serie.
"""

import re
from typing import TYPE_CHECKING, Any, Callable, Optional

from tvcom.utils.constants import DEFAULT_EPISODE_FORMAT

if TYPE_CHECKING:
    from tvcom.services.episode import Episode

_TOKEN = re.compile(r"%(.)", re.DOTALL)


def _padded(value: Optional[int]) -> str:
    return f"{value:02d}" if value is not None else ""


def _text(value: Any) -> str:
    return "" if value is None else str(value)


TOKENS: dict[str, Callable[["Episode"], str]] = {
    "I": lambda ep: _text(ep.series_id),
    "N": lambda ep: _text(ep.series().name),
    "s": lambda ep: _text(ep.season_number),
    "S": lambda ep: _padded(ep.season_number),
    "i": lambda ep: _text(ep.id),
    "e": lambda ep: _text(ep.episode_number),
    "E": lambda ep: _padded(ep.episode_number),
    "n": lambda ep: _text(ep.name),
    "d": lambda ep: _text(ep.first_aired),
}


def format_episode(episode: "Episode", template: Optional[str] = None) -> str:
    """
    Substitue les jetons du gabarit par les champs de l'episode.

    Args:
        episode: Episode a formater
        template: Gabarit (defaut : "%N.s%Se%E - %n")

    Returns:
        Chaine formatee
    """
    if template is None:
        template = DEFAULT_EPISODE_FORMAT

    def _replace(match: re.Match) -> str:
        render = TOKENS.get(match.group(1))
        if render is None:
            return match.group(0)
        return render(episode)

    return _TOKEN.sub(_replace, template)
