"""
Utilitaires partages pour les commandes CLI de tvcom.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container et fermant le transport
- exit_on_error : conversion des TVComError en message rouge et code 1
- format_people : jointure des listes de noms pour l'affichage
"""

from contextlib import contextmanager
from functools import wraps
from typing import Iterator, Optional, Sequence

import typer
from loguru import logger
from rich.console import Console

from tvcom.container import Container
from tvcom.core.exceptions import TVComError

console = Console()


def with_container():
    """
    Decorateur qui injecte un container en premier argument.

    Le transport HTTP est ferme a la fin de la commande.

    Usage:
        @with_container()
        def _my_command(container, ...):
            series = container.series(31635)
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            container = Container()
            try:
                return func(container, *args, **kwargs)
            finally:
                container.transport().close()
        return wrapper
    return decorator


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Affiche les erreurs tvcom en rouge et termine la commande avec le code 1."""
    try:
        yield
    except TVComError as e:
        logger.debug("Commande interrompue", error=str(e))
        console.print(f"[red]Erreur :[/red] {e}")
        raise typer.Exit(code=1)


def format_people(names: Optional[Sequence[str]]) -> str:
    """Joint une liste de noms par des virgules, ou un tiret si vide."""
    if not names:
        return "-"
    return ", ".join(names)
