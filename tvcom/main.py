"""
Point d'entrée CLI de tvcom.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import episode_command, series_command
from .config import Settings
from .logging_config import configure_logging

app = typer.Typer(
    name="tvcom",
    help="Consultation des series et episodes TV.com",
)


def _configure(settings: Settings, log_level: str) -> None:
    configure_logging(
        log_level=log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Logs detailles (requetes HTTP, extractions)"),
    ] = False,
) -> None:
    """tvcom - Metadonnees de series TV depuis TV.com."""
    if verbose:
        _configure(Settings(), "DEBUG")


app.command(name="series")(series_command)
app.command(name="episode")(episode_command)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = Settings()
    typer.echo(f"User-Agent : {config.user_agent}")
    typer.echo(f"Timeout : {config.request_timeout}s (connexion {config.connect_timeout}s)")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"tvcom v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = Settings()
    _configure(settings, settings.log_level)
    logger.debug("Démarrage de tvcom", version=__version__)
    app()


if __name__ == "__main__":
    main()
