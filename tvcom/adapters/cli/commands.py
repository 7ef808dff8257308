"""
Commandes CLI de consultation des series et episodes TV.com.

- series : fiche d'une serie (par ID ou par nom), avec ses episodes en option
- episode : fiche d'un episode et sa forme formatee
"""

import json
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.panel import Panel
from rich.table import Table

from tvcom.adapters.cli.helpers import (
    console,
    exit_on_error,
    format_people,
    with_container,
)
from tvcom.core.exceptions import TVComError


def series_command(
    token: Annotated[str, typer.Argument(help="ID TV.com ou nom de la serie")],
    season: Annotated[
        int,
        typer.Option("--season", "-s", min=0, help="Saison a lister (0 = toutes)"),
    ] = 0,
    episodes: Annotated[
        bool,
        typer.Option("--episodes", "-e", help="Affiche la liste des episodes"),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Sortie JSON"),
    ] = False,
) -> None:
    """Affiche une serie TV.com (un nom tout en chiffres est pris pour un ID)."""
    _series(token, season, episodes, as_json)


@with_container()
def _series(container, token: str, season: int, episodes: bool, as_json: bool) -> None:
    """Implementation de la commande series."""
    with exit_on_error():
        series = container.series_from_token(token, season=season)
        details = series.to_details(include_episodes=episodes)

    if as_json:
        typer.echo(json.dumps(details.to_dict(), indent=2, ensure_ascii=False))
        return

    lines = [
        f"[bold]ID :[/bold] {details.id}",
        f"[bold]Genres :[/bold] {format_people(details.genres)}",
        f"[bold]Casting :[/bold] {format_people(details.cast)}",
        f"[bold]Image :[/bold] {details.image or '-'}",
        "",
        details.summary or "[dim]Pas de resume[/dim]",
    ]
    console.print(Panel("\n".join(lines), title=details.name or f"Serie {details.id}"))

    if episodes:
        table = Table(title=f"Episodes (saison {season or 'toutes'})")
        table.add_column("ID", justify="right", style="cyan")
        table.add_column("Titre")
        for episode in details.episodes:
            table.add_row(str(episode.id), episode.name or "")
        console.print(table)


def episode_command(
    episode_id: Annotated[str, typer.Argument(help="ID TV.com de l'episode")],
    template: Annotated[
        Optional[str],
        typer.Option(
            "--format", "-f",
            help="Gabarit (%N serie, %S saison, %E episode, %n titre...)",
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Sortie JSON"),
    ] = False,
) -> None:
    """Affiche un episode TV.com."""
    _episode(episode_id, template, as_json)


@with_container()
def _episode(container, episode_id: str, template: Optional[str], as_json: bool) -> None:
    """Implementation de la commande episode."""
    with exit_on_error():
        episode = container.episode(episode_id)
        details = episode.to_details()

    try:
        formatted = episode.format_details(template)
    except TVComError as e:
        # %N exige la page de la serie : sans lien ou sans page, titre seul
        logger.warning("Formatage impossible", episode_id=details.id, error=str(e))
        formatted = details.name or f"Episode {details.id}"

    if as_json:
        payload = details.to_dict()
        payload["formatted"] = formatted
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    lines = [
        f"[bold]Serie :[/bold] {details.series_id or '-'}",
        f"[bold]Saison :[/bold] {details.season_number if details.season_number is not None else '-'}",
        f"[bold]Episode :[/bold] {details.episode_number if details.episode_number is not None else '-'}",
        f"[bold]Diffusion :[/bold] {details.first_aired or '-'}",
        f"[bold]Acteurs :[/bold] {format_people(details.stars)}",
        f"[bold]Invites :[/bold] {format_people(details.guest_stars)}",
        f"[bold]Roles recurrents :[/bold] {format_people(details.recurring_roles)}",
        f"[bold]Scenario :[/bold] {format_people(details.writers)}",
        f"[bold]Realisation :[/bold] {format_people(details.directors)}",
        "",
        details.summary or "[dim]Pas de resume[/dim]",
    ]
    console.print(Panel("\n".join(lines), title=formatted))
