"""
Commandes CLI du pipeline : run et scan.
"""

import asyncio
from typing import Annotated, Optional

import typer
from rich.table import Table

from dlna_updater.adapters.cli.helpers import console, with_container
from dlna_updater.core.errors import DlnaUpdaterError
from dlna_updater.services.pipeline import PipelineConfig, PipelineResult


def run(
    force: Annotated[
        bool,
        typer.Option("--force", help="Ignorer la détection de changement"),
    ] = False,
    dry: Annotated[
        bool,
        typer.Option("--dry", help="Résoudre les métadonnées sans publier"),
    ] = False,
    root: Annotated[
        Optional[str],
        typer.Option("--root", help="ObjectID racine (défaut: configuration)"),
    ] = None,
) -> None:
    """Moissonne le serveur DLNA, enrichit via TMDB et publie si la liste a changé."""
    try:
        result = asyncio.run(_run_async(force=force, dry_run=dry, root=root))
    except DlnaUpdaterError as e:
        console.print(f"[bold red]Erreur:[/bold red] {e}")
        raise typer.Exit(code=1)

    _print_summary(result)


@with_container()
async def _run_async(container, force: bool, dry_run: bool, root: Optional[str]) -> PipelineResult:
    """Implementation async de la commande run."""
    settings = container.config()
    pipeline = container.pipeline_service()
    return await pipeline.run(
        PipelineConfig(
            root_object_id=root or settings.root_object_id,
            force=force,
            dry_run=dry_run,
        )
    )


def _print_summary(result: PipelineResult) -> None:
    """Affiche le résumé d'une exécution."""
    console.print(f"\n[bold]Résumé:[/bold] {len(result.harvested)} vidéo(s) moissonnée(s)")
    if result.subfolder_errors:
        console.print(f"  [yellow]{len(result.subfolder_errors)}[/yellow] dossier(s) inaccessible(s)")
    if not result.changed:
        console.print("  [dim]Aucun changement depuis la dernière publication.[/dim]")
        return

    console.print(f"  [green]{len(result.enriched)}[/green] identifiée(s)")
    if result.unmatched:
        console.print(f"  [red]{len(result.unmatched)}[/red] non identifiée(s)")
    if result.failed:
        console.print(f"  [red]{len(result.failed)}[/red] échec(s) API")
    if result.published:
        console.print("  [green]✓[/green] Catalogue publié")
    else:
        console.print("  [dim]-[/dim] Publication ignorée (dry-run)")


def scan(
    root: Annotated[
        Optional[str],
        typer.Option("--root", help="ObjectID racine (défaut: configuration)"),
    ] = None,
) -> None:
    """Moissonne le serveur DLNA et affiche les titres normalises, sans effet de bord."""
    try:
        records = asyncio.run(_scan_async(root=root))
    except DlnaUpdaterError as e:
        console.print(f"[bold red]Erreur:[/bold red] {e}")
        raise typer.Exit(code=1)

    table = Table(title=f"{len(records)} vidéo(s)")
    table.add_column("Fichier", overflow="fold")
    table.add_column("Recherche", style="cyan")
    table.add_column("Episode", style="green")
    for record in records:
        marker = record.episode_marker
        episode = f"S{marker.season:02d}E{marker.episode:02d}" if marker else ""
        table.add_row(record.filename, record.search_title, episode)
    console.print(table)


@with_container()
async def _scan_async(container, root: Optional[str]):
    """Implementation async de la commande scan."""
    settings = container.config()
    pipeline = container.pipeline_service()
    return await pipeline.harvest(root or settings.root_object_id)
