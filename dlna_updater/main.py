"""
Point d'entrée CLI de DLNA Updater.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import run, scan
from .adapters.cli.helpers import console, mask_key
from .adapters.persistence.config_store import JsonConfigStore
from .config import Settings
from .core.errors import ConfigurationError
from .container import resolve_credential
from .logging_config import configure_logging

app = typer.Typer(
    name="dlna-updater",
    help="Catalogue les vidéos d'un serveur DLNA et publie la liste enrichie",
)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Logs de debug sur la console"),
    ] = False,
) -> None:
    """DLNA Updater - Moisson DLNA, enrichissement TMDB, publication."""
    settings = Settings()
    configure_logging(
        log_level="DEBUG" if verbose else settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(run)
app.command()(scan)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = Settings()
    store = JsonConfigStore(config.state_file)
    try:
        tmdb_key = resolve_credential(config.tmdb_api_key, store, "tmdb_key")
        catalog_key = resolve_credential(config.catalog_api_key, store, "api_key")
    except ConfigurationError as e:
        console.print(f"[bold red]Erreur:[/bold red] {e}")
        raise typer.Exit(code=1)
    logger.debug("Affichage de la configuration")
    typer.echo(f"Serveur DLNA : {config.dlna_base_url}{config.dlna_description_path}")
    typer.echo(f"ObjectID racine : {config.root_object_id}")
    typer.echo(f"API TMDB : {config.tmdb_base_url} (clé : {mask_key(tmdb_key)})")
    typer.echo(f"Catalogue : {config.catalog_base_url} (clé : {mask_key(catalog_key)})")
    typer.echo(f"Fichier d'état : {config.state_file}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"DLNA Updater v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
