"""
Container d'injection de dépendances via dependency-injector.

Fournit une gestion centralisée des dépendances pour la CLI :
clients (DLNA, TMDB, catalogue), fichier d'état et services du pipeline.
"""

from typing import Optional

from dependency_injector import containers, providers

from .adapters.api.catalog_client import CatalogClient
from .adapters.api.tmdb_client import TMDBClient
from .adapters.dlna.content_directory_client import ContentDirectoryClient
from .adapters.persistence.config_store import JsonConfigStore
from .config import Settings
from .services.change_detector import ChangeDetectorService
from .services.harvester import HarvesterService
from .services.pipeline import PipelineService
from .services.publisher import PublisherService
from .services.resolver import MetadataResolverService


def resolve_credential(
    explicit: Optional[str],
    config_store: JsonConfigStore,
    key: str,
) -> Optional[str]:
    """Clé fournie par l'environnement, sinon lue dans le fichier d'état."""
    return explicit or config_store.get(key)


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        pipeline = container.pipeline_service()
        result = await pipeline.run(PipelineConfig(root_object_id="2$15"))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Fichier d'état (last_update + clés de l'opérateur)
    config_store = providers.Singleton(
        JsonConfigStore,
        path=config.provided.state_file,
    )

    # Client DLNA - instance explicite partagée par la moisson
    content_directory = providers.Singleton(
        ContentDirectoryClient,
        base_url=config.provided.dlna_base_url,
        description_path=config.provided.dlna_description_path,
        timeout=config.provided.http_timeout,
    )

    # Clients API - clés depuis l'environnement ou le fichier d'état
    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=providers.Callable(
            resolve_credential, config.provided.tmdb_api_key, config_store, "tmdb_key"
        ),
        base_url=config.provided.tmdb_base_url,
        language=config.provided.tmdb_language,
        timeout=config.provided.http_timeout,
    )

    catalog_client = providers.Singleton(
        CatalogClient,
        base_url=config.provided.catalog_base_url,
        api_key=providers.Callable(
            resolve_credential, config.provided.catalog_api_key, config_store, "api_key"
        ),
        timeout=config.provided.http_timeout,
    )

    # Services - Factory pour un état neuf à chaque exécution
    harvester_service = providers.Factory(
        HarvesterService,
        directory=content_directory,
        unwanted_patterns=config.provided.unwanted_patterns,
    )
    change_detector_service = providers.Factory(
        ChangeDetectorService,
        state_store=config_store,
    )
    resolver_service = providers.Factory(
        MetadataResolverService,
        api_client=tmdb_client,
    )
    publisher_service = providers.Factory(
        PublisherService,
        catalog=catalog_client,
    )

    pipeline_service = providers.Factory(
        PipelineService,
        directory=content_directory,
        harvester=harvester_service,
        change_detector=change_detector_service,
        resolver=resolver_service,
        publisher=publisher_service,
    )
