"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports client API : Contrats pour les services externes
- IMetadataAPIClient : API de recherche de métadonnées (TMDB)
- SearchResult : Résultat de recherche depuis une API
- ICatalogPublisher : Catalogue distant recevant la liste enrichie

Port annuaire de contenu :
- IContentDirectory : Navigation dans l'arborescence DLNA

Port de persistance :
- IStateStore : Empreinte de la dernière moisson
"""

from dlna_updater.core.ports.api_clients import (
    ICatalogPublisher,
    IMetadataAPIClient,
    SearchResult,
)
from dlna_updater.core.ports.content_directory import IContentDirectory
from dlna_updater.core.ports.state_store import IStateStore

__all__ = [
    # Clients API
    "ICatalogPublisher",
    "IMetadataAPIClient",
    "SearchResult",
    # Annuaire de contenu
    "IContentDirectory",
    # Persistance
    "IStateStore",
]
