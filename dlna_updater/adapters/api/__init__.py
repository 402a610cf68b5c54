"""Clients HTTP des API externes (TMDB, catalogue distant)."""

from dlna_updater.adapters.api.catalog_client import CatalogClient
from dlna_updater.adapters.api.tmdb_client import TMDBClient

__all__ = ["CatalogClient", "TMDBClient"]
