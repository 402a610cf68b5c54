"""Persistance de la configuration (fichier JSON)."""

from dlna_updater.adapters.persistence.config_store import JsonConfigStore

__all__ = ["JsonConfigStore"]
