"""
Service de publication de la liste enrichie vers le catalogue distant.
"""

from loguru import logger

from dlna_updater.core.entities import EnrichedRecord
from dlna_updater.core.ports import ICatalogPublisher


class PublisherService:
    """
    Publie la liste complète des vidéos enrichies.

    Un échec (PublishError) est fatal et n'est pas relancé.
    """

    def __init__(self, catalog: ICatalogPublisher) -> None:
        self._catalog = catalog

    def ensure_ready(self) -> None:
        """Lève ConfigurationError si la clé du catalogue est absente."""
        self._catalog.ensure_configured()

    async def close(self) -> None:
        await self._catalog.close()

    async def publish(self, records: list[EnrichedRecord]) -> None:
        """
        Envoie les vidéos enrichies, dans l'ordre, au catalogue.

        Args:
            records: Vidéos enrichies par le Resolver

        Raises:
            PublishError: En cas d'échec de transport ou d'authentification
        """
        payload = [record.to_payload() for record in records]
        await self._catalog.publish(payload)
        logger.debug("Catalogue publié", count=len(payload))
