"""
Service de résolution des métadonnées via l'API de recherche (TMDB).

Pour chaque VideoRecord :
    1. Classification série (marqueur SxxEyy) ou film
    2. Recherche du titre normalisé ; aucun résultat = vidéo non identifiée
    3. Premier résultat retenu (classement de l'API, pas de re-classement local)
    4. Titre original, sinon localisé, sinon générique
    5. Second appel pour l'identifiant externe (IMDb)

Chaque vidéo produit une ligne de journal lisible (identifiée ou non),
destinée à la relecture par l'opérateur.
"""

from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from dlna_updater.core.entities import EnrichedRecord, VideoRecord
from dlna_updater.core.errors import ExternalApiError
from dlna_updater.core.ports import IMetadataAPIClient

MATCHED_GLYPH = "🟢"
UNMATCHED_GLYPH = "🔴"


@dataclass
class ResolutionReport:
    """Bilan de la résolution d'une liste de vidéos."""

    enriched: list[EnrichedRecord] = field(default_factory=list)
    unmatched: list[VideoRecord] = field(default_factory=list)
    failed: list[VideoRecord] = field(default_factory=list)


class MetadataResolverService:
    """
    Service d'enrichissement des vidéos moissonnées.

    Les vidéos sont traitées une par une, séquentiellement, pour garder
    un journal ordonné et prévisible.
    """

    def __init__(self, api_client: IMetadataAPIClient) -> None:
        """
        Initialise le service de résolution.

        Args:
            api_client: Client de l'API de recherche (doit implémenter get_external_id)
        """
        self._api_client = api_client

    def ensure_ready(self) -> None:
        """
        Vérifie que le client de recherche est utilisable.

        Raises:
            ConfigurationError: Si la clé API est absente
        """
        self._api_client.ensure_configured()

    async def close(self) -> None:
        await self._api_client.close()

    async def resolve(self, record: VideoRecord) -> Optional[EnrichedRecord]:
        """
        Résout les métadonnées d'une vidéo.

        Args:
            record: Vidéo moissonnée

        Returns:
            EnrichedRecord, ou None si la recherche ne retourne aucun résultat

        Raises:
            ExternalApiError: Si un appel à l'API échoue
        """
        media_type = record.media_type
        results = await self._api_client.search(record.search_title, media_type)

        if not results:
            logger.info(f"{UNMATCHED_GLYPH} {record.search_title} | {record.filename}")
            return None

        best = results[0]
        external_id = await self._api_client.get_external_id(best.id, media_type)
        enriched = EnrichedRecord.from_record(record, best.display_title, external_id)

        logger.info(
            f"{MATCHED_GLYPH} {record.search_title} | {record.filename} \n"
            f"\t{enriched.resolved_title} - {external_id}"
        )
        return enriched

    async def resolve_all(self, records: list[VideoRecord]) -> ResolutionReport:
        """
        Résout toutes les vidéos ; un échec d'API n'écarte que la vidéo concernée.

        Args:
            records: Vidéos moissonnées, dans l'ordre

        Returns:
            ResolutionReport (vidéos enrichies dans l'ordre d'entrée, non identifiées, en échec)
        """
        report = ResolutionReport()

        for record in records:
            try:
                enriched = await self.resolve(record)
            except ExternalApiError as e:
                logger.error(f"Échec API pour '{record.filename}': {e}")
                report.failed.append(record)
                continue

            if enriched is None:
                report.unmatched.append(record)
            else:
                report.enriched.append(enriched)

        return report
