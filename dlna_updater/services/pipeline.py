"""
Service d'orchestration du pipeline de moisson et de publication.

Enchaîne les étapes :
    0. Vérification des clés API (avant toute écriture du fichier d'état)
    1. Moisson de l'arborescence DLNA (dans la portée du client DLNA)
    2. Détection de changement (ignorée si force)
    3. Résolution des métadonnées
    4. Publication (ignorée si dry_run)

Toutes les entrées/sorties sont attendues séquentiellement.
"""

from dataclasses import dataclass, field

from loguru import logger

from dlna_updater.core.entities import EnrichedRecord, VideoRecord
from dlna_updater.core.errors import SubfolderError
from dlna_updater.core.ports import IContentDirectory
from dlna_updater.services.change_detector import ChangeDetectorService
from dlna_updater.services.harvester import HarvesterService
from dlna_updater.services.publisher import PublisherService
from dlna_updater.services.resolver import MetadataResolverService


@dataclass
class PipelineConfig:
    """Configuration d'une exécution du pipeline."""

    root_object_id: str
    force: bool = False
    dry_run: bool = False


@dataclass
class PipelineResult:
    """Bilan d'une exécution du pipeline."""

    harvested: list[VideoRecord] = field(default_factory=list)
    changed: bool = False
    enriched: list[EnrichedRecord] = field(default_factory=list)
    unmatched: list[VideoRecord] = field(default_factory=list)
    failed: list[VideoRecord] = field(default_factory=list)
    subfolder_errors: list[SubfolderError] = field(default_factory=list)
    published: bool = False


class PipelineService:
    """
    Orchestrateur Harvester -> ChangeDetector -> Resolver -> Publisher.

    Utilisation typique:
        pipeline = container.pipeline_service()
        result = await pipeline.run(PipelineConfig(root_object_id="2$15", dry_run=True))
    """

    def __init__(
        self,
        directory: IContentDirectory,
        harvester: HarvesterService,
        change_detector: ChangeDetectorService,
        resolver: MetadataResolverService,
        publisher: PublisherService,
    ) -> None:
        self._directory = directory
        self._harvester = harvester
        self._change_detector = change_detector
        self._resolver = resolver
        self._publisher = publisher

    async def harvest(self, root_object_id: str) -> list[VideoRecord]:
        """Moissonne l'arborescence ; la session DLNA est libérée en sortie."""
        async with self._directory:
            return await self._harvester.harvest(root_object_id)

    async def run(self, config: PipelineConfig) -> PipelineResult:
        """
        Exécute le pipeline complet.

        Les clés API sont vérifiées avant la moisson : une clé absente ne doit
        pas laisser une empreinte enregistrée sans publication.

        Args:
            config: Configuration de l'exécution

        Returns:
            PipelineResult ; changed=False signifie que rien n'a été fait après la moisson

        Raises:
            ConfigurationError: Si une clé API nécessaire est absente
            TraversalError: Si la racine de l'arborescence est inaccessible
            PublishError: Si la publication échoue
        """
        self._resolver.ensure_ready()
        if not config.dry_run:
            self._publisher.ensure_ready()

        try:
            return await self._run(config)
        finally:
            await self._resolver.close()
            await self._publisher.close()

    async def _run(self, config: PipelineConfig) -> PipelineResult:
        result = PipelineResult()
        result.harvested = await self.harvest(config.root_object_id)
        result.subfolder_errors = list(self._harvester.subfolder_errors)

        if not config.force and not await self._change_detector.has_changed(result.harvested):
            logger.info(f"Aucun changement ({len(result.harvested)} vidéos), rien à publier.")
            return result
        result.changed = True

        logger.info("Récupération des métadonnées TMDB.")
        report = await self._resolver.resolve_all(result.harvested)
        result.enriched = report.enriched
        result.unmatched = report.unmatched
        result.failed = report.failed

        if config.dry_run:
            logger.info("Mode dry-run : publication ignorée.")
            return result

        logger.info("Envoi des données vers le catalogue.")
        await self._publisher.publish(result.enriched)
        result.published = True
        return result
