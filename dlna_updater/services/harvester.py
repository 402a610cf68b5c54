"""
Service de moisson de l'arborescence ContentDirectory.

Parcourt récursivement l'annuaire de contenu DLNA à partir d'un nœud racine
et aplatit les vidéos terminales en une liste ordonnée de VideoRecord.

Politique d'erreur :
- Échec de navigation de la racine : TraversalError (fatale)
- Échec de navigation d'un sous-dossier : branche ignorée, erreur journalisée
  et conservée dans subfolder_errors
"""

from typing import Iterable, Optional

from loguru import logger

from dlna_updater.core.entities import VideoRecord
from dlna_updater.core.errors import BrowseError, SubfolderError, TraversalError
from dlna_updater.core.ports import IContentDirectory
from dlna_updater.core.value_objects import ContentNode, FolderNode, VideoLeafNode
from dlna_updater.services.title_normalizer import is_unwanted, normalize_title
from dlna_updater.utils.constants import UNWANTED_PATTERNS


class HarvesterService:
    """
    Moissonneur de vidéos d'un serveur DLNA.

    Les sous-dossiers sont parcourus un par un, dans l'ordre retourne par le
    serveur, ce qui borne le nombre de requetes en cours et rend l'ordre
    des enregistrements deterministe.

    Example:
        harvester = HarvesterService(directory_client)
        records = await harvester.harvest("2$15")
        for error in harvester.subfolder_errors:
            print(error)
    """

    def __init__(
        self,
        directory: IContentDirectory,
        unwanted_patterns: Iterable[str] = UNWANTED_PATTERNS,
    ) -> None:
        """
        Initialise le moissonneur.

        Args:
            directory: Implementation de IContentDirectory
            unwanted_patterns: Motifs de titres à écarter silencieusement
        """
        self._directory = directory
        self._unwanted_patterns = tuple(unwanted_patterns)
        self._visited: set[str] = set()
        self.subfolder_errors: list[SubfolderError] = []

    async def harvest(self, root_id: str) -> list[VideoRecord]:
        """
        Moissonne toutes les vidéos sous le nœud racine.

        Args:
            root_id: ObjectID du nœud racine

        Returns:
            Liste ordonnée des VideoRecord (vide si l'arborescence ne contient aucune vidéo)

        Raises:
            TraversalError: Si la racine ne peut pas être parcourue
        """
        self._visited = {root_id}
        self.subfolder_errors = []

        try:
            children = await self._directory.browse(root_id)
        except BrowseError as e:
            raise TraversalError(root_id, str(e)) from e

        records = await self._collect(children)
        logger.debug(
            "Moisson terminée",
            root_id=root_id,
            records=len(records),
            failed_folders=len(self.subfolder_errors),
        )
        return records

    async def _collect(self, children: list[ContentNode]) -> list[VideoRecord]:
        """Transforme les enfants d'un nœud en enregistrements, en descendant dans les dossiers."""
        records: list[VideoRecord] = []

        for node in children:
            if isinstance(node, FolderNode):
                records.extend(await self._harvest_folder(node))
                continue

            if not isinstance(node, VideoLeafNode):
                continue

            record = self._build_record(node)
            if record is not None:
                records.append(record)

        return records

    async def _harvest_folder(self, folder: FolderNode) -> list[VideoRecord]:
        """Parcourt un sous-dossier ; un échec n'affecte que cette branche."""
        if folder.id in self._visited:
            logger.debug("Dossier déjà parcouru, ignoré", object_id=folder.id)
            return []
        self._visited.add(folder.id)

        try:
            children = await self._directory.browse(folder.id)
        except BrowseError as e:
            error = SubfolderError(folder.id, str(e))
            self.subfolder_errors.append(error)
            logger.warning(f"Sous-dossier ignoré '{folder.title}': {e}")
            return []

        return await self._collect(children)

    def _build_record(self, node: VideoLeafNode) -> Optional[VideoRecord]:
        """Construit le VideoRecord d'une vidéo, None si elle est indésirable."""
        if is_unwanted(node.title, self._unwanted_patterns):
            logger.debug("Vidéo indésirable ignorée", title=node.title)
            return None

        normalized = normalize_title(node.title)
        return VideoRecord(
            filename=node.title,
            search_title=normalized.search_title,
            media_url=node.media_url,
            episode_marker=normalized.episode_marker,
        )
