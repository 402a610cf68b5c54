"""
Interface port pour le service d'annuaire de contenu (ContentDirectory UPnP).
"""

from abc import ABC, abstractmethod

from dlna_updater.core.value_objects import ContentNode


class IContentDirectory(ABC):
    """
    Contrat de navigation dans une arborescence de contenu distante.

    Les implémentations lèvent BrowseError (ou DidlParseError) si le nœud
    ne peut pas être parcouru.
    """

    @abstractmethod
    async def browse(self, object_id: str) -> list[ContentNode]:
        """
        Liste les enfants directs d'un nœud, dans l'ordre retourné par le serveur.

        Args :
            object_id : ObjectID du nœud à parcourir

        Retourne :
            Nœuds enfants typés (liste vide si le nœud n'a aucun enfant)
        """
        ...

    async def close(self) -> None:
        """Libère les ressources réseau (aucune par défaut)."""

    async def __aenter__(self) -> "IContentDirectory":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
