"""
Nœuds de l'arborescence ContentDirectory.

Variantes étiquetées validées à la frontière de parsing DIDL-Lite :
le parcours ne manipule jamais la forme brute des réponses XML.
Ces objets n'existent que le temps d'un parcours.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class FolderNode:
    """Dossier (upnp:class object.container.*) à parcourir récursivement."""

    id: str
    title: str


@dataclass(frozen=True)
class VideoLeafNode:
    """
    Vidéo terminale (upnp:class object.item.videoItem.*).

    Attributs:
        id: ObjectID opaque du nœud
        title: Titre brut affiche par le serveur (dc:title)
        media_url: URL de la ressource principale (premier élément res)
    """

    id: str
    title: str
    media_url: str


@dataclass(frozen=True)
class OtherNode:
    """Tout autre nœud (audio, image, vidéo sans ressource...), ignoré."""

    id: str
    title: str
    upnp_class: str


ContentNode = Union[FolderNode, VideoLeafNode, OtherNode]
