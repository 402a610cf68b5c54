"""
Objets valeur immuables representant des concepts du domaine sans identite.

Exports :
- MediaType : Type de média (MOVIE, SERIES)
- EpisodeMarker : Marqueur saison/épisode
- NormalizedTitle : Titre de recherche et marqueur extraits d'un titre brut
- FolderNode, VideoLeafNode, OtherNode : Nœuds de l'arborescence DLNA
- ContentNode : Union des trois variantes de nœud
"""

from dlna_updater.core.value_objects.content_node import (
    ContentNode,
    FolderNode,
    OtherNode,
    VideoLeafNode,
)
from dlna_updater.core.value_objects.parsed_info import (
    EpisodeMarker,
    MediaType,
    NormalizedTitle,
)

__all__ = [
    "ContentNode",
    "FolderNode",
    "OtherNode",
    "VideoLeafNode",
    "EpisodeMarker",
    "MediaType",
    "NormalizedTitle",
]
