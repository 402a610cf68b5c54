"""
Entités du domaine.

Exports :
- VideoRecord : Vidéo terminale aplatie issue de l'arborescence DLNA
- EnrichedRecord : VideoRecord complété par les métadonnées TMDB
"""

from dlna_updater.core.entities.video import EnrichedRecord, VideoRecord

__all__ = [
    "EnrichedRecord",
    "VideoRecord",
]
