"""
Entités vidéo du pipeline de moisson.

VideoRecord est produit par le Harvester pour chaque vidéo terminale,
EnrichedRecord est produit par le Resolver et consomme par le Publisher.
Les deux sont transitoires : ils n'existent que le temps d'une exécution.
"""

from dataclasses import dataclass
from typing import Any, Optional

from dlna_updater.core.value_objects import EpisodeMarker, MediaType


@dataclass
class VideoRecord:
    """
    Vidéo aplatie issue de l'arborescence DLNA.

    Attributs :
        filename : Titre brut tel qu'expose par le serveur
        search_title : Titre normalisé utilisé pour la recherche
        episode_marker : Saison/épisode si le titre en contient un
        media_url : URL de lecture de la ressource
    """

    filename: str
    search_title: str
    media_url: str
    episode_marker: Optional[EpisodeMarker] = None

    @property
    def media_type(self) -> MediaType:
        """Classification série/film selon la présence du marqueur."""
        return MediaType.SERIES if self.episode_marker else MediaType.MOVIE


@dataclass
class EnrichedRecord:
    """
    VideoRecord complété par les métadonnées résolues.

    Attributs :
        record : Enregistrement d'origine
        resolved_title : Titre retenu (original, sinon localisé, sinon générique)
        external_id : Identifiant externe stable (IMDb), None si inconnu
        season : Numéro de saison copié du marqueur (None pour un film)
        episode : Numéro d'épisode copié du marqueur (None pour un film)
    """

    record: VideoRecord
    resolved_title: str
    external_id: Optional[str] = None
    season: Optional[int] = None
    episode: Optional[int] = None

    @classmethod
    def from_record(
        cls,
        record: VideoRecord,
        resolved_title: str,
        external_id: Optional[str],
    ) -> "EnrichedRecord":
        """Construit l'enregistrement enrichi en recopiant le marqueur saison/épisode."""
        marker = record.episode_marker
        return cls(
            record=record,
            resolved_title=resolved_title,
            external_id=external_id,
            season=marker.season if marker else None,
            episode=marker.episode if marker else None,
        )

    @property
    def filename(self) -> str:
        return self.record.filename

    @property
    def media_url(self) -> str:
        return self.record.media_url

    def to_payload(self) -> dict[str, Any]:
        """Format d'echange attendu par le catalogue distant."""
        return {
            "title": self.resolved_title,
            "imdb_id": self.external_id,
            "url": self.record.media_url,
            "filename": self.record.filename,
            "season": self.season,
            "episode": self.episode,
        }
