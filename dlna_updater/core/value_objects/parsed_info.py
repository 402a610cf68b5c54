"""
Objets valeur pour les informations extraites des titres de fichiers.

Objets valeur immuables representant le résultat de la normalisation
d'un titre brut (titre de recherche et marqueur saison/épisode) ainsi
que la classification du type de média.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MediaType(Enum):
    """Type de média déduit du titre.

    Valeurs:
        MOVIE: Film (aucun marqueur saison/épisode)
        SERIES: Série TV (marqueur SxxEyy présent)
    """

    MOVIE = "movie"
    SERIES = "series"


@dataclass(frozen=True)
class EpisodeMarker:
    """
    Marqueur saison/épisode extrait d'un titre (ex: S02E05).

    Attributs:
        season: Numéro de saison
        episode: Numéro d'épisode
    """

    season: int
    episode: int


@dataclass(frozen=True)
class NormalizedTitle:
    """
    Résultat de la normalisation d'un titre brut.

    Attributs:
        search_title: Titre nettoye, utilisable comme requête de recherche (peut être vide)
        episode_marker: Marqueur saison/épisode, None pour un film
    """

    search_title: str
    episode_marker: Optional[EpisodeMarker] = None

    @property
    def media_type(self) -> MediaType:
        """Série si un marqueur saison/épisode est présent, film sinon."""
        return MediaType.SERIES if self.episode_marker else MediaType.MOVIE
