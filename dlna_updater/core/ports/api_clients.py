"""
Interfaces ports pour les clients API.

Interfaces abstraites (ports) définissant les contrats pour l'API de recherche
de métadonnées (TMDB) et pour le catalogue distant qui reçoit la liste enrichie.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from dlna_updater.core.value_objects import MediaType


@dataclass
class SearchResult:
    """
    Résultat de recherche depuis l'API de métadonnées.

    Les résultats sont retournés dans l'ordre de pertinence de l'API,
    aucun re-classement local n'est effectué.

    Attributs :
        id : ID spécifique à l'API (ID TMDB)
        title : Titre localisé (ou générique) depuis l'API
        original_title : Titre en langue originale, None s'il est identique au titre
        year : Année de sortie/diffusion
        source : Identifiant de la source API ("tmdb")
    """

    id: str
    title: str
    original_title: Optional[str] = None
    year: Optional[int] = None
    source: str = ""

    @property
    def display_title(self) -> str:
        """Titre original en priorité, sinon titre localisé."""
        return self.original_title or self.title


class IMetadataAPIClient(ABC):
    """
    Interface de l'API de recherche de métadonnées.

    Les implémentations lèvent ExternalApiError en cas d'échec réseau ou HTTP.
    """

    @abstractmethod
    async def search(self, query: str, media_type: MediaType) -> list[SearchResult]:
        """
        Recherche des médias par titre.

        Args :
            query : Requête de recherche (titre normalisé)
            media_type : MOVIE ou SERIES, détermine l'index interrogé

        Retourne :
            Liste des résultats dans l'ordre de pertinence de l'API (vide si aucun)
        """
        ...

    @abstractmethod
    async def get_external_id(self, media_id: str, media_type: MediaType) -> Optional[str]:
        """
        Récupère l'identifiant externe stable (IMDb) d'un résultat.

        Args :
            media_id : ID spécifique à l'API
            media_type : MOVIE ou SERIES

        Retourne :
            Identifiant externe, ou None si l'API n'en connaît pas
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'tmdb')."""
        ...

    def ensure_configured(self) -> None:
        """
        Vérifie les paramètrès obligatoires (clé API) sans appel réseau.

        Lève ConfigurationError si le client ne peut pas fonctionner.
        """

    async def close(self) -> None:
        """Libère les ressources réseau (aucune par défaut)."""


class ICatalogPublisher(ABC):
    """
    Interface du catalogue distant.

    Les implémentations lèvent PublishError en cas d'échec (transport ou authentification).
    """

    @abstractmethod
    async def publish(self, payload: list[dict[str, Any]]) -> None:
        """Envoie la liste complète des vidéos enrichies."""
        ...

    def ensure_configured(self) -> None:
        """Vérifie les paramètrès obligatoires (clé API) sans appel réseau."""

    async def close(self) -> None:
        """Libère les ressources réseau (aucune par défaut)."""
