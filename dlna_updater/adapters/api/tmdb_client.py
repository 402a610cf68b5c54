"""
Client TMDB pour la recherche de films/series et de leurs IDs externes.

Implemente l'interface IMetadataAPIClient pour TMDB (The Movie Database).
Aucun retry : toute erreur HTTP ou réseau est convertie en ExternalApiError.

Usage:
    client = TMDBClient(api_key="your_key")
    results = await client.search("inception", MediaType.MOVIE)
    imdb_id = await client.get_external_id(results[0].id, MediaType.MOVIE)
    await client.close()
"""

from typing import Any, Optional

import httpx

from dlna_updater.core.errors import ConfigurationError, ExternalApiError
from dlna_updater.core.ports import IMetadataAPIClient, SearchResult
from dlna_updater.core.value_objects import MediaType

# Chemin TMDB par type de média
_TMDB_PATHS = {
    MediaType.MOVIE: "movie",
    MediaType.SERIES: "tv",
}


class TMDBClient(IMetadataAPIClient):
    """
    Client API TMDB.

    Implemente IMetadataAPIClient avec:
    - Recherche par titre sur /search/movie ou /search/tv
    - Récupération de l'ID IMDb via /{movie|tv}/{id}/external_ids

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3"

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = TMDB_BASE_URL,
        language: Optional[str] = None,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Clé API TMDB (v3) ou Read Access Token (v4)
            base_url: URL de base de l'API
            language: Langue des résultats (ex: "fr-FR"), non envoyée si None
            timeout: Timeout HTTP en secondes
        """
        self._api_key = api_key
        self._base_url = base_url
        self._language = language
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le crée si nécessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caractères hex) : passée en paramètre api_key
        - Read Access Token v4 (long JWT) : passé en header Bearer

        Raises:
            ConfigurationError: Si aucune clé API n'est configurée
        """
        self.ensure_configured()

        if self._client is None or self._client.is_closed:
            is_v4_token = len(self._api_key) > 40

            headers = {"Accept": "application/json"}
            params = {}

            if is_v4_token:
                headers["Authorization"] = f"Bearer {self._api_key}"
            else:
                params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=headers,
                params=params,
                timeout=self._timeout,
            )
        return self._client

    def ensure_configured(self) -> None:
        if not self._api_key:
            raise ConfigurationError("Clé API TMDB manquante (tmdb_key)")

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    async def _get(self, url: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """GET JSON ; les erreurs httpx sont converties en ExternalApiError."""
        client = self._get_client()
        try:
            response = await client.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise ExternalApiError(
                f"TMDB {url}: HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise ExternalApiError(f"TMDB {url}: {e}") from e

    async def search(self, query: str, media_type: MediaType) -> list[SearchResult]:
        """
        Recherche des films ou series par titre.

        Args:
            query: Titre normalisé à rechercher
            media_type: MOVIE (/search/movie) ou SERIES (/search/tv)

        Returns:
            Liste de SearchResult dans l'ordre de l'API (vide si aucun résultat)
        """
        params = {"query": query}
        if self._language:
            params["language"] = self._language

        data = await self._get(f"/search/{_TMDB_PATHS[media_type]}", params=params)

        results = []
        for item in data.get("results", []):
            if media_type == MediaType.SERIES:
                localized_title = item.get("name", "")
                original_title = item.get("original_name", "")
                release_date = item.get("first_air_date", "")
            else:
                localized_title = item.get("title", "")
                original_title = item.get("original_title", "")
                release_date = item.get("release_date", "")

            year = int(release_date[:4]) if release_date and len(release_date) >= 4 else None

            results.append(
                SearchResult(
                    id=str(item["id"]),
                    title=localized_title or original_title,
                    original_title=original_title if original_title != localized_title else None,
                    year=year,
                    source=self.source,
                )
            )

        return results

    async def get_external_id(self, media_id: str, media_type: MediaType) -> Optional[str]:
        """
        Recupere l'ID IMDb d'un film ou d'une série.

        Args:
            media_id: ID TMDB
            media_type: MOVIE ou SERIES

        Returns:
            ID IMDb (format ttXXXXXXX), ou None si TMDB n'en connait pas
        """
        data = await self._get(f"/{_TMDB_PATHS[media_type]}/{media_id}/external_ids")
        return data.get("imdb_id") or None

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit être appelé à la fin de l'utilisation pour libérer
        les ressources réseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
