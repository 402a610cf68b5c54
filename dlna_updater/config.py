"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe DLNA_UPDATER_,
et peut optionnellement être fournie via un fichier .env.

Les clés API (TMDB, catalogue) non fournies par l'environnement sont lues dans le
fichier d'état JSON (clés tmdb_key et api_key), comme le format historique config.json.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de dlna_updater/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètrès de l'application avec support des variables d'environnement.

    Tous les paramètrès peuvent être surchargés via des variables d'environnement
    avec le préfixe DLNA_UPDATER_.
    Exemple : DLNA_UPDATER_ROOT_OBJECT_ID='64$0'
    """

    model_config = SettingsConfigDict(
        env_prefix="DLNA_UPDATER_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Serveur DLNA
    dlna_base_url: str = Field(default="http://192.168.2.104:8200")
    dlna_description_path: str = Field(default="/rootDesc.xml")
    root_object_id: str = Field(default="2$15")
    unwanted_patterns: list[str] = Field(default_factory=lambda: ["1xbet"])

    # TMDB
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3")
    tmdb_api_key: Optional[str] = Field(default=None)
    tmdb_language: Optional[str] = Field(default=None)

    # Catalogue distant
    catalog_base_url: str = Field(default="https://orion-dlna.vercel.app")
    catalog_api_key: Optional[str] = Field(default=None)

    http_timeout: float = Field(default=30.0, gt=0)

    # Fichier d'état (last_update + clés de l'opérateur)
    state_file: Path = Field(default=Path("config.json"))

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/dlna-updater.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("state_file", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()
