"""
Journalisation de DLNA Updater via loguru.

Deux destinations :
- stderr : lignes horodatées pour l'opérateur (une ligne par vidéo, jalons du pipeline)
- fichier : enregistrements JSON avec rotation, pour relire les exécutions passées
"""

import sys
from pathlib import Path
from typing import Any

from loguru import logger

CONSOLE_FORMAT = (
    "<green>[{time:YYYY-MM-DD HH:mm:ss}]</green> "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)


def _console_handler(level: str) -> dict[str, Any]:
    return {"sink": sys.stderr, "level": level, "format": CONSOLE_FORMAT, "colorize": True}


def _file_handler(log_file: Path, rotation_size: str, retention_count: int) -> dict[str, Any]:
    # Le fichier garde tout le détail, quel que soit le niveau console.
    return {
        "sink": log_file,
        "level": "DEBUG",
        "serialize": True,
        "rotation": rotation_size,
        "retention": retention_count,
        "compression": "zip",
        "enqueue": True,
    }


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/dlna-updater.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """
    Remplace les handlers loguru par la console et le fichier JSON.

    Args :
        log_level : Niveau minimum affiché sur stderr (DEBUG avec --verbose)
        log_file : Fichier JSON, son répertoire est créé au besoin
        rotation_size : Taille déclenchant la rotation (ex: "10 MB")
        retention_count : Nombre d'archives conservées
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.configure(
        handlers=[
            _console_handler(log_level),
            _file_handler(log_file, rotation_size, retention_count),
        ]
    )
    logger.debug(f"Journalisation vers {log_file} (niveau console {log_level})")
