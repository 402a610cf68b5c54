"""
Normalisation des titres bruts de fichiers vidéo.

Fonctions pures, sans accès réseau :
- normalize_title : titre de recherche + marqueur saison/épisode
- extract_season_episode : marqueur SxxEyy seul
- is_unwanted : filtre des contenus indésirables

Regles de normalize_title, dans l'ordre :
    1. Passage en minuscules
    2. Troncature avant le premier marqueur SxxEyy
    3. Troncature avant le premier marqueur de résolution (1080p, 720p)
    4. ".", "{", "}" et "-" remplacés par des espaces
    5. Suppression des marqueurs de release (RELEASE_TAGS)
    6. Trim puis suppression d'une année finale sur 4 chiffres
    7. Toute suite d'espaces réduite à un seul espace
    8. Trim final
"""

import re
from typing import Iterable, Optional

from dlna_updater.core.value_objects import EpisodeMarker, NormalizedTitle
from dlna_updater.utils.constants import RELEASE_TAGS, UNWANTED_PATTERNS

SEASON_EPISODE_PATTERN = re.compile(r"s(\d{1,2})e(\d{1,2})", re.IGNORECASE)
RESOLUTION_PATTERN = re.compile(r"1080p|720p", re.IGNORECASE)
TRAILING_YEAR_PATTERN = re.compile(r"\b\d{4}$")
RELEASE_TAGS_PATTERN = re.compile(
    "|".join(re.escape(tag) for tag in RELEASE_TAGS), re.IGNORECASE
)
WHITESPACE_PATTERN = re.compile(r"\s+")

_SEPARATORS = str.maketrans({".": " ", "{": " ", "}": " ", "-": " "})


def extract_season_episode(title: str) -> Optional[EpisodeMarker]:
    """
    Extrait le premier marqueur saison/épisode (S02E05, s2e5...) d'un titre.

    Args:
        title: Titre brut

    Returns:
        EpisodeMarker, ou None si le titre n'en contient pas
    """
    match = SEASON_EPISODE_PATTERN.search(title)
    if match is None:
        return None
    return EpisodeMarker(season=int(match.group(1)), episode=int(match.group(2)))


def _truncate_before(pattern: re.Pattern, text: str) -> str:
    match = pattern.search(text)
    return text[: match.start()] if match else text


def normalize_title(raw_title: str) -> NormalizedTitle:
    """
    Convertit un titre brut en titre de recherche.

    Ne lève jamais d'exception : le résultat peut être une chaîne vide.

    Args:
        raw_title: Titre tel qu'expose par le serveur DLNA

    Returns:
        NormalizedTitle (titre de recherche, marqueur saison/épisode optionnel)

    Example:
        >>> normalize_title("The.Show.S01E02.720p.BluRay-RARBG").search_title
        'the show'
    """
    title = raw_title.lower()

    episode_marker = extract_season_episode(title)
    title = _truncate_before(SEASON_EPISODE_PATTERN, title)
    title = _truncate_before(RESOLUTION_PATTERN, title)

    title = title.translate(_SEPARATORS)
    title = RELEASE_TAGS_PATTERN.sub("", title)

    title = TRAILING_YEAR_PATTERN.sub("", title.strip())
    title = WHITESPACE_PATTERN.sub(" ", title).strip()

    return NormalizedTitle(search_title=title, episode_marker=episode_marker)


def is_unwanted(title: str, patterns: Iterable[str] = UNWANTED_PATTERNS) -> bool:
    """Vrai si le titre contient un des motifs indésirables (insensible à la casse)."""
    lowered = title.lower()
    return any(pattern.lower() in lowered for pattern in patterns)
