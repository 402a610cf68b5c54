"""
Utilitaires partagés pour les commandes CLI de DLNA Updater.

Ce module fournit :
- console : instance Rich Console partagée
- with_container : décorateur injectant un container
- mask_key : masquage des clés API à l'affichage
"""

from functools import wraps
from typing import Optional

from rich.console import Console

from dlna_updater.container import Container

console = Console()


def with_container():
    """
    Décorateur qui injecte un container en premier argument.

    Les sessions HTTP des clients sont libérées par le pipeline lui-même
    (portée de la moisson, de la résolution et de la publication).

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            return await func(container, *args, **kwargs)
        return wrapper
    return decorator


def mask_key(key: Optional[str]) -> str:
    if not key:
        return "non définie"
    if len(key) > 12:
        return f"{key[:4]}...{key[-4:]}"
    return "***"
