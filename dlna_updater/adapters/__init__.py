"""
Adaptateurs (couche infrastructure).

Implementations concretes des ports :
- api/ : clients HTTP (TMDB, catalogue distant)
- dlna/ : client ContentDirectory et parser DIDL-Lite
- persistence/ : fichier de configuration JSON
- cli/ : commandes Typer
"""
