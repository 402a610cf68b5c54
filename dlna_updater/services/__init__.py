"""
Couche application (cas d'utilisation).

Services :
- title_normalizer : normalisation pure des titres bruts
- harvester : moisson récursive de l'arborescence DLNA
- resolver : résolution des métadonnées via TMDB
- change_detector : empreinte de moisson et détection de changement
- publisher : publication vers le catalogue distant
- pipeline : orchestration complète
"""
