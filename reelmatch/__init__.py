"""
ReelMatch - moteur d'identification de releases video.

Ce package rattache un nom de release brut ("Studio.21.01.08.Title",
"Inception (2010) 1080p") a une entree existante d'une bibliotheque :
parsing du nom, resolution des alias de studios, selection du candidat.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur)
- services/ : Couche application (alias, matching, orchestration)
- adapters/ : Couche infrastructure (parser de releases, store en memoire)
"""
