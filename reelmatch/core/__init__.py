"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), et objets valeur.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (adapters, frameworks, stores).

Sous-packages :
- entities/ : Entités de la bibliothèque (LibraryEntry, Credit, Studio)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (ParsedTitle, SceneTieBreak)
"""
