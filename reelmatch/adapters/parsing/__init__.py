"""
Adaptateurs de parsing pour ReelMatch.

Ce package contient les implementations concretes du port de parsing:
- ReleaseTitleParser: Parse les noms de release (scenes et films)
- date_patterns: Strategies ordonnees de reconnaissance des dates
"""
