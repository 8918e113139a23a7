"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- ParsedTitle : Informations extraites d'un nom de release
- SceneTieBreak : Politique de departage des scenes a egalite
"""

from reelmatch.core.value_objects.match_policy import SceneTieBreak
from reelmatch.core.value_objects.parsed_title import ParsedTitle

__all__ = [
    "ParsedTitle",
    "SceneTieBreak",
]
