"""
Politiques de departage du matching de scenes.
"""

from enum import Enum


class SceneTieBreak(Enum):
    """Departage des candidats a egalite de performers reconnus.

    Valeurs:
        FEWEST_PERFORMERS: Moins de performers credites d'abord, puis plus petit ID
        LOWEST_ID: Plus petit ID (entree ajoutee le plus tot)
        TITLE_OVERLAP: Plus de mots du titre retrouves dans la release, puis
            comme FEWEST_PERFORMERS
    """

    FEWEST_PERFORMERS = "fewest_performers"
    LOWEST_ID = "lowest_id"
    TITLE_OVERLAP = "title_overlap"
