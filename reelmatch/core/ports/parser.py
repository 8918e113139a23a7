"""
Interface port pour le parsing de noms de release.

Interface abstraite (port) definissant le contrat pour transformer un nom
de release libre en informations structurees.
"""

from abc import ABC, abstractmethod

from reelmatch.core.value_objects.parsed_title import ParsedTitle


class ITitleParser(ABC):
    """
    Interface pour le parsing de noms de release.

    Definit le contrat pour extraire studio, date de release, titre,
    annee, tokens et tags qualite depuis un nom de fichier ou de release.
    """

    @abstractmethod
    def parse(self, raw_title: str) -> ParsedTitle:
        """
        Parse un nom de release et extrait les informations structurees.

        Args:
            raw_title: Nom de release ou de fichier brut

        Retourne:
            ParsedTitle avec les informations extraites. Ne leve jamais :
            une entree non reconnue donne un ParsedTitle avec seulement le titre.
        """
        ...
