"""
Interfaces ports pour les stores de la bibliotheque.

Interfaces abstraites (ports) définissant ce dont le moteur de matching a
besoin du store externe. Les implémentations (adaptateurs) fournissent les
données (base SQL, API, en mémoire pour les tests, etc.).

Les erreurs levées par un store (indisponibilité, timeout) remontent telles
quelles à l'appelant : le moteur ne les intercepte jamais.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from reelmatch.core.entities.library import LibraryEntry, Studio


class ILibraryStore(ABC):
    """
    Interface de lecture des entrées de la bibliothèque.

    Fournit les pools de candidats au matcher, filtrés côté store
    pour les performances.
    """

    @abstractmethod
    def get_candidates_by_clean_title(self, clean_titles: Iterable[str]) -> list[LibraryEntry]:
        """Récupère les entrées dont le titre nettoyé est dans clean_titles."""
        ...

    @abstractmethod
    def get_candidates_by_studio_and_date(
        self, studio_foreign_id: str, release_date: str
    ) -> list[LibraryEntry]:
        """
        Récupère les entrées d'un studio publiées à une date donnée.

        Args :
            studio_foreign_id : ID externe du studio
            release_date : Date de release normalisée "YYYY-MM-DD"

        Retourne :
            Liste des entrées (zéro, une ou plusieurs : un studio publie
            souvent plusieurs scènes le même jour)
        """
        ...


class IStudioStore(ABC):
    """
    Interface de lecture des studios.

    Résout un titre de studio (nettoyé) vers les studios connus.
    """

    @abstractmethod
    def get_all_studios(self) -> list[Studio]:
        """Liste tous les studios connus (utilisé une fois pour construire la table d'alias)."""
        ...

    @abstractmethod
    def find_all_by_clean_title(self, clean_title: str) -> list[Studio]:
        """Recherche les studios dont le titre nettoyé est égal à clean_title."""
        ...
