"""
Store en memoire de la bibliotheque.

InMemoryLibraryStore implemente ILibraryStore et IStudioStore sur de simples
listes. Il sert de store par defaut du container, de store de test, et
d'adaptateur pour les appelants qui disposent deja d'un instantane des donnees.
"""

from collections.abc import Iterable

from reelmatch.core.entities.library import LibraryEntry, Studio
from reelmatch.core.ports.stores import ILibraryStore, IStudioStore
from reelmatch.utils import helpers


class InMemoryLibraryStore(ILibraryStore, IStudioStore):
    """
    Implementation en memoire des ports de store.

    Les methodes de lecture retournent des listes neuves : modifier le
    resultat n'affecte pas le store.
    """

    def __init__(
        self,
        entries: Iterable[LibraryEntry] = (),
        studios: Iterable[Studio] = (),
    ) -> None:
        self._entries: list[LibraryEntry] = list(entries)
        self._studios: list[Studio] = list(studios)

    def add_entry(self, entry: LibraryEntry) -> LibraryEntry:
        """Ajoute une entree a la bibliotheque."""
        self._entries.append(entry)
        return entry

    def add_studio(self, studio: Studio) -> Studio:
        """Ajoute un studio."""
        self._studios.append(studio)
        return studio

    # ILibraryStore

    def get_candidates_by_clean_title(self, clean_titles: Iterable[str]) -> list[LibraryEntry]:
        wanted = {helpers.clean_title(title) for title in clean_titles}
        return [entry for entry in self._entries if entry.clean_title in wanted]

    def get_candidates_by_studio_and_date(
        self, studio_foreign_id: str, release_date: str
    ) -> list[LibraryEntry]:
        return [
            entry
            for entry in self._entries
            if entry.studio_foreign_id == studio_foreign_id
            and entry.release_date == release_date
        ]

    # IStudioStore

    def get_all_studios(self) -> list[Studio]:
        return list(self._studios)

    def find_all_by_clean_title(self, clean_title: str) -> list[Studio]:
        wanted = helpers.clean_title(clean_title)
        return [studio for studio in self._studios if studio.clean_title == wanted]
