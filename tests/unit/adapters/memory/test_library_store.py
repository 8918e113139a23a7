"""
Tests unitaires pour InMemoryLibraryStore.
"""

from reelmatch.adapters.memory.library_store import InMemoryLibraryStore
from reelmatch.core.entities.library import LibraryEntry, Studio
from reelmatch.core.ports.stores import ILibraryStore, IStudioStore


class TestInMemoryLibraryStore:
    """Tests pour le store en memoire."""

    def test_implements_both_ports(self) -> None:
        store = InMemoryLibraryStore()
        assert isinstance(store, ILibraryStore)
        assert isinstance(store, IStudioStore)

    def test_candidates_by_clean_title(self, library_store: InMemoryLibraryStore) -> None:
        """Les titres demandes sont compares sous forme nettoyee."""
        result = library_store.get_candidates_by_clean_title(["Batman"])
        assert sorted(entry.id for entry in result) == [101, 102]

        result = library_store.get_candidates_by_clean_title(["thedarkknight"])
        assert [entry.id for entry in result] == [103]

    def test_candidates_by_studio_and_date(self, library_store: InMemoryLibraryStore) -> None:
        result = library_store.get_candidates_by_studio_and_date("studio-1", "2021-01-08")
        assert sorted(entry.id for entry in result) == [7, 10]

    def test_unknown_studio_or_date(self, library_store: InMemoryLibraryStore) -> None:
        assert library_store.get_candidates_by_studio_and_date("unknown", "2021-01-08") == []
        assert library_store.get_candidates_by_studio_and_date("studio-1", "1999-01-01") == []

    def test_find_studios(self, library_store: InMemoryLibraryStore) -> None:
        result = library_store.find_all_by_clean_title("bellesahouse")
        assert [studio.foreign_id for studio in result] == ["bellesa-house"]

    def test_add_and_returned_lists_are_copies(self) -> None:
        """Modifier un resultat n'affecte pas le store."""
        store = InMemoryLibraryStore()
        store.add_studio(Studio(id=1, foreign_id="s", title="S"))
        store.add_entry(LibraryEntry(id=1, title="Batman", year=1989))

        store.get_all_studios().clear()
        store.get_candidates_by_clean_title(["batman"]).clear()

        assert len(store.get_all_studios()) == 1
        assert len(store.get_candidates_by_clean_title(["batman"])) == 1
