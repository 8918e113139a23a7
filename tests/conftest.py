"""
Fixtures pytest partagees pour les tests ReelMatch.

Ce module contient les fixtures communes utilisees dans les tests:
- Catalogue de scenes reproduisant les cas de desambiguisation reels
- Catalogue de films (titre + annee)
- Store en memoire, mocks des ports de store
- Parser, matcher et moteur assembles
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from reelmatch.adapters.memory.library_store import InMemoryLibraryStore
from reelmatch.adapters.parsing.release_parser import ReleaseTitleParser
from reelmatch.config import Settings
from reelmatch.core.entities.library import Credit, LibraryEntry, Studio
from reelmatch.core.ports.stores import ILibraryStore, IStudioStore
from reelmatch.services.matcher import CandidateMatcherService
from reelmatch.services.matching_engine import MatchingEngine
from reelmatch.services.studio_aliases import build_studio_alias_table

STUDIO_ID = "studio-1"
BELLESA_ID = "bellesa-house"


def _scene(
    entry_id: int,
    title: str,
    release_date: str,
    *performers: str,
    studio_foreign_id: str = STUDIO_ID,
) -> LibraryEntry:
    """Construit une scene avec ses credits."""
    return LibraryEntry(
        id=entry_id,
        title=title,
        studio_foreign_id=studio_foreign_id,
        release_date=release_date,
        credits=[Credit(performer_name=name) for name in performers],
    )


@pytest.fixture
def studios() -> list[Studio]:
    """Studios connus du catalogue de scenes."""
    return [
        Studio(id=1, foreign_id=STUDIO_ID, title="Studio"),
        Studio(id=2, foreign_id=BELLESA_ID, title="Bellesa House"),
    ]


@pytest.fixture
def scene_entries() -> list[LibraryEntry]:
    """
    Catalogue de scenes.

    Plusieurs scenes partagent un studio et une date : la selection doit se
    faire par les performers credites, puis par la regle de departage.
    """
    return [
        _scene(1, "Invalid", "2020-01-01"),
        _scene(2, "Title Vol 1 E2", "2020-05-29"),
        _scene(3, "Title", "2020-04-01", "Quinn"),
        _scene(4, "Episode Title", "2020-04-02", "Quinn"),
        _scene(5, "Episode Title", "2024-06-11", "Quinn"),
        _scene(6, "Milk & Chocolate Before Bed🥛🕟😵‍💫🕦🥛", "2024-07-30", "Quinn"),
        _scene(7, "Title", "2021-01-08", "Quinn Waters"),
        _scene(8, "Other Title", "2021-01-09", "Quinn Waters", "Carrie Sage"),
        _scene(9, "White Winter", "2021-01-09", "Angela White"),
        _scene(10, "Another Title", "2021-01-08", "Carrie Sage"),
        _scene(11, "Title", "2019-05-18", "Quinn"),
        _scene(12, "Title", "2019-05-18", "Quinn", "Carrie"),
        _scene(13, "Other Title", "2019-05-18", "Quinn"),
        _scene(14, "Another Title", "2019-05-18", "Carrie"),
        _scene(15, "Other Title", "2019-05-18", "Quinn"),
        _scene(
            16,
            "Episode 200: Violet & Victor",
            "2024-08-15",
            "Violet Myers",
            "Victor Ray",
            studio_foreign_id=BELLESA_ID,
        ),
        _scene(17, "Title", "2024-06-12"),
        _scene(18, "Title", "2024-06-12"),
    ]


@pytest.fixture
def movie_entries() -> list[LibraryEntry]:
    """Catalogue de films (titre + annee)."""
    return [
        LibraryEntry(id=101, title="Batman", year=2000),
        LibraryEntry(id=102, title="Batman", year=1999),
        LibraryEntry(id=103, title="The Dark Knight", year=2008),
    ]


@pytest.fixture
def library_store(
    scene_entries: list[LibraryEntry],
    movie_entries: list[LibraryEntry],
    studios: list[Studio],
) -> InMemoryLibraryStore:
    """Store en memoire charge avec les catalogues de scenes et de films."""
    return InMemoryLibraryStore(entries=scene_entries + movie_entries, studios=studios)


@pytest.fixture
def parser() -> ReleaseTitleParser:
    """Parser de releases sans extraction des tags qualite (plus rapide)."""
    return ReleaseTitleParser(detect_quality_tags=False)


@pytest.fixture
def matcher() -> CandidateMatcherService:
    """Matcher avec la regle de departage par defaut."""
    return CandidateMatcherService()


@pytest.fixture
def engine(
    library_store: InMemoryLibraryStore,
    parser: ReleaseTitleParser,
    matcher: CandidateMatcherService,
) -> MatchingEngine:
    """Moteur assemble sur le store en memoire."""
    return MatchingEngine(
        title_parser=parser,
        library_store=library_store,
        studio_store=library_store,
        alias_table=build_studio_alias_table(library_store),
        matcher=matcher,
    )


@pytest.fixture
def mock_library_store() -> MagicMock:
    """
    Mock de ILibraryStore pour les tests.

    Retourne des listes vides par defaut.
    Configurer le mock dans chaque test pour des comportements specifiques.
    """
    mock = MagicMock(spec=ILibraryStore)
    mock.get_candidates_by_clean_title.return_value = []
    mock.get_candidates_by_studio_and_date.return_value = []
    return mock


@pytest.fixture
def mock_studio_store() -> MagicMock:
    """
    Mock de IStudioStore pour les tests.

    Aucun studio connu par defaut.
    """
    mock = MagicMock(spec=IStudioStore)
    mock.get_all_studios.return_value = []
    mock.find_all_by_clean_title.return_value = []
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Ignore le fichier .env pour que l'environnement local n'influence pas les tests.
    """
    return Settings(
        _env_file=None,
        log_file=tmp_path / "logs" / "test.log",
    )
