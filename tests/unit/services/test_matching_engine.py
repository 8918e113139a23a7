"""
Tests unitaires pour MatchingEngine.

Reproduit les cas reels de desambiguisation (plusieurs scenes d'un studio
le meme jour), la resolution des studios par alias, la recherche titre +
annee et la propagation des erreurs de store.
"""

from unittest.mock import MagicMock

import pytest

from reelmatch.adapters.memory.library_store import InMemoryLibraryStore
from reelmatch.core.entities.library import Credit, LibraryEntry, Studio
from reelmatch.core.value_objects.match_policy import SceneTieBreak
from reelmatch.services.matcher import CandidateMatcherService
from reelmatch.services.matching_engine import MatchingEngine
from reelmatch.services.studio_aliases import StudioAliasTable, build_studio_alias_table


class TestIdentifyScenes:
    """Tests de bout en bout sur le catalogue de scenes."""

    @pytest.mark.parametrize(
        "raw_title, expected_id",
        [
            ("Studio 2020-05-29 Title Vol 1 E2", 2),
            ("Studio 2020-05-29 Title Vol 1 E2_1", 2),
            (
                "[Studio] Quinn Waters (Title / 08.01.2021) "
                "[2021 г., Straight, VR, 8K, 3840p] [Oculus Rift / Vive]",
                7,
            ),
            ("Studio.21.01.08.Title", 7),
            ("Studio.21.01.08.Quinn Waters", 7),
            ("Studio.21.01.08.Quinn", 7),
            ("Studio.21.01.09.Quinn and Carrie", 8),
            ("Studio.21.01.09.Quinn & Carrie", 8),
            ("Studio.21.01.09.Quinn & Carrie - Other Title", 8),
            ("Studio.21.01.08.Carrie", 10),
            ("Studio.21.01.08.Carrie Sage", 10),
            ("Studio - 2024-07-30 - Milk & Chocolate Before Bed", 6),
            ("Studio - 2024-07-30 - Milk & Chocolate Before Bed🥛🕟😵‍💫🕦🥛", 6),
            ("Bellesa House 2024-08-15 Episode 200 Violet And Victor", 16),
            ("Studio.20.04.01.Title.XXX.1080p.mp4", 3),
            ("Studio.21.01.08.Proper.Carrie.Sage", 10),
            ("Studio.21.01.08.Carrie.Sage.REPACK.XXX.1080p", 10),
        ],
    )
    def test_scene_releases(self, engine: MatchingEngine, raw_title: str, expected_id: int) -> None:
        entry = engine.identify(raw_title)

        assert entry is not None
        assert entry.id == expected_id

    def test_tie_goes_to_fewest_performers(self, engine: MatchingEngine) -> None:
        """Scenes a egalite : celle avec le moins de performers, puis le plus petit ID."""
        entry = engine.identify("Studio.19.05.18.Quinn")
        assert entry.id == 11

    def test_repeated_calls_same_result(self, engine: MatchingEngine) -> None:
        first = engine.identify("Studio.19.05.18.Quinn")
        second = engine.identify("Studio.19.05.18.Quinn")
        assert first is second

    def test_unknown_studio(self, engine: MatchingEngine) -> None:
        assert engine.identify("Unknown Studio 2021-01-08 Title") is None

    def test_no_scene_that_day(self, engine: MatchingEngine) -> None:
        assert engine.identify("Studio.22.02.02.Title") is None

    def test_date_without_studio_is_not_found(self, engine: MatchingEngine) -> None:
        """Scene sans studio : aucune recherche par titre en repli."""
        assert engine.identify("2021-01-08 Title") is None

    def test_malformed_date_is_not_found(self, engine: MatchingEngine) -> None:
        """Date invalide -> repli titre sans annee, aucune entree de ce titre."""
        assert engine.identify("Studio 2020-13-45 Title") is None


class TestIdentifyMovies:
    """Tests de bout en bout sur le catalogue de films."""

    @pytest.mark.parametrize(
        "raw_title, expected_id",
        [
            ("Batman (2000)", 101),
            ("Batman.1999.1080p.BluRay.x264.mkv", 102),
            ("Batman 2003", 101),
            ("Batman", 101),
            ("The.Dark.Knight.2008.720p.mkv", 103),
        ],
    )
    def test_movie_releases(self, engine: MatchingEngine, raw_title: str, expected_id: int) -> None:
        entry = engine.identify(raw_title)

        assert entry is not None
        assert entry.id == expected_id

    def test_excluded_ids(self, engine: MatchingEngine) -> None:
        """Une entree exclue laisse la place a l'annee la plus proche."""
        entry = engine.identify("Batman (2000)", excluded_ids=[101])
        assert entry.id == 102

    def test_unknown_title(self, engine: MatchingEngine) -> None:
        assert engine.identify("Superman (1978)") is None


class TestFindByTitle:
    """Tests pour la recherche titre + annee sur un pool fourni."""

    def test_pool_from_caller(self, engine: MatchingEngine, movie_entries: list[LibraryEntry]) -> None:
        entry = engine.find_by_title(["batman"], 2000, [], movie_entries)
        assert entry.id == 101

    def test_not_found(self, engine: MatchingEngine, movie_entries: list[LibraryEntry]) -> None:
        assert engine.find_by_title(["batman"], 2000, [101, 102], movie_entries) is None


class TestFindStudios:
    """Tests pour la resolution des studios."""

    @pytest.fixture
    def alias_store(self) -> InMemoryLibraryStore:
        """Store avec des studios connus sous un autre nom par les sources."""
        return InMemoryLibraryStore(
            entries=[
                LibraryEntry(
                    id=1,
                    title="Some Scene",
                    studio_foreign_id="bex-id",
                    release_date="2023-03-03",
                    credits=[Credit(performer_name="Quinn Waters")],
                ),
                LibraryEntry(
                    id=2,
                    title="Network Scene",
                    studio_foreign_id="tushy-id",
                    release_date="2023-04-04",
                ),
            ],
            studios=[
                Studio(id=1, foreign_id="bex-id", title="Brazzers Exxtra"),
                Studio(id=2, foreign_id="tushy-id", title="Tushy", network="Vixen"),
            ],
        )

    @pytest.fixture
    def alias_engine(
        self, alias_store: InMemoryLibraryStore, parser, matcher
    ) -> MatchingEngine:
        return MatchingEngine(
            title_parser=parser,
            library_store=alias_store,
            studio_store=alias_store,
            alias_table=build_studio_alias_table(alias_store),
            matcher=matcher,
        )

    def test_exact_title(self, alias_engine: MatchingEngine) -> None:
        studios = alias_engine.find_studios("Brazzers Exxtra")
        assert [studio.foreign_id for studio in studios] == ["bex-id"]

    def test_hardcoded_alias(self, alias_engine: MatchingEngine) -> None:
        """"bex" est resolu vers "Brazzers Exxtra"."""
        studios = alias_engine.find_studios("bex")
        assert [studio.foreign_id for studio in studios] == ["bex-id"]

    def test_network_alias(self, alias_engine: MatchingEngine) -> None:
        """Le network d'un studio le designe aussi."""
        studios = alias_engine.find_studios("Vixen")
        assert [studio.foreign_id for studio in studios] == ["tushy-id"]

    def test_unknown(self, alias_engine: MatchingEngine) -> None:
        assert alias_engine.find_studios("Nobody") == []
        assert alias_engine.find_studios("") == []

    def test_identify_through_alias(self, alias_engine: MatchingEngine) -> None:
        assert alias_engine.identify("bex.23.03.03.Quinn Waters").id == 1
        assert alias_engine.identify("Vixen 2023-04-04 Network Scene").id == 2

    def test_exact_match_skips_aliases(self, parser, matcher, mock_library_store) -> None:
        """Un studio trouve par titre exact n'est pas complete par ses alias."""
        studio_store = MagicMock()
        studio_store.find_all_by_clean_title.return_value = [
            Studio(id=1, foreign_id="bex-id", title="bex")
        ]
        alias_table = MagicMock(spec=StudioAliasTable)
        engine = MatchingEngine(parser, mock_library_store, studio_store, alias_table, matcher)

        studios = engine.find_studios("bex")

        assert [studio.foreign_id for studio in studios] == ["bex-id"]
        alias_table.related_titles.assert_not_called()

    def test_studios_deduplicated(self, parser, matcher, mock_library_store) -> None:
        """Un studio atteint par plusieurs alias n'apparait qu'une fois."""
        studio = Studio(id=1, foreign_id="tushy-id", title="Tushy")
        studio_store = MagicMock()
        studio_store.find_all_by_clean_title.side_effect = lambda key: (
            [studio] if key in ("tushy", "tushynetwork") else []
        )
        alias_table = StudioAliasTable([("Tushy", "Vixen"), ("Tushy Network", "Vixen")])
        engine = MatchingEngine(parser, mock_library_store, studio_store, alias_table, matcher)

        assert engine.find_studios("Vixen") == [studio]


class TestFindByStudioAndReleaseDate:
    """Tests avec des stores simules."""

    @pytest.fixture
    def scene_date_store(self, mock_library_store: MagicMock, scene_entries: list[LibraryEntry]) -> MagicMock:
        """
        Store qui ajoute toujours une entree hors date a ses reponses.

        Le moteur ne doit jamais retourner une entree d'une autre date.
        """
        off_date = scene_entries[0]

        def by_studio_and_date(studio_foreign_id: str, release_date: str) -> list[LibraryEntry]:
            dated = [entry for entry in scene_entries if entry.release_date == release_date]
            return dated + [off_date]

        mock_library_store.get_candidates_by_studio_and_date.side_effect = by_studio_and_date
        return mock_library_store

    @pytest.fixture
    def mocked_engine(
        self, scene_date_store: MagicMock, mock_studio_store: MagicMock, parser, matcher
    ) -> MatchingEngine:
        mock_studio_store.find_all_by_clean_title.return_value = [
            Studio(id=1, foreign_id="studio-1", title="Studio")
        ]
        return MatchingEngine(
            title_parser=parser,
            library_store=scene_date_store,
            studio_store=mock_studio_store,
            alias_table=StudioAliasTable(),
            matcher=matcher,
        )

    @pytest.mark.parametrize(
        "raw_title, expected_id",
        [
            ("Studio 2020-05-29 Title Vol 1 E2", 2),
            ("Studio.21.01.08.Quinn", 7),
            ("Studio.21.01.09.Quinn & Carrie", 8),
            ("Studio.21.01.08.Carrie Sage", 10),
            ("Studio.19.05.18.Quinn", 11),
        ],
    )
    def test_off_date_entries_ignored(
        self, mocked_engine: MatchingEngine, raw_title: str, expected_id: int
    ) -> None:
        assert mocked_engine.identify(raw_title).id == expected_id

    def test_only_off_date_entry(self, mocked_engine: MatchingEngine) -> None:
        """Aucune scene ce jour-la : l'entree hors date n'est pas retournee."""
        assert mocked_engine.find_by_studio_and_release_date("Studio", "2030-01-01", {"title"}) is None

    def test_store_queried_with_studio_and_date(
        self, mocked_engine: MatchingEngine, scene_date_store: MagicMock
    ) -> None:
        mocked_engine.find_by_studio_and_release_date("Studio", "2021-01-08", {"quinn"})

        scene_date_store.get_candidates_by_studio_and_date.assert_called_once_with(
            "studio-1", "2021-01-08"
        )

    @pytest.mark.parametrize("studio_title, release_date", [("", "2021-01-08"), ("Studio", ""), (None, None)])
    def test_missing_inputs(
        self, mocked_engine: MatchingEngine, scene_date_store: MagicMock, studio_title, release_date
    ) -> None:
        assert mocked_engine.find_by_studio_and_release_date(studio_title, release_date, set()) is None
        scene_date_store.get_candidates_by_studio_and_date.assert_not_called()

    def test_lowest_id_policy(self, scene_date_store: MagicMock, mock_studio_store: MagicMock, parser) -> None:
        mock_studio_store.find_all_by_clean_title.return_value = [
            Studio(id=1, foreign_id="studio-1", title="Studio")
        ]
        engine = MatchingEngine(
            parser,
            scene_date_store,
            mock_studio_store,
            StudioAliasTable(),
            CandidateMatcherService(tie_break=SceneTieBreak.LOWEST_ID),
        )

        # 12 (Quinn + Carrie) et 14 (Carrie) a egalite
        entry = engine.identify("Studio.19.05.18.Carrie")
        assert entry.id == 12

    def test_fewest_performers_policy(self, mocked_engine: MatchingEngine) -> None:
        entry = mocked_engine.identify("Studio.19.05.18.Carrie")
        assert entry.id == 14


class TestStoreErrors:
    """Les erreurs des stores remontent telles quelles."""

    def test_library_store_error(self, mock_library_store, mock_studio_store, parser, matcher) -> None:
        mock_studio_store.find_all_by_clean_title.return_value = [
            Studio(id=1, foreign_id="studio-1", title="Studio")
        ]
        mock_library_store.get_candidates_by_studio_and_date.side_effect = TimeoutError("timeout")
        engine = MatchingEngine(parser, mock_library_store, mock_studio_store, StudioAliasTable(), matcher)

        with pytest.raises(TimeoutError):
            engine.identify("Studio.21.01.08.Title")

    def test_studio_store_error(self, mock_library_store, mock_studio_store, parser, matcher) -> None:
        mock_studio_store.find_all_by_clean_title.side_effect = ConnectionError("store down")
        engine = MatchingEngine(parser, mock_library_store, mock_studio_store, StudioAliasTable(), matcher)

        with pytest.raises(ConnectionError):
            engine.identify("Studio.21.01.08.Title")

    def test_title_store_error(self, mock_library_store, mock_studio_store, parser, matcher) -> None:
        mock_library_store.get_candidates_by_clean_title.side_effect = ConnectionError("store down")
        engine = MatchingEngine(parser, mock_library_store, mock_studio_store, StudioAliasTable(), matcher)

        with pytest.raises(ConnectionError):
            engine.identify("Batman (1989)")
