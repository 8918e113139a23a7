"""
Candidate matching service.

CandidateMatcherService selects the single best library entry for parsed
release metadata among a candidate pool supplied by the library store.

Strategies:
- Title + year: accepted clean titles, exact year first, else closest year
- Studio + release date: date-scoped candidates disambiguated by performer
  credit overlap with the release tokens

Selection is deterministic: every ranking ends on the lowest entry ID.
"No match" is returned as None, never raised.
"""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from reelmatch.core.entities.library import LibraryEntry
from reelmatch.core.value_objects.match_policy import SceneTieBreak
from reelmatch.utils.helpers import clean_title, tokenize_title


def performer_tokens(entry: LibraryEntry) -> frozenset[str]:
    """
    Collect the normalized tokens of every credited performer name.

    "Quinn Waters" + "Carrie Sage" -> {"quinn", "waters", "carrie", "sage"}
    """
    tokens: set[str] = set()
    for credit in entry.credits:
        tokens |= tokenize_title(credit.performer_name)
    return frozenset(tokens)


def credit_overlap(entry: LibraryEntry, release_tokens: frozenset[str]) -> int:
    """Count the performer-name tokens of an entry found in the release tokens."""
    return len(performer_tokens(entry) & release_tokens)


def title_overlap(entry: LibraryEntry, release_tokens: frozenset[str]) -> int:
    """Count the title tokens of an entry found in the release tokens."""
    return len(tokenize_title(entry.title) & release_tokens)


def _year_distance(candidate_year: Optional[int], year: int) -> float:
    """
    Absolute year difference, infinite when the candidate has no year.
    """
    if candidate_year is None:
        return math.inf
    return abs(candidate_year - year)


@dataclass(frozen=True)
class SceneScore:
    """
    Disambiguation score of a scene candidate.

    Attributes:
        entry: Scored library entry
        credit_overlap: Performer-name tokens found in the release tokens
        title_overlap: Title tokens found in the release tokens
    """

    entry: LibraryEntry
    credit_overlap: int
    title_overlap: int

    @property
    def performer_count(self) -> int:
        return len(self.entry.credits)


class CandidateMatcherService:
    """
    Service selecting the best library entry among candidates.

    Stateless apart from its tie-break policy: safe to share between callers.
    """

    def __init__(self, tie_break: SceneTieBreak = SceneTieBreak.FEWEST_PERFORMERS) -> None:
        self._tie_break = tie_break

    @property
    def tie_break(self) -> SceneTieBreak:
        return self._tie_break

    def find_by_title(
        self,
        clean_titles: Iterable[str],
        year: Optional[int],
        excluded_ids: Iterable[int],
        candidates: Iterable[LibraryEntry],
    ) -> Optional[LibraryEntry]:
        """
        Select the entry matching one of the accepted titles, closest in year.

        Args:
            clean_titles: Accepted clean titles (main title and alternates)
            year: Release year from the parsed title (or None)
            excluded_ids: Entry IDs that must not be returned
            candidates: Pre-fetched candidate pool

        Returns:
            Exact year match if present, else the closest year; ties broken
            by lowest ID. Without a year, the lowest ID. None if no candidate
            survives the title/exclusion filter.
        """
        accepted = {clean_title(title) for title in clean_titles}
        excluded = set(excluded_ids)

        survivors = [
            entry
            for entry in candidates
            if entry.clean_title in accepted and entry.id not in excluded
        ]
        if not survivors:
            return None

        if year is None:
            return min(survivors, key=lambda entry: entry.id)

        return min(survivors, key=lambda entry: (_year_distance(entry.year, year), entry.id))

    def rank_scenes(
        self,
        candidates: Iterable[LibraryEntry],
        release_tokens: Iterable[str],
    ) -> list[SceneScore]:
        """
        Score scene candidates and sort them best first.

        Order: credit overlap (desc), then the tie-break policy:
        - FEWEST_PERFORMERS: fewest credited performers, then lowest ID
        - LOWEST_ID: lowest ID
        - TITLE_OVERLAP: title overlap (desc), then as FEWEST_PERFORMERS

        Args:
            candidates: Scene candidates sharing a studio and release date
            release_tokens: Tokens of the parsed release title

        Returns:
            List of SceneScore, best candidate first
        """
        # Same normalization as performer names, whatever the caller passed
        tokens = tokenize_title(" ".join(release_tokens))

        scores = [
            SceneScore(
                entry=entry,
                credit_overlap=credit_overlap(entry, tokens),
                title_overlap=title_overlap(entry, tokens),
            )
            for entry in candidates
        ]
        scores.sort(key=self._scene_sort_key)
        return scores

    def select_scene(
        self,
        candidates: Iterable[LibraryEntry],
        release_date: str,
        release_tokens: Iterable[str],
    ) -> Optional[LibraryEntry]:
        """
        Select the scene matching a release among same studio/date candidates.

        Candidates published on another date are discarded. A single
        remaining candidate is returned whatever the tokens; several are
        disambiguated with rank_scenes.

        Args:
            candidates: Candidates fetched for the studio and date
            release_date: Normalized release date "YYYY-MM-DD"
            release_tokens: Tokens of the parsed release title

        Returns:
            Best matching entry, or None if no candidate has this date
        """
        dated = [entry for entry in candidates if entry.release_date == release_date]

        if not dated:
            return None
        if len(dated) == 1:
            return dated[0]

        ranking = self.rank_scenes(dated, release_tokens)
        best = ranking[0]
        logger.debug(
            f"{len(dated)} scenes le {release_date}, retenue: {best.entry} "
            f"(performers={best.credit_overlap}, titre={best.title_overlap})"
        )
        return best.entry

    def _scene_sort_key(self, score: SceneScore) -> tuple[int, ...]:
        """Sort key of a scored scene (ascending is best first)."""
        if self._tie_break is SceneTieBreak.LOWEST_ID:
            return (-score.credit_overlap, score.entry.id)
        if self._tie_break is SceneTieBreak.TITLE_OVERLAP:
            return (
                -score.credit_overlap,
                -score.title_overlap,
                score.performer_count,
                score.entry.id,
            )
        return (-score.credit_overlap, score.performer_count, score.entry.id)
