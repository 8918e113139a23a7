"""
Library entities.

Entities representing the catalog entries (scenes and movies), their
performer credits and the studios publishing them. They are owned by the
external library store; the matching engine only reads them.
"""

from dataclasses import dataclass, field
from typing import Optional

from reelmatch.utils.helpers import clean_title


@dataclass(frozen=True)
class Credit:
    """
    Performer attribution within a library entry.

    Attributes:
        character: Role or character name (may be empty for scenes)
        performer_name: Full credited performer name
    """

    character: str = ""
    performer_name: str = ""


@dataclass
class LibraryEntry:
    """
    Catalog entry: a scene (studio + release date) or a movie (title + year).

    Attributes:
        id: Internal store ID
        title: Display title
        year: Release year
        studio_foreign_id: Foreign ID of the publishing studio
        release_date: Release date, normalized "YYYY-MM-DD"
        credits: Performer credits
    """

    id: int
    title: str = ""
    year: Optional[int] = None
    studio_foreign_id: Optional[str] = None
    release_date: Optional[str] = None
    credits: list[Credit] = field(default_factory=list)

    @property
    def clean_title(self) -> str:
        """Matching key, always derived from the current title."""
        return clean_title(self.title)

    @property
    def is_scene(self) -> bool:
        """True for studio + date attributed entries."""
        return bool(self.studio_foreign_id and self.release_date)

    def __str__(self) -> str:
        if self.is_scene:
            return f"[{self.studio_foreign_id} - {self.release_date} - {self.title}]"
        return f"[{self.title} ({self.year})]"


@dataclass
class Studio:
    """
    Studio record from the studio identity store.

    Attributes:
        id: Internal store ID
        foreign_id: Identifier used to scope library entries
        title: Canonical studio title
        network: Parent network / alternate name seen on download sources
    """

    id: int
    foreign_id: str
    title: str = ""
    network: Optional[str] = None

    @property
    def clean_title(self) -> str:
        """Matching key, same normalization as library titles."""
        return clean_title(self.title)
