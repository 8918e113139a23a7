"""
Business entities representing core domain concepts.

Entities are mutable objects with identity, supplied by the library store.

Exports:
- LibraryEntry: Scene or movie in the catalog
- Credit: Performer attribution within an entry
- Studio: Studio record with its network
"""

from reelmatch.core.entities.library import Credit, LibraryEntry, Studio

__all__ = [
    "Credit",
    "LibraryEntry",
    "Studio",
]
