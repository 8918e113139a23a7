"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- parsing/ : Parsing des noms de release (stratégies de date, guessit)
- memory/ : Store de bibliothèque en mémoire

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
Les stores réels (base de données, API) vivent chez l'appelant et
implémentent les mêmes ports.
"""

from reelmatch.adapters.memory.library_store import InMemoryLibraryStore
from reelmatch.adapters.parsing.release_parser import ReleaseTitleParser

__all__ = [
    "InMemoryLibraryStore",
    "ReleaseTitleParser",
]
