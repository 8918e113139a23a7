"""
Utilitaires et constantes pour ReelMatch.

Ce module contient les constantes et fonctions de normalisation partagees.
"""

from reelmatch.utils.constants import (
    HARDCODED_STUDIO_ALIASES,
    NETWORK_REWRITES,
    QUALITY_TAG_PATTERNS,
    RELEASE_FLAG_PATTERNS,
    TECHNICAL_TAG_PATTERNS,
    TOKEN_JOINERS,
    VIDEO_EXTENSIONS,
)
from reelmatch.utils.helpers import clean_title, collapse_separators, tokenize_title

__all__ = [
    "VIDEO_EXTENSIONS",
    "QUALITY_TAG_PATTERNS",
    "RELEASE_FLAG_PATTERNS",
    "TECHNICAL_TAG_PATTERNS",
    "TOKEN_JOINERS",
    "NETWORK_REWRITES",
    "HARDCODED_STUDIO_ALIASES",
    "clean_title",
    "collapse_separators",
    "tokenize_title",
]
