"""
Fonctions utilitaires partagees dans le projet ReelMatch.

Ce module centralise les normalisations reutilisees a travers le codebase :
- clean_title : cle de matching (titres de scenes, films et studios)
- tokenize_title : tokens de release pour la desambiguisation par performers
- collapse_separators : remplacement des separateurs de release par des espaces

Aucune normalisation Unicode (NFC/NFKC) n'est appliquee : les emoji et
sequences combinees doivent traverser le nettoyage intacts.
"""

import re
import unicodedata

from reelmatch.utils.constants import TOKEN_JOINERS

_SEPARATORS_RE = re.compile(r"[\s._\-]+")
_POSSESSIVE_SUFFIXES = ("'s", "’s")


def _is_punctuation(char: str) -> bool:
    """Vrai pour les categories Unicode de ponctuation (Pc, Pd, Ps, Pe, Pi, Pf, Po)."""
    return unicodedata.category(char).startswith("P")


def clean_title(title: str) -> str:
    """
    Calcule la cle de matching d'un titre.

    Mise en minuscules (casefold), suppression de la ponctuation et des espaces,
    "&" lu comme "and". Les symboles (emoji inclus) et les marques combinantes
    sont conserves. La fonction est idempotente.

    Ex: "Milk & Chocolate Before Bed" -> "milkandchocolatebeforebed"
    """
    if not title:
        return ""
    text = title.replace("&", " and ").casefold()
    return "".join(
        char
        for char in text
        if not char.isspace()
        and not _is_punctuation(char)
        and unicodedata.category(char) != "Cc"
    )


def strip_edge_punctuation(word: str) -> str:
    """Retire la ponctuation en debut et fin de mot (guillemets, virgules, deux-points...)."""
    start = 0
    end = len(word)
    while start < end and _is_punctuation(word[start]):
        start += 1
    while end > start and _is_punctuation(word[end - 1]):
        end -= 1
    return word[start:end]


def tokenize_title(text: str) -> frozenset[str]:
    """
    Decoupe un titre en tokens normalises pour le matching secondaire.

    Les mots sont mis en minuscules, debarrasses de la ponctuation de bord et
    des possessifs. Les liaisons ("&", "and", "+") sont ignorees, ce qui rend
    "Quinn and Carrie" et "Quinn & Carrie" equivalents : {"quinn", "carrie"}.

    Args:
        text: Titre nettoye (ou nom de performer)

    Returns:
        Ensemble des tokens, vide si le texte est vide
    """
    if not text:
        return frozenset()

    tokens = set()
    for word in text.replace("&", " & ").casefold().split():
        word = strip_edge_punctuation(word)
        for suffix in _POSSESSIVE_SUFFIXES:
            if word.endswith(suffix) and len(word) > len(suffix):
                word = strip_edge_punctuation(word[: -len(suffix)])
                break
        if not word or word in TOKEN_JOINERS:
            continue
        tokens.add(word)
    return frozenset(tokens)


def collapse_separators(text: str) -> str:
    """Remplace les suites de separateurs ('.', '-', '_', espaces) par un espace unique."""
    return _SEPARATORS_RE.sub(" ", text).strip()
