"""
Implementation du parser de noms de release.

Ce module fournit ReleaseTitleParser qui implemente ITitleParser pour
extraire studio, date de release, titre, annee et tokens des noms de
release (scenes "Studio.21.01.08.Title" comme films "Title (2010)").
Les tags qualite (resolution, codecs, source, groupe) sont extraits avec guessit.
"""

import re
from typing import Any, Optional

from guessit import guessit
from loguru import logger

from reelmatch.adapters.parsing.date_patterns import (
    DEFAULT_DATE_PATTERNS,
    DateMatch,
    DatePattern,
    find_release_date,
)
from reelmatch.core.ports.parser import ITitleParser
from reelmatch.core.value_objects.parsed_title import ParsedTitle
from reelmatch.utils.constants import (
    QUALITY_TAG_PATTERNS,
    TECHNICAL_TAG_PATTERNS,
    VIDEO_EXTENSIONS,
)
from reelmatch.utils.helpers import collapse_separators, strip_edge_punctuation, tokenize_title

# Compteur de doublon colle a un numero final ("Title Vol 1 E2_1")
_DUPLICATE_SUFFIX_RE = re.compile(r"(?<=\d)_\d+$")

# Studio entre crochets en tete ("[Studio] Quinn Waters (...)")
_LEADING_STUDIO_RE = re.compile(r"^\s*\[(?P<studio>[^\[\]]+)\]\s*(?P<rest>\S.*)$")

_SQUARE_GROUP_RE = re.compile(r"\[(?P<content>[^\[\]]*)\]")
_CURLY_GROUP_RE = re.compile(r"\{[^{}]*\}")
_PAREN_GROUP_RE = re.compile(r"\((?P<content>[^()]*)\)")
_YEAR_ONLY_RE = re.compile(r"^\s*\d{4}\s*$")

_TECHNICAL_TAG_RE = re.compile(
    r"(?<![^\s._\-])(?:" + "|".join(TECHNICAL_TAG_PATTERNS) + r")(?![^\s._\-])",
    re.IGNORECASE,
)
_TECHNICAL_TOKEN_RE = re.compile(
    r"(?:" + "|".join(TECHNICAL_TAG_PATTERNS) + r")", re.IGNORECASE
)
_QUALITY_TAG_RE = re.compile(
    r"(?<![^\s._\-])(?:" + "|".join(QUALITY_TAG_PATTERNS) + r")(?![^\s._\-])",
    re.IGNORECASE,
)

# Marqueurs d'episode / de volume ("Vol 1 E2", "Episode 200:", "S01E02")
_EPISODE_MARKER_RE = re.compile(
    r"\b(?:"
    r"vol(?:ume)?\s*\d+(?:\s*(?:e|ep|episode)\s*\d+)?"
    r"|s\d{1,2}\s*e\d{1,3}"
    r"|(?:episode|ep|e)\s*\d+"
    r")\b:?",
    re.IGNORECASE,
)

_STRAY_CHARS_RE = re.compile(r"[()\[\]{}/|\\]")
_WHITESPACE_RE = re.compile(r"\s+")

_BRACKETED_YEAR_RE = re.compile(r"[(\[]\s*(?P<year>\d{4})\s*[)\]]")
_STANDALONE_YEAR_RE = re.compile(r"(?<![0-9A-Za-z])(?P<year>\d{4})(?![0-9A-Za-z])")


class ReleaseTitleParser(ITitleParser):
    """
    Parser de noms de release.

    Reconnaissance dans l'ordre (la premiere qui s'applique gagne) :
    1. Studio + date (scene) : date reconnue par les strategies de
       date_patterns, le studio etant le segment qui la precede (il peut
       manquer : la release reste une scene, sans studio)
    2. Titre + annee (film) : annee entre parentheses/crochets ou annee isolee
    3. Repli : la chaine nettoyee entiere devient le titre

    Un fragment de date invalide (ex: "2020-13-45") fait passer directement
    au repli, sans lever d'exception.
    """

    def __init__(
        self,
        min_year: int = 1900,
        max_year: int = 2099,
        detect_quality_tags: bool = True,
        date_patterns: tuple[DatePattern, ...] = DEFAULT_DATE_PATTERNS,
    ) -> None:
        self._min_year = min_year
        self._max_year = max_year
        self._detect_quality_tags = detect_quality_tags
        self._date_patterns = date_patterns

    def parse(self, raw_title: str) -> ParsedTitle:
        """
        Parse un nom de release et extrait les informations structurees.

        Args:
            raw_title: Nom de release ou de fichier brut

        Returns:
            ParsedTitle avec les informations extraites.
        """
        raw_title = raw_title or ""
        working = self._strip_extension(raw_title.strip())
        working = _DUPLICATE_SUFFIX_RE.sub("", working)
        leading_studio, working = self._split_leading_studio(working)
        working = self._strip_tag_groups(working)

        quality = self._extract_quality_tags(raw_title)

        date_match = find_release_date(
            working, self._date_patterns, min_year=self._min_year, max_year=self._max_year
        )

        if date_match is not None and date_match.recognized:
            studio_title, title = self._match_scene(working, date_match, leading_studio)
            logger.debug(
                f"Release scene reconnue: studio={studio_title!r} "
                f"date={date_match.release_date} titre={title!r}"
            )
            return ParsedTitle(
                raw_title=raw_title,
                title=title,
                studio_title=studio_title,
                release_date=date_match.release_date,
                is_scene=True,
                release_tokens=tokenize_title(title),
                **quality,
            )

        if date_match is None:
            movie = self._match_movie(working)
            if movie is not None:
                title, year = movie
                return ParsedTitle(
                    raw_title=raw_title,
                    title=title,
                    year=year,
                    release_tokens=tokenize_title(title),
                    **quality,
                )
        else:
            logger.debug(f"Fragment de date invalide ignore dans: {raw_title!r}")

        title = self._fallback_title(raw_title, working)
        return ParsedTitle(
            raw_title=raw_title,
            title=title,
            release_tokens=tokenize_title(title),
            **quality,
        )

    def _strip_extension(self, name: str) -> str:
        """Retire l'extension video finale si elle est reconnue."""
        lowered = name.lower()
        for extension in VIDEO_EXTENSIONS:
            if lowered.endswith(extension) and len(name) > len(extension):
                return name[: -len(extension)]
        return name

    def _split_leading_studio(self, name: str) -> tuple[Optional[str], str]:
        """
        Separe un studio entre crochets en tete du nom.

        Returns:
            Tuple (studio ou None, reste du nom)
        """
        match = _LEADING_STUDIO_RE.match(name)
        if match is None:
            return None, name
        studio = collapse_separators(match.group("studio"))
        if not studio or _TECHNICAL_TOKEN_RE.fullmatch(studio) or _YEAR_ONLY_RE.match(studio):
            return None, name
        return studio, match.group("rest")

    def _strip_tag_groups(self, name: str) -> str:
        """
        Retire les groupes de tags techniques entre crochets, accolades
        et les parentheses ne contenant que des tags techniques.

        Les groupes contenant seulement une annee ("[2010]") sont conserves.
        """

        def _square(match: re.Match[str]) -> str:
            if _YEAR_ONLY_RE.match(match.group("content")):
                return match.group(0)
            return " "

        def _paren(match: re.Match[str]) -> str:
            words = collapse_separators(match.group("content")).split()
            if words and all(_TECHNICAL_TOKEN_RE.fullmatch(word) for word in words):
                return " "
            return match.group(0)

        name = _SQUARE_GROUP_RE.sub(_square, name)
        name = _CURLY_GROUP_RE.sub(" ", name)
        return _PAREN_GROUP_RE.sub(_paren, name)

    def _match_scene(
        self, working: str, date_match: DateMatch, leading_studio: Optional[str]
    ) -> tuple[Optional[str], str]:
        """
        Applique le motif studio + date.

        Le studio est le contenu des crochets de tete s'il existe, sinon le
        texte precedant la date. Une date sans segment studio reste une
        release scene, sans studio : elle ne pourra pas etre rattachee.

        Returns:
            Tuple (studio ou None, titre sans le fragment de date)
        """
        before = working[: date_match.start]
        after = working[date_match.end :]

        if leading_studio:
            studio = leading_studio
            remainder = f"{before} {after}"
        else:
            studio = self._clean_studio(before)
            remainder = after

        return studio or None, self._clean_title_text(remainder)

    def _match_movie(self, working: str) -> Optional[tuple[str, int]]:
        """
        Applique le motif titre + annee.

        Une annee entre parentheses ou crochets est prioritaire ; sinon la
        derniere annee isolee precedee d'un titre est retenue. Une annee entre
        crochets en tete ("[2010] Movie") prend le texte qui la suit pour titre.

        Returns:
            Tuple (titre, annee) ou None
        """
        head = self._cut_technical_tail(working)

        for regex in (_BRACKETED_YEAR_RE, _STANDALONE_YEAR_RE):
            for match in reversed(list(regex.finditer(head))):
                year = int(match.group("year"))
                if not self._min_year <= year <= self._max_year:
                    continue
                title = self._clean_title_text(head[: match.start()])
                if not title and regex is _BRACKETED_YEAR_RE:
                    title = self._clean_title_text(head[match.end() :])
                if title:
                    return title, year
        return None

    def _fallback_title(self, raw_title: str, working: str) -> str:
        """Titre de repli : nom nettoye, a defaut le nom brut sans separateurs parasites."""
        title = self._clean_title_text(working)
        if title:
            return title
        return collapse_separators(raw_title) or raw_title.strip()

    def _clean_studio(self, text: str) -> str:
        """Nettoie le segment studio ("Studio - ", "Studio.") en titre lisible."""
        text = _STRAY_CHARS_RE.sub(" ", text)
        return strip_edge_punctuation(collapse_separators(text)).strip()

    def _cut_technical_tail(self, text: str) -> str:
        """
        Coupe le texte au debut de la queue technique.

        La queue commence au premier tag qualite (resolution, codec, source),
        ou a un tag scene ("XXX", "PROPER"...) suivi uniquement d'autres tags
        scene jusqu'au premier tag qualite ou a la fin. Un tag scene suivi de
        mots ordinaires fait partie du titre ("Internal Affairs"), de meme
        qu'un tag scene en tete de texte.
        """
        for match in _TECHNICAL_TAG_RE.finditer(text):
            head = text[: match.start()]
            if _QUALITY_TAG_RE.fullmatch(match.group(0)):
                return head
            rest = text[match.end() :]
            quality = _QUALITY_TAG_RE.search(rest)
            if quality is not None:
                rest = rest[: quality.start()]
            if collapse_separators(head) and not collapse_separators(_TECHNICAL_TAG_RE.sub(" ", rest)):
                return head
        return text

    def _clean_title_text(self, text: str) -> str:
        """
        Post-traitement commun du titre.

        Retire la queue technique, les crochets/slashs residuels et les
        marqueurs d'episode/volume, puis remplace les separateurs par des espaces.
        """
        text = _STRAY_CHARS_RE.sub(" ", text)
        text = self._cut_technical_tail(text)
        text = collapse_separators(text)
        text = _EPISODE_MARKER_RE.sub(" ", text)
        text = _WHITESPACE_RE.sub(" ", text).strip()
        return text.strip(" :;,")

    def _extract_quality_tags(self, raw_title: str) -> dict[str, Optional[str]]:
        """
        Extrait les tags qualite/format avec guessit.

        Args:
            raw_title: Nom de release brut

        Returns:
            Dictionnaire des champs qualite de ParsedTitle (vide si desactive
            ou si guessit echoue)
        """
        if not self._detect_quality_tags or not raw_title.strip():
            return {}

        try:
            result = guessit(raw_title)
        except Exception as e:
            logger.debug(f"guessit n'a pas pu analyser {raw_title!r}: {e}")
            return {}

        return {
            "resolution": self._as_text(result.get("screen_size")),
            "video_codec": self._as_text(result.get("video_codec")),
            "audio_codec": self._as_text(result.get("audio_codec")),
            "source": self._as_text(result.get("source")),
            "release_group": self._as_text(result.get("release_group")),
        }

    def _as_text(self, value: Any) -> Optional[str]:
        """
        Convertit une valeur guessit en texte.

        guessit peut retourner une liste quand plusieurs valeurs sont
        detectees : on garde la premiere.
        """
        if value is None:
            return None
        if isinstance(value, list):
            if len(value) == 0:
                return None
            value = value[0]
        return str(value)
