"""
Strategies de reconnaissance des dates de release.

Chaque DatePattern cherche une forme de date dans un nom de release et
retourne un DateMatch type : date reconnue, forme presente mais invalide
(ex: 2020-13-45), ou None si la forme est absente. Aucune exception n'est
utilisee pour la validation.

Les strategies sont essayees dans un ordre fixe (DEFAULT_DATE_PATTERNS) :
la premiere date reconnue gagne.
"""

import calendar
import re
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DateMatch:
    """
    Resultat d'une strategie de reconnaissance de date.

    Attributs:
        start: Position de debut du fragment dans le texte analyse
        end: Position de fin (exclue) du fragment
        release_date: Date normalisee "YYYY-MM-DD", None si le fragment est invalide
    """

    start: int
    end: int
    release_date: Optional[str] = None

    @property
    def recognized(self) -> bool:
        """Vrai si le fragment a ete normalise en date valide."""
        return self.release_date is not None


def normalize_date(
    year: int, month: int, day: int, min_year: int = 1900, max_year: int = 2099
) -> Optional[str]:
    """
    Normalise une date au format "YYYY-MM-DD".

    Returns:
        La date normalisee, ou None si elle est hors bornes ou n'existe pas
        au calendrier (30 fevrier, mois 13...)
    """
    if not min_year <= year <= max_year:
        return None
    if not 1 <= month <= 12:
        return None
    if not 1 <= day <= calendar.monthrange(year, month)[1]:
        return None
    return f"{year:04d}-{month:02d}-{day:02d}"


@dataclass(frozen=True)
class DatePattern:
    """
    Strategie de reconnaissance d'une forme de date.

    Attributs:
        name: Nom de la strategie (pour les logs)
        regex: Motif avec les groupes nommes year, month, day
        century: Siecle ajoute aux annees sur deux chiffres (0 si annee sur 4 chiffres)
    """

    name: str
    regex: re.Pattern[str]
    century: int = 0

    def search(
        self, text: str, min_year: int = 1900, max_year: int = 2099
    ) -> Optional[DateMatch]:
        """
        Cherche la premiere date valide de cette forme dans le texte.

        Returns:
            DateMatch reconnu pour la premiere occurrence valide ; a defaut,
            DateMatch non reconnu pour la premiere occurrence invalide ;
            None si la forme n'apparait pas.
        """
        first_malformed: Optional[DateMatch] = None
        for match in self.regex.finditer(text):
            year = int(match.group("year")) + self.century
            release_date = normalize_date(
                year,
                int(match.group("month")),
                int(match.group("day")),
                min_year=min_year,
                max_year=max_year,
            )
            if release_date is not None:
                return DateMatch(match.start(), match.end(), release_date)
            if first_malformed is None:
                first_malformed = DateMatch(match.start(), match.end())
        return first_malformed


# yyyy-MM-dd, yyyy.MM.dd, yyyy MM dd, yyyy_MM_dd (separateur coherent)
ISO_DATE = DatePattern(
    name="iso",
    regex=re.compile(
        r"(?<!\d)(?P<year>\d{4})(?P<sep>[-._ ])(?P<month>\d{2})(?P=sep)(?P<day>\d{2})(?!\d)"
    ),
)

# dd.MM.yyyy (releases de trackers : "(Title / 08.01.2021)")
DAY_FIRST_DATE = DatePattern(
    name="day_first",
    regex=re.compile(
        r"(?<!\d)(?P<day>\d{2})(?P<sep>[-./ ])(?P<month>\d{2})(?P=sep)(?P<year>\d{4})(?!\d)"
    ),
)

# yyyyMMdd sans separateur
COMPACT_DATE = DatePattern(
    name="compact",
    regex=re.compile(r"(?<!\d)(?P<year>(?:19|20)\d{2})(?P<month>\d{2})(?P<day>\d{2})(?!\d)"),
)

# yy.MM.dd (convention scene : "Studio.21.01.08.Title")
SHORT_DATE = DatePattern(
    name="short",
    regex=re.compile(
        r"(?<!\d)(?P<year>\d{2})(?P<sep>[-._ ])(?P<month>\d{2})(?P=sep)(?P<day>\d{2})(?!\d)"
    ),
    century=2000,
)

DEFAULT_DATE_PATTERNS: tuple[DatePattern, ...] = (
    ISO_DATE,
    DAY_FIRST_DATE,
    COMPACT_DATE,
    SHORT_DATE,
)


def find_release_date(
    text: str,
    patterns: tuple[DatePattern, ...] = DEFAULT_DATE_PATTERNS,
    min_year: int = 1900,
    max_year: int = 2099,
) -> Optional[DateMatch]:
    """
    Applique les strategies dans l'ordre et retourne la premiere date reconnue.

    Args:
        text: Texte a analyser
        patterns: Strategies ordonnees par priorite
        min_year: Annee minimale acceptee
        max_year: Annee maximale acceptee

    Returns:
        Le premier DateMatch reconnu ; sinon le premier fragment invalide
        rencontre (release_date=None) ; None si aucune forme de date n'apparait.
    """
    first_malformed: Optional[DateMatch] = None
    for pattern in patterns:
        result = pattern.search(text, min_year=min_year, max_year=max_year)
        if result is None:
            continue
        if result.recognized:
            return result
        if first_malformed is None:
            first_malformed = result
    return first_malformed
