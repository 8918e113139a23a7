"""
Moteur d'identification des releases.

MatchingEngine compose le parser de titres, la table d'alias de studios et le
matcher de candidats pour resoudre un nom de release vers une entree de la
bibliotheque :

    nom brut -> ParsedTitle -> (scene) studios + alias -> candidats du jour -> entree
                            -> (film)  titre nettoye -> candidats -> entree

Chaque appel est un calcul requete/reponse sur les donnees retournees par
les stores a cet instant. Aucun etat partage n'est modifie.
"""

from collections.abc import Iterable
from typing import Optional

from loguru import logger

from reelmatch.core.entities.library import LibraryEntry, Studio
from reelmatch.core.ports.parser import ITitleParser
from reelmatch.core.ports.stores import ILibraryStore, IStudioStore
from reelmatch.core.value_objects.parsed_title import ParsedTitle
from reelmatch.services.matcher import CandidateMatcherService
from reelmatch.services.studio_aliases import StudioAliasTable
from reelmatch.utils.helpers import clean_title


class MatchingEngine:
    """
    Point d'entree du moteur de matching.

    Les erreurs des stores remontent telles quelles ; l'absence de
    correspondance est retournee comme None.
    """

    def __init__(
        self,
        title_parser: ITitleParser,
        library_store: ILibraryStore,
        studio_store: IStudioStore,
        alias_table: StudioAliasTable,
        matcher: CandidateMatcherService,
    ) -> None:
        self._title_parser = title_parser
        self._library_store = library_store
        self._studio_store = studio_store
        self._alias_table = alias_table
        self._matcher = matcher

    def parse_title(self, raw_title: str) -> ParsedTitle:
        """Parse un nom de release brut."""
        return self._title_parser.parse(raw_title)

    def find_by_title(
        self,
        clean_titles: Iterable[str],
        year: Optional[int],
        excluded_ids: Iterable[int],
        pool: Iterable[LibraryEntry],
    ) -> Optional[LibraryEntry]:
        """
        Recherche par titre + annee dans un pool fourni par l'appelant.

        Args:
            clean_titles: Titres nettoyes acceptes (titre principal et alternatifs)
            year: Annee de la release (ou None)
            excluded_ids: IDs a ne pas retourner
            pool: Candidats, en general pre-filtres par titre par le store

        Returns:
            L'entree retenue, ou None
        """
        clean_titles = list(clean_titles)
        entry = self._matcher.find_by_title(clean_titles, year, excluded_ids, pool)
        if entry is None:
            logger.debug(f"Aucune entree pour {clean_titles} ({year})")
        return entry

    def find_studios(self, studio_title: str) -> list[Studio]:
        """
        Resout un titre de studio brut vers les studios connus.

        Correspondance exacte (titre nettoye) d'abord ; a defaut, chaque
        titre lie par la table d'alias (dans les deux sens) est essaye.

        Returns:
            Studios trouves, sans doublon d'ID externe (liste vide si inconnu)
        """
        key = clean_title(studio_title)
        if not key:
            return []

        studios = list(self._studio_store.find_all_by_clean_title(key))
        if not studios:
            for alternate in self._alias_table.related_titles(studio_title):
                logger.debug(f"Studio {studio_title!r}: essai de l'alias {alternate!r}")
                studios.extend(self._studio_store.find_all_by_clean_title(clean_title(alternate)))

        unique: list[Studio] = []
        seen: set[str] = set()
        for studio in studios:
            if studio.foreign_id in seen:
                continue
            seen.add(studio.foreign_id)
            unique.append(studio)
        return unique

    def find_by_studio_and_release_date(
        self,
        studio_title: Optional[str],
        release_date: Optional[str],
        release_tokens: Iterable[str],
    ) -> Optional[LibraryEntry]:
        """
        Recherche une scene par studio, date de release et tokens.

        Args:
            studio_title: Studio brut extrait de la release
            release_date: Date normalisee "YYYY-MM-DD"
            release_tokens: Tokens du titre de la release

        Returns:
            La scene retenue, ou None (studio inconnu, aucune scene ce jour-la)
        """
        if not studio_title or not release_date:
            return None

        studios = self.find_studios(studio_title)
        if not studios:
            logger.debug(f"Studio inconnu: {studio_title!r}")
            return None

        candidates: list[LibraryEntry] = []
        seen_ids: set[int] = set()
        for studio in studios:
            for entry in self._library_store.get_candidates_by_studio_and_date(
                studio.foreign_id, release_date
            ):
                if entry.id in seen_ids:
                    continue
                seen_ids.add(entry.id)
                candidates.append(entry)

        entry = self._matcher.select_scene(candidates, release_date, release_tokens)
        if entry is None:
            logger.debug(f"Aucune scene {studio_title!r} le {release_date}")
        return entry

    def identify(self, raw_title: str, excluded_ids: Iterable[int] = ()) -> Optional[LibraryEntry]:
        """
        Resout un nom de release brut de bout en bout.

        Les releases scene passent par studio + date ; les autres par titre
        (+ annee) sur le pool de candidats du store.

        Args:
            raw_title: Nom de release ou de fichier brut
            excluded_ids: IDs a ne pas retourner (chemin titre + annee)

        Returns:
            L'entree identifiee, ou None (a rapprocher manuellement)
        """
        parsed = self.parse_title(raw_title)

        if parsed.is_scene:
            return self.find_by_studio_and_release_date(
                parsed.studio_title, parsed.release_date, parsed.release_tokens
            )

        key = clean_title(parsed.title)
        if not key:
            return None
        pool = self._library_store.get_candidates_by_clean_title([key])
        return self.find_by_title([key], parsed.year, excluded_ids, pool)
