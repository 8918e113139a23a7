"""
Resolution des alias de studios.

Les sources de telechargement publient les scenes sous des noms de studio
qui different souvent du titre canonique (network parent, abreviation,
domaine). StudioAliasTable maintient la correspondance bidirectionnelle
titre canonique <-> nom alternatif.

Politique d'insertion : une seule entree par studio canonique (compare par
titre nettoye). La premiere valeur inseree gagne, les doublons suivants sont
ignores. La resolution des alias en depend de facon deterministe.

La table est construite une fois au demarrage (build_studio_alias_table)
puis passee explicitement au moteur de matching. Elle n'est jamais modifiee
ensuite : les lectures concurrentes ne demandent aucun verrou.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Optional

from loguru import logger

from reelmatch.core.ports.stores import IStudioStore
from reelmatch.utils.constants import HARDCODED_STUDIO_ALIASES, NETWORK_REWRITES
from reelmatch.utils.helpers import clean_title


class StudioAliasTable:
    """
    Table immutable des alias de studios.

    Les deux sens de recherche comparent les titres nettoyes (clean_title),
    un titre brut et sa forme canonique se resolvent donc de la meme facon.
    """

    def __init__(self, aliases: Iterable[tuple[str, str]] = ()) -> None:
        """
        Construit la table a partir de paires (titre canonique, nom alternatif).

        Args:
            aliases: Paires dans l'ordre d'insertion. Pour un meme titre
                     canonique, seule la premiere paire est retenue.
        """
        entries: list[tuple[str, str]] = []
        seen: set[str] = set()

        for canonical, alternate in aliases:
            key = clean_title(canonical)
            if not key or not clean_title(alternate):
                continue
            if key in seen:
                logger.debug(f"Alias ignore pour {canonical!r} -> {alternate!r}: studio deja enregistre")
                continue
            seen.add(key)
            entries.append((canonical, alternate))

        by_canonical: dict[str, list[str]] = {}
        by_alternate: dict[str, list[str]] = {}
        for canonical, alternate in entries:
            by_canonical.setdefault(clean_title(canonical), []).append(alternate)
            by_alternate.setdefault(clean_title(alternate), []).append(canonical)

        self._entries = tuple(entries)
        self._by_canonical = MappingProxyType({k: tuple(v) for k, v in by_canonical.items()})
        self._by_alternate = MappingProxyType({k: tuple(v) for k, v in by_alternate.items()})

    def resolve_aliases(self, canonical_title: str) -> set[str]:
        """Noms alternatifs connus pour un studio canonique (eventuellement vide)."""
        return set(self._by_canonical.get(clean_title(canonical_title), ()))

    def resolve_canonical(self, alternate_title: str) -> set[str]:
        """Titres canoniques dont un nom alternatif correspond (eventuellement vide)."""
        return set(self._by_alternate.get(clean_title(alternate_title), ()))

    def related_titles(self, title: str) -> list[str]:
        """
        Tous les titres lies a un studio, dans les deux sens.

        Les alternatifs du titre (sens canonique -> alternatif) viennent en
        premier, puis les canoniques dont il est l'alternatif. Les doublons et
        les titres identiques a l'entree (apres nettoyage) sont retires.

        Args:
            title: Titre de studio brut ou nettoye

        Returns:
            Liste ordonnee et dedoublonnee des titres lies
        """
        key = clean_title(title)
        related: list[str] = []
        seen = {key}
        for candidate in self._by_canonical.get(key, ()) + self._by_alternate.get(key, ()):
            candidate_key = clean_title(candidate)
            if candidate_key in seen:
                continue
            seen.add(candidate_key)
            related.append(candidate)
        return related

    def items(self) -> tuple[tuple[str, str], ...]:
        """Paires (titre canonique, nom alternatif) dans l'ordre d'insertion."""
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, canonical_title: object) -> bool:
        if not isinstance(canonical_title, str):
            return False
        return clean_title(canonical_title) in self._by_canonical

    def __repr__(self) -> str:
        return f"StudioAliasTable({len(self._entries)} alias)"


def rewrite_network(network: str, studio_title: str) -> str:
    """
    Corrige les networks mal etiquetes par les agregateurs.

    Ex: "Anal Vids" -> "LegalPorno", "ManyVids" -> "ManyVids <studio>"
    """
    template = NETWORK_REWRITES.get(network)
    if template is None:
        return network
    return template.format(studio=studio_title)


def build_studio_alias_table(
    studio_store: IStudioStore,
    extra_aliases: Optional[Mapping[str, str]] = None,
) -> StudioAliasTable:
    """
    Construit la table d'alias depuis les studios connus.

    Ordre d'insertion (premiere valeur gagnante) :
    1. Studios du store ayant un network renseigne (network reecrit si besoin)
    2. Alias historiques codes en dur
    3. Alias supplementaires de la configuration

    Les erreurs du store remontent a l'appelant.

    Args:
        studio_store: Store des studios
        extra_aliases: Alias supplementaires (titre canonique -> nom alternatif)

    Returns:
        StudioAliasTable immutable
    """
    pairs: list[tuple[str, str]] = []

    for studio in studio_store.get_all_studios():
        network = (studio.network or "").strip()
        if not network:
            continue
        pairs.append((studio.title, rewrite_network(network, studio.title)))

    pairs.extend(HARDCODED_STUDIO_ALIASES.items())
    if extra_aliases:
        pairs.extend(extra_aliases.items())

    table = StudioAliasTable(pairs)
    logger.info(f"Table d'alias studios construite: {len(table)} alias")
    return table
