"""
Objets valeur pour les informations extraites d'un nom de release.

Objet valeur immutable produit par le parser de titres a chaque appel,
puis abandonne apres la resolution.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ParsedTitle:
    """
    Informations extraites du parsing d'un nom de release.

    Un seul chemin de reconnaissance s'applique par entree : studio + date
    (is_scene=True) ou titre + annee (is_scene=False). Si aucun ne s'applique,
    seul le titre est renseigne.

    Attributs:
        raw_title: Nom de release original
        title: Titre restant apres retrait du studio, de la date et des tags
        studio_title: Studio brut extrait (scenes uniquement)
        release_date: Date de release normalisee "YYYY-MM-DD" (scenes uniquement)
        year: Annee de sortie (films uniquement)
        is_scene: Vrai si le motif studio + date a ete reconnu
        release_tokens: Tokens normalises du titre final (noms de performers, mots descriptifs)
        resolution: Resolution video (ex: "1080p", "2160p")
        video_codec: Codec video (ex: "H.264", "H.265")
        audio_codec: Codec audio (ex: "AAC", "DTS")
        source: Source du fichier (ex: "Web", "Blu-ray")
        release_group: Groupe de release
    """

    raw_title: str
    title: str
    studio_title: Optional[str] = None
    release_date: Optional[str] = None
    year: Optional[int] = None
    is_scene: bool = False
    release_tokens: frozenset[str] = field(default_factory=frozenset)
    resolution: Optional[str] = None
    video_codec: Optional[str] = None
    audio_codec: Optional[str] = None
    source: Optional[str] = None
    release_group: Optional[str] = None

    @property
    def quality_tags(self) -> tuple[str, ...]:
        """Tags qualite/format presents, dans un ordre stable."""
        tags = (
            self.resolution,
            self.video_codec,
            self.audio_codec,
            self.source,
            self.release_group,
        )
        return tuple(tag for tag in tags if tag)

    @property
    def is_movie(self) -> bool:
        """Vrai si le motif titre + annee a ete reconnu."""
        return not self.is_scene and self.year is not None
