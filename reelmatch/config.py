"""
Configuration du moteur via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe REELMATCH_,
et peut optionnellement être fournie via un fichier .env.

Les alias de studios supplémentaires s'ajoutent à ceux dérivés des studios connus
(REELMATCH_STUDIO_ALIASES='{"Canonical Studio": "Alias"}').
"""

from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from reelmatch.core.value_objects.match_policy import SceneTieBreak

# Trouver le fichier .env à la racine du projet (parent de reelmatch/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres du moteur avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe REELMATCH_.
    Exemple : REELMATCH_SCENE_TIE_BREAK=lowest_id

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="REELMATCH_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Parsing
    min_year: int = Field(default=1900, ge=1000, le=9999)
    max_year: int = Field(default=2099, ge=1000, le=9999)
    detect_quality_tags: bool = Field(default=True)

    # Matching
    scene_tie_break: SceneTieBreak = Field(default=SceneTieBreak.FEWEST_PERFORMERS)
    studio_aliases: dict[str, str] = Field(default_factory=dict)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/reelmatch.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @model_validator(mode="after")
    def check_year_range(self) -> "Settings":
        """Vérifie que la plage d'années acceptées n'est pas vide."""
        if self.min_year > self.max_year:
            raise ValueError(
                f"min_year ({self.min_year}) doit être inférieur ou égal à max_year ({self.max_year})"
            )
        return self
