"""
Configuration du logging du moteur via loguru.

Les modules du moteur journalisent avec `from loguru import logger` :
- INFO : construction de la table d'alias de studios (une fois au demarrage)
- DEBUG : chaque decision de matching (release scene reconnue, studio inconnu
  ou resolu par alias, candidat retenu parmi plusieurs scenes du meme jour,
  alias ignore car deja enregistre, echec de guessit)

La console n'affiche que le niveau configure ; le fichier JSON garde toutes
les decisions pour expliquer a posteriori pourquoi une release a ete, ou non,
rattachee a une entree.
"""

import sys
from pathlib import Path

from loguru import logger


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/reelmatch.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure les sorties de log du moteur.

    Appelee par la ressource `logging` du container (container.init_resources()).

    Args :
        log_level : Niveau minimum affiche en console (DEBUG pour suivre le matching en direct)
        log_file : Fichier JSON recevant toutes les decisions de matching
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conserves
    """
    logger.remove()

    # Console - lisible, niveau configurable
    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    # Fichier - toutes les decisions de matching, en JSON
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging du moteur configure", log_file=str(log_file), console_level=log_level)
