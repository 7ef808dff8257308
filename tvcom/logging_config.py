"""
Sorties loguru de la CLI tvcom.

Les modules de la bibliotheque se contentent d'emettre des enregistrements
(requetes, echecs de telechargement, motifs non trouves). Seul main()
installe des handlers :
- stderr, en couleur, au niveau choisi (-v force DEBUG)
- un journal JSON tournant, toujours en DEBUG, si un fichier est configure
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> "
    "<level>{level: <7}</level> "
    "<cyan>{name}</cyan> - <level>{message}</level> {extra}"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/tvcom.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Remplace les handlers loguru par ceux de la CLI.

    Args:
        log_level: Seuil de la sortie stderr
        log_file: Journal JSON ; None pour n'ecrire que sur stderr
        rotation_size: Taille declenchant la rotation du journal
        retention_count: Nombre d'anciens journaux gardes
    """
    logger.remove()
    logger.add(sys.stderr, level=log_level, format=_CONSOLE_FORMAT, colorize=True)

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    # Les champs passes en kwargs (url, entity_id...) finissent dans "extra"
    logger.add(
        log_file,
        level="DEBUG",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )
    logger.debug("Journal ouvert", log_file=str(log_file))
