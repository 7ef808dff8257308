"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe TVCOM_,
et peut optionnellement être fournie via un fichier .env.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tvcom.utils.constants import DEFAULT_AGENT

# Trouver le fichier .env à la racine du projet (parent de tvcom/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe TVCOM_.
    Exemple : TVCOM_USER_AGENT="mon-script/1.0"
    """

    model_config = SettingsConfigDict(
        env_prefix="TVCOM_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Client HTTP
    user_agent: str = Field(default=DEFAULT_AGENT, min_length=1)
    request_timeout: float = Field(default=30.0, gt=0)
    connect_timeout: float = Field(default=10.0, gt=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/tvcom.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v: str) -> str:
        """Normalise le niveau de log en majuscules."""
        return str(v).upper()
