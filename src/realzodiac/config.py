"""Engine settings read from the environment.

Entry points call ``load_dotenv()`` first, so a local ``.env`` file works too.
"""

import logging
import os
from dataclasses import dataclass

from realzodiac.errors import ConfigurationError

PROVIDERS = ("analytic", "skyfield")


@dataclass(frozen=True)
class EngineSettings:
    planet_provider: str = "analytic"
    ephemeris_dir: str = "resources"
    ephemeris_file: str = "de421.bsp"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Build settings from REALZODIAC_* variables.

        Raises:
            ConfigurationError: Unknown provider or log level.
        """
        settings = cls(
            planet_provider=os.environ.get("REALZODIAC_PLANET_PROVIDER", "analytic").strip().lower(),
            ephemeris_dir=os.environ.get("REALZODIAC_EPHEMERIS_DIR", "resources"),
            ephemeris_file=os.environ.get("REALZODIAC_EPHEMERIS_FILE", "de421.bsp"),
            log_level=os.environ.get("REALZODIAC_LOG_LEVEL", "WARNING").strip().upper(),
        )
        if settings.planet_provider not in PROVIDERS:
            raise ConfigurationError(
                f"REALZODIAC_PLANET_PROVIDER must be one of {PROVIDERS}, got {settings.planet_provider!r}"
            )
        if not isinstance(logging.getLevelName(settings.log_level), int):
            raise ConfigurationError(f"unknown log level {settings.log_level!r}")
        return settings


def configure_logging(settings: EngineSettings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
