from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cinesphere.platform.constant.path import BASE_DIR, CATALOG_SEED_FILE, LOG_DIR


_ENV_PATH = BASE_DIR / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (BASE_DIR / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'CineSphere Booking Console'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Logs @Logger.io args/returns when True

    # Logging
    LOG_LEVEL: str = 'INFO'
    CONSOLE_LOG_LEVEL: str = 'WARNING'  # stderr, kept above INFO so it does not mix with prompts
    LOG_TO_FILE: bool = True
    LOG_DIR: Path = LOG_DIR

    # Data files
    BOOKING_DATA_FILE: Path = Path('bookings.txt')
    CATALOG_FILE: Path = CATALOG_SEED_FILE

    # Console
    CURRENCY_LABEL: str = 'Rs'
    CLEAR_SCREEN: bool = False

    @field_validator('LOG_LEVEL', 'CONSOLE_LOG_LEVEL', mode='before')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().upper()
        return v


settings = Settings()  # type: ignore
