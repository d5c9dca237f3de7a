from pathlib import Path
from typing import Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[1]
_ENV_PATH = _PROJECT_ROOT / '.env'

ISOLATION_LEVELS = ('READ UNCOMMITTED', 'READ COMMITTED', 'REPEATABLE READ', 'SERIALIZABLE')
LOG_LEVELS = ('TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_PATH),
        env_prefix='AIRLINE_',
        env_ignore_empty=True,
        extra='ignore',
    )

    # Database (name, port and user normally come from the command line)
    DB_HOST: str = 'localhost'
    DB_NAME: str = ''
    DB_PORT: int = 3306
    DB_USER: str = ''
    DB_PASSWORD: Optional[SecretStr] = None

    CONNECT_TIMEOUT_SECONDS: int = 10
    STATEMENT_TIMEOUT_SECONDS: int = 10
    RESERVATION_ISOLATION_LEVEL: str = 'READ COMMITTED'

    # Logging
    LOG_LEVEL: str = 'WARNING'
    LOG_FILE: Optional[str] = None

    @field_validator('RESERVATION_ISOLATION_LEVEL', mode='before')
    @classmethod
    def normalize_isolation_level(cls, v: str) -> str:
        level = str(v).strip().upper().replace('_', ' ')
        if level not in ISOLATION_LEVELS:
            raise ValueError(f'isolation level must be one of {", ".join(ISOLATION_LEVELS)}')
        return level

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f'log level must be one of {", ".join(LOG_LEVELS)}')
        return level

    @property
    def connection_args(self) -> dict:
        """Keyword arguments for mysql.connector.connect()."""
        password = self.DB_PASSWORD.get_secret_value() if self.DB_PASSWORD else ''
        return {
            'host': self.DB_HOST,
            'port': self.DB_PORT,
            'user': self.DB_USER,
            'password': password,
            'database': self.DB_NAME,
            'charset': 'utf8mb4',
            'collation': 'utf8mb4_unicode_ci',
            'connection_timeout': self.CONNECT_TIMEOUT_SECONDS,
        }
