"""
File: config.py
Purpose: Centralized database configuration. This is the ONLY place env vars are read.
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class DatabaseConfig:
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = "root"
    database: str = "lunchly"
    charset: str = "utf8mb4"
    collation: str = "utf8mb4_unicode_ci"
    pool_name: str = "lunchly_pool"
    pool_size: int = 5

    def connection_args(self):
        """Keyword arguments accepted by mysql.connector.connect / MySQLConnectionPool."""
        return {
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "password": self.password,
            "database": self.database,
            "charset": self.charset,
            "collation": self.collation,
        }


def _getenv(name, default=None):
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else default


def get_config():
    """
    Builds the DatabaseConfig.
    - Loads `.env` if present (local dev), without overriding real env vars
    - Missing LUNCHLY_DB_* variables fall back to the local-dev defaults
    """
    load_dotenv(override=False)
    defaults = DatabaseConfig()

    return DatabaseConfig(
        host=_getenv("LUNCHLY_DB_HOST", defaults.host),
        port=int(_getenv("LUNCHLY_DB_PORT", str(defaults.port))),
        user=_getenv("LUNCHLY_DB_USER", defaults.user),
        password=_getenv("LUNCHLY_DB_PASSWORD", defaults.password),
        database=_getenv("LUNCHLY_DB_NAME", defaults.database),
        charset=_getenv("LUNCHLY_DB_CHARSET", defaults.charset),
        collation=_getenv("LUNCHLY_DB_COLLATION", defaults.collation),
        pool_name=_getenv("LUNCHLY_DB_POOL_NAME", defaults.pool_name),
        pool_size=int(_getenv("LUNCHLY_DB_POOL_SIZE", str(defaults.pool_size))),
    )
