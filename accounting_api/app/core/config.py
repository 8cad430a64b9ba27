"""
Configuration settings for the Accounting API.

This module handles application configuration using Pydantic settings.
"""

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL
from typing import Dict, Literal, Optional


DEFAULT_RECONCILIATION_DESCRIPTIONS = {
    "CHQ102": "Cheque CHQ102 has not yet cleared the bank",
    "CHQ104": "Bank charges not yet recorded in the ledger",
}


class Settings(BaseSettings):
    """Application settings."""

    # Application
    app_name: str = "Accounting API"
    api_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Database Configuration
    database_url: Optional[str] = None
    db_user: str = "postgres"
    db_password: str = ""
    db_host: str = "localhost"
    db_port: int = 5432
    db_database: str = "accounting"
    db_echo: bool = False
    db_pool_size: int = 10
    db_max_overflow: int = 0

    # SQL type of the externally owned companyid column
    ledger_company_id_type: Literal["text", "integer"] = "text"

    # Reconciliation reference code -> explanation
    reconciliation_descriptions: Dict[str, str] = DEFAULT_RECONCILIATION_DESCRIPTIONS

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def sqlalchemy_database_url(self) -> str:
        """Async driver URL, either DATABASE_URL or assembled from the DB_* parts."""
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_database,
        ).render_as_string(hide_password=False)


settings = Settings()
