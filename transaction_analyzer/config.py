"""Configuration module using Pydantic Settings."""

from pathlib import Path

from pydantic import Field, BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class MenuDefaults(BaseModel):
    # Arguments used by the menu when the prompt is left empty
    year: int = Field(default=2019, description="Year for the period total")
    month: int = Field(default=1, description="Month for the period total")
    day: int = Field(default=1, description="Day for the period total")
    transaction_type: str = Field(default="debit", description="Type filter")
    range_start: str = Field(default="2019-01-01", description="Date range start")
    range_end: str = Field(default="2019-01-31", description="Date range end")
    merchant_name: str = Field(default="SuperMart", description="Merchant filter")
    min_amount: float = Field(default=100.0, description="Amount range minimum")
    max_amount: float = Field(default=200.0, description="Amount range maximum")
    cutoff_date: str = Field(default="2019-01-15", description="Before-date cutoff")
    transaction_id: str = Field(default="1", description="ID to look up")


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    menu_defaults: MenuDefaults = MenuDefaults()

    descriptions_preview: int = Field(
        default=5, description="How many descriptions the menu shows"
    )

    # Paths
    data_dir: Path = Field(default=Path("data"), description="Directory for data files")
    log_dir: Path = Field(default=Path("logs"), description="Directory for audit logs")
    log_level: str = Field(default="INFO", description="Logging level")

    @property
    def transactions_file(self) -> Path:
        """Path to transactions JSON file."""
        return self.data_dir / "transactions.json"


# Global settings instance
settings = Settings()
