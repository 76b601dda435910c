from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_column_indexes() -> list[int]:
    # Spreadsheet columns A..K plus AC
    return [*range(11), 28]


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    app_title: str = "Buscador de Docentes"

    tsv_url: str = ""
    fetch_timeout_seconds: int = 15

    column_indexes: list[int] = Field(default_factory=_default_column_indexes)
    page_size: int = Field(default=25, gt=0)
    max_filters: int = Field(default=6, gt=0)

    cache_ttl_ms: int = 1000 * 60 * 10
    cache_dir: str = ".cache/sheetfinder"
    storage_key: str = ""

    contact_key: str = ""
    summary_keys: list[str] = Field(default_factory=list)
    phone_region: str = "CO"

    filter_min_filled: int = 10
    filter_min_filled_ratio: float = 0.25
    filter_max_unique: int = 40
    filter_fill_weight: float = 10.0
    filter_cardinality_weight: float = 0.12
    filter_value_key_length: int = 80
