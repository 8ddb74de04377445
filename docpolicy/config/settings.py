from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    issuance_store: str = "memory"
    issuance_table: str = "document_issuance_counts"

    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "clinic"
    db_username: str = "clinic"
    db_password: str = "secret"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10
    db_pool_timeout_seconds: float = 5.0

    mask_token: str = "*****"
    filename_max_name_length: int = 30
    masked_filename_marker: str = "_Masked"
