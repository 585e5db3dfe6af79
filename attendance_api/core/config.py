from typing import Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    port: int = 5000

    # Database
    database_url: Optional[str] = None
    db_host: Optional[str] = None
    db_port: Optional[int] = None
    db_user: Optional[str] = None
    db_password: Optional[str] = None
    db_name: Optional[str] = None
    db_ssl: bool = False
    auto_init_db: bool = True

    # Pool: bounded connections, bounded wait
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10
    db_pool_timeout: float = 30
    db_pool_max_waiting: int = 100

    # CORS
    cors_origin: str = "https://attendance-portal-test.netlify.app"

    # Observability
    log_level: str = "INFO"
    log_format: str = "text"

    report_title: str = "Attendance & Overtime Report"

    def build_db_url(self) -> Optional[str]:
        if self.database_url:
            return self.database_url

        if not self.db_name:
            return None

        user = quote_plus(self.db_user or "")
        password = quote_plus(self.db_password or "")
        host = self.db_host or "127.0.0.1"
        port = self.db_port or 5432
        return f"postgresql://{user}:{password}@{host}:{port}/{self.db_name}"


settings = Settings()
