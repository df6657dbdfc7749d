from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List, Dict


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_role_key: Optional[str] = None  # Required for writes when RLS blocks the anon key

    # Object storage
    storage_bucket: str = "site-images"
    storage_buckets: Dict[str, str] = {}  # per-entity override, e.g. {"team": "team-photos"}
    max_upload_bytes: int = 5 * 1024 * 1024

    # AWS S3 (optional; Supabase Storage is used when these are unset)
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    aws_region: str = "us-east-1"
    s3_bucket_name: Optional[str] = None

    # Admin
    admin_password: str = ""
    session_ttl_minutes: int = 12 * 60
    login_rate_limit: str = "5/minute"

    # Content
    content_file: str = "data/content.json"
    reorder_max_attempts: int = 3

    # App
    app_name: str = "agency-site-backend"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def s3_enabled(self) -> bool:
        return all([self.aws_access_key_id, self.aws_secret_access_key, self.s3_bucket_name])

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def bucket_for(self, entity: str) -> str:
        return self.storage_buckets.get(entity) or self.storage_bucket

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
