from functools import lru_cache
from typing import List, Literal, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./shopfront.db"
    sql_echo: bool = False

    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    access_token_expire_hours: int = 8

    default_language: str = "en"
    allow_admin_bootstrap: bool = True

    # Blob storage: "local" serves files from media_root, "s3" talks to any
    # S3-compatible bucket (R2, MinIO, AWS)
    storage_backend: Literal["local", "s3"] = "local"
    media_root: str = "./media"
    media_url_path: str = "/media"
    public_blob_url: Optional[str] = None
    s3_bucket: str = ""
    s3_endpoint_url: Optional[str] = None
    s3_region: Optional[str] = None
    s3_access_key_id: Optional[str] = None
    s3_secret_access_key: Optional[str] = None

    cors_origins: str = "*"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def blob_base_url(self) -> str:
        """Public URL prefix under which stored images are reachable"""
        base = self.public_blob_url or self.media_url_path
        return base.rstrip("/")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
