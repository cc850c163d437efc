from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Firebase Realtime Database
    firebase_url: str = "https://shoppinglist-916c4-default-rtdb.firebaseio.com"
    firebase_auth_token: str = ""  # Database secret or ID token, sent as ?auth=
    shopping_list_path: str = "shopping-list"

    # HTTP
    request_timeout: float = 30.0

    @property
    def firebase_base_url(self) -> str:
        """Database URL without a trailing slash."""
        return self.firebase_url.rstrip("/")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
