"""Configuration settings for the LinkedIn bridge."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # LinkedIn OAuth settings
    linkedin_client_id: str = ""
    linkedin_client_secret: str = ""
    linkedin_redirect_uri: str = "http://localhost:5000/api/linkedin/callback"
    linkedin_scope: str = "openid profile email w_member_social"
    linkedin_authorization_url: str = "https://www.linkedin.com/oauth/v2/authorization"
    linkedin_token_url: str = "https://www.linkedin.com/oauth/v2/accessToken"
    linkedin_userinfo_url: str = "https://api.linkedin.com/v2/userinfo"
    linkedin_profile_prefix: str = "https://www.linkedin.com/in/"

    # Pending authorization lifetime
    state_ttl_seconds: int = 5 * 60

    # Application settings
    app_name: str = "LinkedIn Bridge"
    base_url: str = "http://localhost:5000"
    frontend_url: str = "http://localhost:5173"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "https://generate-cv-seven.vercel.app",
    ]
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
