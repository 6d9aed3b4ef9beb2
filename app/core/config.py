# app/core/config.py
from typing import List, Literal

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEV_SECRET = "dev-only-change-me"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "collaborIQ"

    access_token_secret: str = DEV_SECRET
    token_ttl_hours: int = 10
    cookie_name: str = "token"

    environment: Literal["development", "production"] = Field(
        default="development",
        validation_alias=AliasChoices("environment", "node_env"),
    )

    cors_origins: List[str] = ["http://localhost:5173"]
    port: int = 5000
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @model_validator(mode="after")
    def _secret_required_in_production(self):
        if self.is_production and self.access_token_secret == DEV_SECRET:
            raise ValueError("ACCESS_TOKEN_SECRET must be set in production")
        return self


settings = Settings()
