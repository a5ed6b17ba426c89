from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=False)

    env: str = Field(default="production", alias="ENV")
    aws_region: str = Field(default="us-west-2", alias="AWS_REGION")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    table_name: Optional[str] = Field(default=None, alias="TABLE_NAME")
    dynamodb_endpoint: Optional[str] = Field(default=None, alias="DYNAMODB_ENDPOINT")  # local only (http://localhost:8002)

    admin_token: Optional[str] = Field(default=None, alias="ADMIN_TOKEN")

    # Comma-separated; empty means any origin is echoed back.
    allowed_origins: str = Field(default="", alias="ALLOWED_ORIGINS")

    @property
    def allowed_origin_list(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @property
    def dynamodb_kwargs(self) -> dict:
        """Injected into boto3 calls when running locally."""
        if self.env == "local" and self.dynamodb_endpoint:
            return {"endpoint_url": self.dynamodb_endpoint}
        return {}


@lru_cache()
def get_settings() -> Settings:
    return Settings()
