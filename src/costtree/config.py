from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    api_base_url: str = Field(
        "https://5f27781bf5d27e001612e057.mockapi.io/webprovise",
        alias="COSTTREE_API_URL",
    )
    units_resource: str = Field("companies", alias="COSTTREE_UNITS_RESOURCE")
    expenses_resource: str = Field("travels", alias="COSTTREE_EXPENSES_RESOURCE")
    request_timeout: float = Field(10.0, alias="COSTTREE_REQUEST_TIMEOUT")
    root_parent_id: str = Field("0", alias="COSTTREE_ROOT_PARENT_ID")
    output_format: Literal["json", "text"] = Field("json", alias="COSTTREE_OUTPUT_FORMAT")
    log_level: str = Field("INFO", alias="COSTTREE_LOG_LEVEL")

    @property
    def api_root(self) -> str:
        return self.api_base_url.rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
