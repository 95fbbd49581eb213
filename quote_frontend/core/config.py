from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from quote_frontend.models.variant import VARIANTS, FrontendVariant

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Frontend settings loaded once from the environment.

    Environment variable mapping follows pydantic's rules (PORT, APP_VERSION,
    BACKEND_HOST, BACKEND_PORT, FRONTEND_VARIANT, ...). Empty variables are
    treated as unset so the defaults apply.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    # Serving
    port: int = 8080
    app_version: str = "dev"
    debug: bool = False

    # Interest backend
    backend_host: str = "interest"
    backend_port: int = 8080
    # None keeps the blocking behaviour of an unbounded GET
    backend_timeout_seconds: Optional[float] = Field(default=None, gt=0)

    # Which frontend this process serves: 'membership' or 'orders'
    frontend_variant: str = "membership"

    static_dir: Path = PACKAGE_DIR / "static"
    templates_dir: Path = PACKAGE_DIR / "templates"

    @field_validator("frontend_variant")
    @classmethod
    def known_variant(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in VARIANTS:
            raise ValueError(
                f"Unsupported frontend_variant '{v}'. Allowed: {sorted(VARIANTS)}"
            )
        return v

    @property
    def variant(self) -> FrontendVariant:
        return VARIANTS[self.frontend_variant]

    @property
    def backend_base_url(self) -> str:
        return f"http://{self.backend_host}:{self.backend_port}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
