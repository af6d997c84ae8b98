# portfolio_api/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from pathlib import Path
from typing import List

ROOT_DIR = Path(__file__).resolve().parents[2]

# Used when CAREER_SALT is not configured (local development).
DEFAULT_CAREER_SALT = "portfolio-career-2026"


class Settings(BaseSettings):
    app_env: str = Field("dev")
    debug: bool = Field(False)
    log_level: str = Field("INFO")

    # CORS
    allowed_origins: str = Field("*")

    # public site, used for direct links printed by manage-codes
    site_url: str = Field("http://localhost:8888")

    # code generation / local store
    career_codes_file: Path = Field(ROOT_DIR / "career-codes.json")
    code_length:   int = Field(6)
    code_alphabet: str = Field("ABCDEFGHJKMNPQRSTUVWXYZ23456789")

    model_config = SettingsConfigDict(
        env_file=ROOT_DIR / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def allowed_origins_list(self) -> List[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


class CodesConfig(BaseSettings):
    """
    Access-code list and token secret.

    Instantiated on every validation request, so a changed CAREER_CODES
    is picked up without a restart. ``career_codes`` stays a raw string:
    parsing it is the validator's job, and a malformed value must surface
    as a configuration fault rather than a settings error at startup.
    """
    career_codes: str = Field("[]")
    career_salt:  str = Field(DEFAULT_CAREER_SALT)

    model_config = SettingsConfigDict(
        env_file=ROOT_DIR / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def get_codes_config() -> CodesConfig:
    return CodesConfig()


settings = Settings()
