from pathlib import Path

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_package_root = Path(__file__).resolve().parent
_project_root = _package_root.parent
load_dotenv(_project_root / ".env", override=False)


class Settings(BaseSettings):
    ENVIRONMENT: str = "development"

    # Directory holding base_tokens.json and themes/*.json. Defaults to the packaged templates.
    THEME_TEMPLATES_DIR: str | None = None
    THEME_DEFAULT_LOGO_ASSET: str = "/assets/images/logo.svg"
    THEME_CUSTOM_NAME_PREFIX: str = "Custom Theme"
    # Single-color edits in the builder re-run the contrast fix-up pass.
    THEME_BUILDER_ENFORCE_CONTRAST: bool = True

    @field_validator("THEME_CUSTOM_NAME_PREFIX")
    @classmethod
    def validate_name_prefix(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("THEME_CUSTOM_NAME_PREFIX must not be blank")
        return cleaned

    @field_validator("THEME_TEMPLATES_DIR", mode="before")
    @classmethod
    def blank_templates_dir(cls, value: str | None) -> str | None:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def templates_dir(self) -> Path:
        if self.THEME_TEMPLATES_DIR:
            return Path(self.THEME_TEMPLATES_DIR)
        return _package_root / "templates"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
