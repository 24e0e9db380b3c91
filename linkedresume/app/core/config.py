"""
Application configuration settings.
Loads from .env file first (overrides shell env for local dev), then pydantic reads from environment.

All service configs and scraping constants are centralized here.
"""
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env path: <repo>/.env (absolute path, works regardless of cwd)
_BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent
_ENV_FILE = (_BASE_DIR / ".env").resolve()
_PACKAGE_DIR = Path(__file__).resolve().parent.parent.parent

if _ENV_FILE.exists():
    load_dotenv(_ENV_FILE, override=True)


class Settings(BaseSettings):
    """Application settings. Source: env vars (after dotenv load)."""

    # App
    app_name: str = "linkedresume"
    app_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8080

    # Resume assembly
    profile_network: str = "LinkedIn"

    # Theme rendering service
    theme_service_url: str = "http://themes.jsonresume.org/theme"

    # Theme listing on the index page (disabled when the URL is empty)
    themes_catalog_url: str = ""
    themes_catalog_selector: str = ".theme .name"

    # Templates
    templates_dir: str = str(_PACKAGE_DIR / "templates")

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


# --- Constants (non-env, page layout) ---

# Basic info
NAME_SELECTOR: str = "#name"
LABEL_SELECTOR: str = ".headline.title"
PICTURE_SELECTOR: str = ".profile-picture img"
PICTURE_ATTR: str = "data-delayed-url"
SUMMARY_SELECTOR: str = "#summary .description p"
REGION_SELECTOR: str = "#demographics .locality"

# Work history
WORK_RECORD_SELECTOR: str = "#experience .position"
COMPANY_SELECTOR: str = "header .item-subtitle span"
POSITION_SELECTOR: str = "header .item-title span"
WORK_SUMMARY_SELECTOR: str = ".description"

# Education
EDUCATION_RECORD_SELECTOR: str = "#education .school"
INSTITUTION_SELECTOR: str = "header .item-title span"
DEGREE_SELECTOR: str = "header .item-subtitle span"

# Shared by work and education records
DATE_RANGE_SELECTOR: str = ".meta .date-range"

# Flat sections
SKILL_SELECTOR: str = "#skills .skill"
LANGUAGE_RECORD_SELECTOR: str = "#languages .language"
LANGUAGE_NAME_SELECTOR: str = ".name"
PROFICIENCY_SELECTOR: str = ".proficiency"
INTEREST_SELECTOR: str = "#interests .interest"

# Text parsing
DATE_RANGE_SEP: str = "–"  # en dash
DURATION_OPEN: str = "("
DEGREE_SEP: str = ", "
LINE_BREAK_TAG: str = "<br/>"
