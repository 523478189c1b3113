"""langpick configuration settings."""

import json
from typing import Annotated, Any, Dict, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_SYNONYMS: Dict[str, str] = {
    # if the header carries 'gb' or 'us' then 'en' is used instead
    "gb": "en",
    "us": "en",
    "ua": "uk",
    "cn": "zh",
    "hk": "zh",
    "tw": "zh",
}


class TranslateSettings(BaseSettings):
    """Translation and locale negotiation settings.

    Environment Variables:
        TRANSLATE_LANGUAGE: Explicit language override (negotiated like a header)
        TRANSLATE_DEFAULT_LANGUAGE: Locale used when nothing matches (default: en)
        TRANSLATE_ACCEPT_LANGUAGE: Preference header injected by the caller
        TRANSLATE_MAX_LANGUAGES: Maximum header entries considered (default: 99)
        TRANSLATE_AVAILABLE: Available locales, comma-separated or JSON list
        TRANSLATE_SYNONYMS: Synonym table, JSON object or "gb=en,us=en"
        TRANSLATE_MESSAGES_DIR: Directory with YAML message files
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: Deployment environment, "production" enables JSON logs

    Example:
        ```python
        from langpick.core.config import settings

        if settings.available:
            locales = settings.available
        ```
    """

    language: Optional[str] = Field(default=None, alias="TRANSLATE_LANGUAGE")
    default_language: str = Field(default="en", alias="TRANSLATE_DEFAULT_LANGUAGE")
    accept_language: Optional[str] = Field(
        default=None, alias="TRANSLATE_ACCEPT_LANGUAGE"
    )
    max_languages: int = Field(default=99, ge=1, alias="TRANSLATE_MAX_LANGUAGES")
    available: Annotated[Optional[List[str]], NoDecode] = Field(
        default=None, alias="TRANSLATE_AVAILABLE"
    )
    synonyms: Annotated[Dict[str, str], NoDecode] = Field(
        default_factory=lambda: dict(DEFAULT_SYNONYMS), alias="TRANSLATE_SYNONYMS"
    )
    messages_dir: str = Field(default="locales", alias="TRANSLATE_MESSAGES_DIR")

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("available", mode="before")
    @classmethod
    def _parse_available(cls, v: Any) -> Any:
        """Parse TRANSLATE_AVAILABLE from a JSON list or comma-separated string."""
        if v is None:
            return None
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return None
            if v.startswith("["):
                return json.loads(v)
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    @field_validator("synonyms", mode="before")
    @classmethod
    def _parse_synonyms(cls, v: Any) -> Any:
        """Parse TRANSLATE_SYNONYMS from a JSON object or "a=b,c=d" pairs."""
        if v is None:
            return {}
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return {}
            if v.startswith("{"):
                return json.loads(v)
            pairs = {}
            for item in v.split(","):
                if "=" not in item:
                    raise ValueError(f"Invalid synonym entry: {item!r}")
                alias, target = item.split("=", 1)
                pairs[alias.strip()] = target.strip()
            return pairs
        return v

    @property
    def is_production(self) -> bool:
        """Check if the library runs in a production deployment.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"


settings = TranslateSettings()
