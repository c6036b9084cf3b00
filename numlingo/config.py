"""Engine configuration using Pydantic."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from numlingo.constants import DEFAULT_LANGUAGE, DEFAULT_TOLERANCE
from numlingo.exceptions import ConfigurationError
from numlingo.linguistics.tables import LanguageCode, normalize_language


class NumberLinguisticsConfig(BaseModel):
    """Defaults applied by :class:`numlingo.engine.NumberLinguisticsEngine`."""

    model_config = ConfigDict(frozen=True)

    default_language: LanguageCode = LanguageCode(DEFAULT_LANGUAGE)
    default_country: str | None = None
    tolerance: float = Field(default=DEFAULT_TOLERANCE, gt=0)
    file_size_decimals: int = Field(default=1, ge=0, le=10)

    @field_validator("default_language", mode="before")
    @classmethod
    def _normalize_language(cls, value: Any) -> LanguageCode:
        if value is not None and not isinstance(value, str):
            raise ValueError(f"language code must be a string, got {type(value).__name__}")
        return normalize_language(value)

    @field_validator("default_country", mode="before")
    @classmethod
    def _normalize_country(cls, value: Any) -> str | None:
        if value is None:
            return None
        country = str(value).strip().upper()
        return country or None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create configuration from a plain dictionary.

        Raises:
            ConfigurationError: If any value is invalid.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
