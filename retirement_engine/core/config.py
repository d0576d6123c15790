"""Engine configuration using Pydantic Settings."""

from decimal import Decimal
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_FORMATS = ("json", "console")
FILING_STATUS_VALUES = ("single", "married_joint")


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RETIREMENT_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: str = "development"
    """Current environment (development, staging, production)."""

    debug: bool = False
    """Enable debug logging."""

    log_format: str | None = None
    """Logging format override (json or console). Defaults by environment."""

    # Distribution defaults applied when a request omits them
    default_retirement_return: Decimal = Field(
        default=Decimal("0.05"), ge=Decimal("0"), le=Decimal("0.5")
    )
    """Return earned during retirement for interest and fixed-period draws."""

    default_swr_rate: Decimal = Field(
        default=Decimal("0.04"), ge=Decimal("0"), le=Decimal("0.2")
    )
    """Safe withdrawal rate used when the request does not supply one."""

    default_fixed_years: int = Field(default=20, ge=1, le=50)
    """Depletion horizon for fixed-period draws."""

    default_filing_status: str = "married_joint"
    """Filing status used when the request does not supply one."""

    sensitivity_workers: int = 1
    """Thread pool size for the sensitivity sweep. 1 runs it sequentially."""

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, value: object) -> str | None:
        """Lower-case the log format and reject unknown renderers."""
        if value is None:
            return None
        text = str(value).strip().lower()
        if not text:
            return None
        if text not in LOG_FORMATS:
            raise ValueError(
                f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {value!r}"
            )
        return text

    @field_validator("default_filing_status", mode="before")
    @classmethod
    def normalize_filing_status(cls, value: object) -> str:
        """Accept the short "mfj" spelling used by older payloads."""
        text = str(value).strip().lower()
        if text == "mfj":
            text = "married_joint"
        if text not in FILING_STATUS_VALUES:
            raise ValueError(
                f"DEFAULT_FILING_STATUS must be one of {', '.join(FILING_STATUS_VALUES)}"
            )
        return text

    @field_validator("sensitivity_workers")
    @classmethod
    def require_positive(cls, value: int) -> int:
        """Worker count must be at least 1."""
        if value < 1:
            raise ValueError(f"must be >= 1, got {value}")
        return value


try:
    settings = Settings()
except Exception as exc:
    env_file = Path(".env")
    suggestions = [
        "Check RETIREMENT_ENGINE_* environment variables.",
        "RETIREMENT_ENGINE_LOG_FORMAT accepts: json, console",
        "RETIREMENT_ENGINE_DEFAULT_FILING_STATUS accepts: single, married_joint",
        "Distribution defaults must satisfy the request bounds "
        "(retirement return 0-0.5, SWR 0-0.2, fixed years 1-50).",
    ]

    raise RuntimeError(
        "Failed to initialize engine settings. "
        f"Check environment variables in {env_file.resolve() if env_file.exists() else '.env'}.\n"
        + f"Error: {exc}\n"
        + "\n".join(suggestions)
    ) from exc
