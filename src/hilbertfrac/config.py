"""Settings loaded from HILBERTFRAC_* environment variables"""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime configuration.

    Attributes:
        max_depth: Deepest recursion the adapter accepts
        precision: Mantissa bits extracted from a fraction
        cache_size: Entries kept by the resolution memo
        rotate: Hilbert mode; False selects the fixed-table quadtree mode
        log_level: Package log level applied by the CLI; None keeps LOG_LEVEL
    """

    max_depth: int = 5
    precision: int = 32
    cache_size: int = 128
    rotate: bool = True
    log_level: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="HILBERTFRAC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("max_depth")
    @classmethod
    def _check_max_depth(cls, value: int) -> int:
        if value < 1:
            raise ValueError(f"max_depth must be >= 1, got {value}")
        return value

    @field_validator("precision", "cache_size")
    @classmethod
    def _check_non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError(f"Must be >= 0, got {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: Optional[str]) -> Optional[str]:
        return value.upper() if value else None

    @model_validator(mode="after")
    def _check_precision_even(self) -> "Settings":
        # Bits are consumed in pairs
        if self.precision % 2:
            raise ValueError(f"precision must be even, got {self.precision}")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
