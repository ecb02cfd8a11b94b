"""Rendering configuration from explicit arguments or environment variables."""

from __future__ import annotations

from typing import Final

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.num_utils import DEFAULT_PRECISION

ENV_PREFIX: Final = "SASSY_GRADIENTS_"
LEGACY_PREFIX_ENV: Final = ENV_PREFIX + "LEGACY_PREFIX"
PRECISION_ENV: Final = ENV_PREFIX + "PRECISION"
DEFAULT_LEGACY_PREFIX_NAME: Final = "-webkit-"


class RenderConfig(BaseSettings):
    """
    Options for turning a gradient into CSS.

    legacy_prefix: also emit the prefixed legacy gradient before the standard one
    precision: decimal digits kept when writing stop positions and angles
    legacy_prefix_name: vendor prefix put in front of ``linear-gradient``

    Fields not passed explicitly are read from ``SASSY_GRADIENTS_*``
    environment variables, then fall back to the defaults.
    """
    legacy_prefix: bool = False
    precision: int = Field(DEFAULT_PRECISION, ge=0)
    legacy_prefix_name: str = DEFAULT_LEGACY_PREFIX_NAME

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, frozen=True)

    @classmethod
    def from_env(cls) -> RenderConfig:
        """Build a config entirely from the environment."""
        return cls()


# Every field passed explicitly so the default never depends on the environment.
DEFAULT_CONFIG: Final = RenderConfig(
    legacy_prefix=False,
    precision=DEFAULT_PRECISION,
    legacy_prefix_name=DEFAULT_LEGACY_PREFIX_NAME,
)
