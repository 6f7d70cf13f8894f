"""
Typed CLI configuration using Pydantic.

Usage:
    from infield_cli.config import InfieldConfig

    # Load from YAML file (packaged config.yaml by default)
    config = InfieldConfig.from_yaml("config.yaml", overrides={"discovery": {"backend": "namespace"}})

    config.discovery.backend        # "namespace"
    config.output.format            # "yaml"

    # Build the library objects the config describes
    discovery = config.discovery.build()
"""

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from infield_lib.backends import SCANNERS, get_scanner
from infield_lib.discovery import InputFieldDiscovery, NameCollisionPolicy
from infield_lib.strategies import DefaultInclusionPolicy, DefaultTypeTransformer

CONFIG_ENV_VAR = "INFIELD_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


# =============================================================================
# Sections
# =============================================================================

class DiscoveryConfig(BaseModel):
    """Scanner selection and discovery strategies."""
    backend: str = "inspect"
    include_modules: list[str] = Field(default_factory=list)
    collision_policy: NameCollisionPolicy = NameCollisionPolicy.FAIL
    unwrap_optional: bool = False
    compare_backends: bool = False
    cache: bool = True

    model_config = ConfigDict(extra="forbid")

    @field_validator("backend")
    @classmethod
    def _known_backend(cls, value: str) -> str:
        if value not in SCANNERS:
            raise ValueError(f"unknown backend '{value}', expected one of: {', '.join(sorted(SCANNERS))}")
        return value

    @field_validator("include_modules", mode="before")
    @classmethod
    def _split_modules(cls, value):
        # CLI overrides arrive as "pkg_a,pkg_b"
        if isinstance(value, str):
            return [m.strip() for m in value.split(",") if m.strip()]
        return value

    def inclusion_policy(self) -> DefaultInclusionPolicy:
        return DefaultInclusionPolicy(*self.include_modules)

    def type_transformer(self) -> DefaultTypeTransformer:
        return DefaultTypeTransformer(unwrap_optional=self.unwrap_optional)

    def build(self) -> InputFieldDiscovery:
        return InputFieldDiscovery(
            get_scanner(self.backend),
            inclusion_policy=self.inclusion_policy(),
            type_transformer=self.type_transformer(),
            collision_policy=self.collision_policy,
            cache=self.cache,
        )

    def scanners(self) -> list:
        """Configured backend first, then every other backend."""
        return [get_scanner(self.backend)] + [get_scanner(n) for n in sorted(SCANNERS) if n != self.backend]


class OutputConfig(BaseModel):
    """How discovered fields are printed."""
    format: Literal["yaml", "json_schema"] = "yaml"
    strip_nulls: bool = True

    model_config = ConfigDict(extra="forbid")


class LoggingConfig(BaseModel):
    level: str = "INFO"

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# Root
# =============================================================================

class InfieldConfig(BaseModel):
    """Root configuration.

    Usage:
        config = InfieldConfig.from_yaml("config.yaml")
        config.discovery.backend
    """
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def from_yaml(cls, config_path: str | Path, overrides: dict | None = None) -> "InfieldConfig":
        """Load configuration from YAML file with optional overrides.

        Args:
            config_path: Path to YAML config file
            overrides: Optional dict of overrides (supports nested keys)
        """
        with open(config_path, "r") as f:
            raw_config = yaml.safe_load(f) or {}
        return cls.from_dict(raw_config, overrides)

    @classmethod
    def from_dict(cls, config_dict: dict, overrides: dict | None = None) -> "InfieldConfig":
        """Load configuration from dict with optional overrides."""
        if overrides:
            config_dict = cls._deep_merge(config_dict, overrides)
        return cls.model_validate(config_dict)

    @classmethod
    def load(cls, overrides: dict | None = None) -> "InfieldConfig":
        """Load from $INFIELD_CONFIG if set, else the packaged config.yaml."""
        config_path = os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
        return cls.from_yaml(config_path, overrides=overrides)

    @staticmethod
    def _deep_merge(base: dict, override: dict) -> dict:
        """Deep merge override dict into base dict."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = InfieldConfig._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def to_dict(self) -> dict:
        """Export configuration as dict."""
        return self.model_dump(mode="json")
