"""
Harness configuration.

A HarnessConfig is built once by the caller (CLI, pytest options or the
environment) and passed to the harness; nothing reads global flags.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from sfntcheck.config.paths import (
    DEFAULT_ADOBE_DIR,
    DEFAULT_MICROSOFT_DIR,
    ENV_ADOBE_DIR,
    ENV_ENABLED,
    ENV_MICROSOFT_DIR,
)
from sfntcheck.core.types import Provider

# How the directory for each provider is set, named in remediation hints
PROVIDER_OPTIONS: Mapping[Provider, tuple[str, str]] = MappingProxyType(
    {
        Provider.ADOBE: ("--adobe-dir", ENV_ADOBE_DIR),
        Provider.MICROSOFT: ("--microsoft-dir", ENV_MICROSOFT_DIR),
    }
)

_TRUTHY = {"1", "true", "yes", "on"}


def _default_directories() -> dict[Provider, Path | None]:
    return {
        Provider.ADOBE: DEFAULT_ADOBE_DIR,
        Provider.MICROSOFT: DEFAULT_MICROSOFT_DIR,
    }


@dataclass(frozen=True)
class HarnessConfig:
    """
    Configuration for one harness run.

    Attributes:
        enabled: Whether proprietary font checks run at all. Off by default
            because the fonts are not redistributable.
        directories: Base directory per provider; None means unset.
    """

    enabled: bool = False
    directories: Mapping[Provider, Path | None] = field(default_factory=_default_directories)

    def __post_init__(self) -> None:
        merged = _default_directories()
        merged.update(
            {p: Path(d) if d is not None else None for p, d in self.directories.items()}
        )
        object.__setattr__(self, "directories", MappingProxyType(merged))

    def directory_for(self, provider: Provider) -> Path | None:
        return self.directories.get(provider)

    def with_overrides(
        self,
        *,
        enabled: bool | None = None,
        adobe_dir: Path | str | None = None,
        microsoft_dir: Path | str | None = None,
    ) -> "HarnessConfig":
        """Return a copy with the given (non-None) values replaced."""
        directories = dict(self.directories)
        if adobe_dir is not None:
            directories[Provider.ADOBE] = Path(adobe_dir)
        if microsoft_dir is not None:
            directories[Provider.MICROSOFT] = Path(microsoft_dir)
        return HarnessConfig(
            enabled=self.enabled if enabled is None else enabled,
            directories=directories,
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "HarnessConfig":
        """Build a config from SFNTCHECK_* environment variables."""
        env = os.environ if environ is None else environ
        enabled = env.get(ENV_ENABLED, "").strip().lower() in _TRUTHY
        return cls().with_overrides(
            enabled=enabled,
            adobe_dir=env.get(ENV_ADOBE_DIR) or None,
            microsoft_dir=env.get(ENV_MICROSOFT_DIR) or None,
        )


def remediation_hint(provider: Provider, directory: Path | None) -> str:
    """Describe which configuration value to set to find a provider's fonts."""
    option, env_var = PROVIDER_OPTIONS[provider]
    current = "unset" if directory is None else str(directory)
    return (
        f"Perhaps you need to set {option} (or {env_var})? "
        f"Current {provider.value} directory: {current}"
    )
