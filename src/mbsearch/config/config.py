"""Configuration management for mbsearch."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Final

from mbsearch.config.file_ops import ensure_file_with_template, write_text_file
from mbsearch.config.paths import default_config_path
from mbsearch.platform.logging import logger

DEFAULT_ROOT_URL: Final[str] = "https://musicbrainz.org/ws/2"
DEFAULT_APP_NAME: Final[str] = "mbsearch"
DEFAULT_APP_VERSION: Final[str] = "0.1.0"
DEFAULT_TIMEOUT_SECONDS: Final[float] = 15.0


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


class ConfigError(ValueError):
    """Raised when the TOML configuration cannot be read or has invalid values."""


@dataclass
class Config:
    """Client configuration."""

    # WS2 root address and client identity sent as User-Agent
    root_url: str = DEFAULT_ROOT_URL
    app_name: str = DEFAULT_APP_NAME
    app_version: str = DEFAULT_APP_VERSION
    contact: str = ""

    # Per-request timeout in seconds; None disables it
    timeout_seconds: float | None = DEFAULT_TIMEOUT_SECONDS

    log_file: Path | None = _path_field()

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if self.timeout_seconds is not None:
            if isinstance(self.timeout_seconds, bool) or not isinstance(
                self.timeout_seconds, (int, float)
            ):
                raise ConfigError(f"timeout_seconds must be a number, got {self.timeout_seconds!r}")
            if self.timeout_seconds <= 0:
                self.timeout_seconds = None

    @classmethod
    def load(cls, path: Path | None = None) -> Config:
        """Load configuration from TOML, falling back to defaults when absent.

        Args:
            path: Explicit config file. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file is not valid TOML or has unknown keys.
        """
        config_file = path or default_config_path()
        if not config_file.exists():
            logger.debug("No configuration at %s; using defaults", config_file)
            return cls()

        try:
            with open(config_file, "rb") as f:
                config_dict = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            logger.error("Failed to load configuration: %s", exc)
            raise ConfigError(f"Cannot read {config_file}: {exc}") from exc

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys in {config_file}: {', '.join(unknown)}")

        logger.debug("Configuration loaded from %s", config_file)
        return cls(**config_dict)

    def save(self, path: Path | None = None, *, overwrite: bool = True) -> bool:
        """Write configuration as commented TOML.

        Returns:
            bool: ``False`` when ``overwrite`` is off and the file already exists.
        """
        target = path or default_config_path()
        if overwrite:
            write_text_file(target, self.render_toml())
            created = True
        else:
            created = ensure_file_with_template(target, template_provider=self.render_toml)
        if created:
            logger.info("Configuration saved to %s", target)
        return created

    def render_toml(self) -> str:
        """Render configuration as TOML with inline guidance."""

        config = asdict(self)
        lines: list[str] = []

        lines.append("# mbsearch configuration file")
        lines.append("")

        lines.append("# MusicBrainz WS2 root address")
        lines.append(f"root_url = {self._format_toml_value(config['root_url'])}")
        lines.append("")

        lines.append("# Application identity sent as the User-Agent header.")
        lines.append("# MusicBrainz asks for a meaningful name, version and contact.")
        lines.append(f"app_name = {self._format_toml_value(config['app_name'])}")
        lines.append(f"app_version = {self._format_toml_value(config['app_version'])}")
        lines.append(f"contact = {self._format_toml_value(config['contact'])}")
        lines.append("")

        lines.append("# Request timeout in seconds (0 disables the timeout)")
        timeout = config["timeout_seconds"]
        lines.append(f"timeout_seconds = {self._format_toml_value(timeout if timeout is not None else 0)}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/mbsearch.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    @staticmethod
    def _format_toml_value(value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)


__all__ = [
    "Config",
    "ConfigError",
    "DEFAULT_APP_NAME",
    "DEFAULT_APP_VERSION",
    "DEFAULT_ROOT_URL",
    "DEFAULT_TIMEOUT_SECONDS",
]
