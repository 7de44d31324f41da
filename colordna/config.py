"""Colour scheme configuration: built-in defaults and a YAML configuration file."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Any

import yaml

__all__ = [
    "ColorScheme",
    "Config",
    "ConfigError",
    "default_config",
    "parse_config",
    "create_default_config",
    "load",
]

_STRING_FIELDS = ("a", "t", "g", "c", "u", "n", "quality")

_HEADER = (
    "# colordna Configuration File\n"
    "# This file contains color schemes for DNA/RNA sequence visualization\n"
    "# \n"
    "# Color format: ANSI escape sequences\n"
    "# - Font colors: \\033[91m (bright red), \\033[92m (bright green), etc.\n"
    "# - Background colors: \\033[41m\\033[97m (red background + white text)\n"
    "# - Styles: \\033[1m (bold), \\033[4m (underline), \\033[3m (italic)\n"
    "#\n"
    "# You can create custom color schemes by adding new entries under color_schemes.\n"
    "# The 'bright' scheme is the default and uses only font colors (no backgrounds).\n"
    "\n"
)


class ConfigError(Exception):
    """Raised when a configuration file cannot be parsed or written."""


@dataclass(frozen=True)
class ColorScheme:
    """ANSI codes for each nucleotide plus the quality-score style."""

    a: str = ""
    t: str = ""
    g: str = ""
    c: str = ""
    u: str = ""
    n: str = ""
    quality: str = ""
    background: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the scheme as a mapping with the configuration file's keys."""
        return {
            "a": self.a,
            "t": self.t,
            "g": self.g,
            "c": self.c,
            "u": self.u,
            "n": self.n,
            "quality": self.quality,
            "background": self.background,
        }

    @classmethod
    def _from_mapping(cls, name: str, data: Any) -> ColorScheme:
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"color scheme '{name}' must be a mapping")
        values: dict[str, Any] = {}
        for key in _STRING_FIELDS:
            value = data.get(key)
            if value is None:
                continue
            if not isinstance(value, str):
                raise ConfigError(f"color scheme '{name}': field '{key}' must be a string")
            values[key] = value
        background = data.get("background")
        if background is not None:
            if not isinstance(background, bool):
                raise ConfigError(f"color scheme '{name}': field 'background' must be a boolean")
            values["background"] = background
        return cls(**values)


@dataclass
class Config:
    """The application configuration: named colour schemes."""

    color_schemes: dict[str, ColorScheme] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as a mapping, schemes sorted by name."""
        return {
            "color_schemes": {
                name: self.color_schemes[name].to_dict() for name in sorted(self.color_schemes)
            }
        }


def default_config() -> Config:
    """Return a fresh copy of the built-in configuration."""
    return Config(
        color_schemes={
            "bright": ColorScheme(
                a="\033[91m",
                t="\033[92m",
                g="\033[93m",
                c="\033[94m",
                u="\033[95m",
                n="\033[90m",
                quality="gradient",
                background=False,
            ),
            "classic": ColorScheme(
                a="\033[41m\033[97m",
                t="\033[42m\033[30m",
                g="\033[43m\033[30m",
                c="\033[44m\033[97m",
                u="\033[45m\033[97m",
                n="\033[100m\033[97m",
                quality="gradient",
                background=True,
            ),
            "pastel": ColorScheme(
                a="\033[101m\033[30m",
                t="\033[102m\033[30m",
                g="\033[103m\033[30m",
                c="\033[104m\033[30m",
                u="\033[105m\033[30m",
                n="\033[47m\033[30m",
                quality="gradient",
                background=True,
            ),
            "monochrome": ColorScheme(
                a="\033[1m",
                t="\033[4m",
                g="\033[3m",
                c="\033[2m",
                u="\033[9m",
                n="\033[90m",
                quality="mono",
                background=False,
            ),
        }
    )


def parse_config(text: str | bytes) -> Config:
    """Parse YAML configuration text without adding default schemes."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML: {exc}") from exc
    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a mapping")
    schemes_data = data.get("color_schemes")
    if schemes_data is None:
        return Config()
    if not isinstance(schemes_data, dict):
        raise ConfigError("'color_schemes' must be a mapping")
    schemes: dict[str, ColorScheme] = {}
    for name, scheme in schemes_data.items():
        if not isinstance(name, str):
            raise ConfigError(f"color scheme name {name!r} must be a string")
        schemes[name] = ColorScheme._from_mapping(name, scheme)
    return Config(color_schemes=schemes)


def create_default_config(config_path: str | os.PathLike[str]) -> None:
    """Write the built-in configuration, with an explanatory header, to a file."""
    directory = os.path.dirname(os.fspath(config_path))
    try:
        if directory:
            os.makedirs(directory, mode=0o755, exist_ok=True)
    except OSError as exc:
        raise ConfigError(f"failed to create config directory: {exc}") from exc

    body = yaml.safe_dump(default_config().to_dict(), sort_keys=False, allow_unicode=True)
    try:
        with open(config_path, "w", encoding="utf-8") as handle:
            handle.write(_HEADER + body)
    except OSError as exc:
        raise ConfigError(f"failed to write config file: {exc}") from exc


def _log(message: str) -> None:
    print(message, file=sys.stderr)


def load(config_path: str | os.PathLike[str], verbose: bool = False) -> Config:
    """Load the configuration, creating the file with defaults if it is missing.

    Built-in schemes missing from the file are added. If the file cannot be
    created or read, the built-in configuration is returned. A file that cannot
    be parsed raises ConfigError.
    """
    try:
        os.stat(config_path)
    except FileNotFoundError:
        if verbose:
            _log(f"Config file not found, creating default config at: {os.fspath(config_path)}")
        try:
            create_default_config(config_path)
        except ConfigError:
            if verbose:
                _log("Could not create config file, using built-in defaults")
            return default_config()
        if verbose:
            _log("Default config file created successfully")
    except OSError:
        pass

    try:
        with open(config_path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        if verbose:
            _log(f"Could not read config file, using built-in defaults: {exc}")
        return default_config()

    try:
        config = parse_config(data)
    except ConfigError as exc:
        raise ConfigError(f"failed to parse config file: {exc}") from exc

    if verbose:
        _log("Config file parsed successfully")
        _log(f"Found {len(config.color_schemes)} color scheme(s) in config file")

    merged = 0
    for name, scheme in default_config().color_schemes.items():
        if name not in config.color_schemes:
            config.color_schemes[name] = scheme
            merged += 1

    if verbose and merged:
        _log(f"Merged {merged} default color scheme(s)")

    return config