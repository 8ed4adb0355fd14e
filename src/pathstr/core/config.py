import os
from pathlib import Path

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # Python 3.10
from dataclasses import dataclass
from typing import Any

from .exceptions import ConfigError

OUTPUT_FORMATS = ("table", "json")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass
class Config:
    """Unified configuration for pathstr.

    Priority (highest to lowest):
    1. CLI arguments (set at runtime)
    2. Environment variables
    3. config.toml file
    4. Default values
    """

    output_format: str = "table"
    no_color: bool = False
    fail_fast: bool = False

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Unknown output format {self.output_format!r} "
                f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
            )

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from all sources with proper priority.

        Args:
            config_path: Path to config.toml file (defaults to cwd/config.toml)

        Returns:
            Config instance with merged settings
        """
        config_data: dict[str, Any] = {}

        if config_path is None:
            config_path = Path.cwd() / "config.toml"

        if config_path.exists():
            config_data = cls._load_toml(config_path)

        config_data = cls._merge_env(config_data)

        return cls(**config_data)

    @staticmethod
    def _load_toml(path: Path) -> dict[str, Any]:
        """Load configuration from TOML file."""
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e

        result: dict[str, Any] = {}

        if "output" in data:
            output = _toml_table(data, "output")
            if "format" in output:
                result["output_format"] = _toml_value(output, "output", "format", str)
            if "no_color" in output:
                result["no_color"] = _toml_value(output, "output", "no_color", bool)

        if "check" in data:
            check = _toml_table(data, "check")
            if "fail_fast" in check:
                result["fail_fast"] = _toml_value(check, "check", "fail_fast", bool)

        return result

    @staticmethod
    def _merge_env(config_data: dict[str, Any]) -> dict[str, Any]:
        """Merge environment variables into config (env takes priority over file)."""
        from dotenv import load_dotenv

        env_path = Path.cwd() / ".env"
        if env_path.exists():
            load_dotenv(env_path, override=True)

        value = os.environ.get("PATHSTR_OUTPUT_FORMAT")
        if value is not None:
            config_data["output_format"] = value.strip().lower()

        # https://no-color.org: any non-empty value disables color
        if os.environ.get("NO_COLOR"):
            config_data["no_color"] = True

        value = os.environ.get("PATHSTR_FAIL_FAST")
        if value is not None:
            config_data["fail_fast"] = _parse_bool("PATHSTR_FAIL_FAST", value)

        return config_data

    def merge_cli_args(self, **kwargs) -> "Config":
        """Create new Config with CLI arguments merged in (CLI args have highest priority).

        Args:
            **kwargs: CLI arguments to override config values

        Returns:
            New Config instance with CLI args merged
        """
        updates = {k: v for k, v in kwargs.items() if v is not None}

        from dataclasses import replace

        return replace(self, **updates)


def _toml_table(data: dict[str, Any], name: str) -> dict[str, Any]:
    table = data[name]
    if not isinstance(table, dict):
        raise ConfigError(f"[{name}] in config.toml must be a table")
    return table


def _toml_value(table: dict[str, Any], section: str, key: str, expected: type) -> Any:
    value = table[key]
    if not isinstance(value, expected):
        raise ConfigError(
            f"{section}.{key} in config.toml must be a {expected.__name__}, got {value!r}"
        )
    return value


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean, got {value!r}")


_global_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance, loading it if not already loaded."""
    global _global_config
    if _global_config is None:
        _global_config = Config.load()
    return _global_config


def set_config(config: Config) -> None:
    """Set the global config instance."""
    global _global_config
    _global_config = config
