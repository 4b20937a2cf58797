"""Configuration structures and loading for ccgraph."""

import os
import tomllib
from decimal import Decimal
from pathlib import Path

import msgspec

from ccgraph.errors.types import ConfigError
from ccgraph.models import ChartKind
from ccgraph.models import Period
from ccgraph.models import Thresholds
from ccgraph.models import validate_thresholds


# Default values
DEFAULT_TIMEOUT = 10.0
DEFAULT_WIDTH = 50
DEFAULT_HEIGHT = 15

# Smallest usable chart sizes; MIN_WIDTH matches the --width flag
MIN_WIDTH = 10
MIN_HEIGHT = 5

_TRUTHY = {"1", "true", "yes", "on"}


# Chart configuration
class ChartConfig(msgspec.Struct):
    """Chart presentation settings."""

    type: ChartKind = ChartKind.BAR
    period: Period = Period.DAY
    show_threshold: bool = True
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    color: bool = True


# Threshold configuration
class ThresholdConfig(msgspec.Struct):
    """Plan price points in USD."""

    pro: float = 20.0
    pro_max: float = 200.0

    def to_thresholds(self) -> Thresholds:
        return Thresholds(pro=Decimal(str(self.pro)), pro_max=Decimal(str(self.pro_max)))


# Input configuration
class InputConfig(msgspec.Struct):
    """Stdin behavior settings."""

    timeout: float = DEFAULT_TIMEOUT


# Main configuration
class Config(msgspec.Struct):
    """Main configuration structure."""

    chart: ChartConfig = msgspec.field(default_factory=ChartConfig)
    thresholds: ThresholdConfig = msgspec.field(default_factory=ThresholdConfig)
    input: InputConfig = msgspec.field(default_factory=InputConfig)


def _load_from_toml(path: Path) -> dict:
    """Load configuration from TOML file."""
    if not path.exists():
        return {}

    with path.open("rb") as f:
        return tomllib.load(f)


def _save_to_toml(data: dict, path: Path) -> None:
    """Save configuration to TOML file."""
    import tomli_w

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        tomli_w.dump(data, f)


def validate_chart_config(chart: ChartConfig) -> list[str]:
    """Return list of validation errors, empty if valid."""
    errors = []
    if chart.width < MIN_WIDTH:
        errors.append(f"chart width {chart.width} must be at least {MIN_WIDTH}")
    if chart.height < MIN_HEIGHT:
        errors.append(f"chart height {chart.height} must be at least {MIN_HEIGHT}")
    return errors


def validate_input_config(input_config: InputConfig) -> list[str]:
    """Return list of validation errors, empty if valid."""
    if input_config.timeout <= 0:
        return [f"input timeout {input_config.timeout} must be positive"]
    return []


def validate_config(config: Config) -> list[str]:
    """Collect validation errors from every section."""
    return [
        *validate_chart_config(config.chart),
        *validate_thresholds(config.thresholds.to_thresholds()),
        *validate_input_config(config.input),
    ]


def convert_config(data: dict) -> Config:
    """Convert raw dict to Config struct."""
    return msgspec.convert(data, type=Config)


def _apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides to config.

    CCGRAPH_TIMEOUT: Seconds to wait for input
    CCGRAPH_CHART_TYPE: Default chart type (bar, line)
    CCGRAPH_NO_THRESHOLD: Hide threshold markers
    CCGRAPH_NO_COLOR / NO_COLOR: Disable colored output
    """
    chart = config.chart

    if "CCGRAPH_CHART_TYPE" in os.environ:
        chart = msgspec.structs.replace(
            chart, type=msgspec.convert(os.environ["CCGRAPH_CHART_TYPE"], ChartKind)
        )

    if os.environ.get("CCGRAPH_NO_THRESHOLD", "").lower() in _TRUTHY:
        chart = msgspec.structs.replace(chart, show_threshold=False)

    if os.environ.get("NO_COLOR") or "CCGRAPH_NO_COLOR" in os.environ:
        chart = msgspec.structs.replace(chart, color=False)

    config = msgspec.structs.replace(config, chart=chart)

    if "CCGRAPH_TIMEOUT" in os.environ:
        timeout = msgspec.convert(
            os.environ["CCGRAPH_TIMEOUT"], float, strict=False
        )
        config = msgspec.structs.replace(config, input=InputConfig(timeout=timeout))

    return config


# Config state storage
_config: Config | None = None


def get_config() -> Config:
    """Get the current configuration (singleton)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """Reload configuration from disk."""
    global _config
    _config = load_config()
    return _config


def load_config(path: Path | None = None) -> Config:
    """Load configuration from file with defaults.

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values
    """
    from .paths import config_file

    config_path = path or config_file()

    try:
        raw_data = _load_from_toml(config_path)
        config = convert_config(raw_data) if raw_data else Config()
        # Apply environment variable overrides
        config = _apply_env_overrides(config)
        if errors := validate_config(config):
            raise msgspec.ValidationError("; ".join(errors))
    except (tomllib.TOMLDecodeError, msgspec.ValidationError) as e:
        raise ConfigError(
            f"Invalid configuration in {config_path}: {e}",
            details={"path": str(config_path)},
        ) from e

    return config


def save_config(config: Config, path: Path | None = None) -> None:
    """Save configuration to file."""
    from .paths import config_file

    config_path = path or config_file()

    data = msgspec.to_builtins(config)

    _save_to_toml(data, config_path)

    # Update singleton
    global _config
    _config = config

