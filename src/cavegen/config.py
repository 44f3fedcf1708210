"""Cave generation configuration models and TOML loading."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

# Presets ship as package data next to this module
BUNDLED_CONFIG_DIR = Path(__file__).parent / "configs"


class AutomatonConfig(BaseModel):
    """Random fill and cellular automaton smoothing parameters."""

    fill_probability: float = Field(
        default=0.45, ge=0.0, le=1.0, description="Chance an interior cell starts as wall"
    )
    smooth_iterations: int = Field(
        default=5, ge=0, description="Number of smoothing passes"
    )


class ConnectivityConfig(BaseModel):
    """Room merging and supplementary corridor parameters."""

    min_room_size: int = Field(
        default=20, ge=1, description="Secondary rooms smaller than this are filled"
    )
    corridor_cell_divisor: int = Field(
        default=5000, ge=1, description="One extra corridor per this many cells"
    )
    corridor_length_min: int = Field(
        default=5, ge=1, description="Shortest supplementary corridor"
    )
    corridor_length_max: int = Field(
        default=19, ge=1, description="Longest supplementary corridor (inclusive)"
    )

    @model_validator(mode="after")
    def _check_length_range(self) -> "ConnectivityConfig":
        if self.corridor_length_max < self.corridor_length_min:
            raise ValueError("corridor_length_max must be >= corridor_length_min")
        return self


class ClusterConfig(BaseModel):
    """Wall speck removal parameters."""

    max_size: int = Field(
        default=3, ge=1, description="Wall clusters smaller than this are removed"
    )


class EndpointConfig(BaseModel):
    """Start/end placement parameters."""

    min_distance: float = Field(
        default=30.0, ge=0.0, description="Target straight-line start/end separation"
    )
    max_attempts: int = Field(
        default=20, ge=0, description="Redraws when the first pair is too close"
    )


class CaveConfig(BaseModel):
    """Complete cave generation configuration."""

    seed: int | None = Field(
        default=None, description="Random seed (None = fresh entropy)"
    )
    width: int = Field(default=128, ge=3, description="Map width in cells")
    height: int = Field(default=128, ge=3, description="Map height in cells")

    automaton: AutomatonConfig = Field(default_factory=AutomatonConfig)
    connectivity: ConnectivityConfig = Field(default_factory=ConnectivityConfig)
    clusters: ClusterConfig = Field(default_factory=ClusterConfig)
    endpoints: EndpointConfig = Field(default_factory=EndpointConfig)


def load_config(config_path: Path) -> CaveConfig:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed CaveConfig object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If values are out of range.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return CaveConfig.model_validate(data)


def find_config(name: str | Path) -> Path:
    """Resolve a cave config from a file path or a bundled preset name.

    Anything that looks like a path (has a directory part or a ``.toml``
    suffix) must exist as given. A bare name such as ``"small"`` is looked up
    among the presets shipped inside the package.

    Raises:
        FileNotFoundError: If neither a file nor a preset matches.
    """
    path = Path(name)
    if path.suffix == ".toml" or path.parent != Path("."):
        if path.is_file():
            return path
        raise FileNotFoundError(f"Cave config file not found: {path}")

    preset = BUNDLED_CONFIG_DIR / f"{path.name}.toml"
    if preset.is_file():
        return preset

    raise FileNotFoundError(
        f"Cave preset '{name}' not found; bundled presets: {list_configs()}"
    )


def list_configs() -> list[str]:
    """Names of the presets shipped with the package."""
    return sorted(p.stem for p in BUNDLED_CONFIG_DIR.glob("*.toml"))
