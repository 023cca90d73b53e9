"""
Board configuration.

Formation table, bench placement and colour scheme are passed around as one
explicit object instead of module constants. Every setting can be
overridden via environment variables prefixed with PITCHSIDE_.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from pitchside.core.formations import DEFAULT_FORMATION, FormationTable, get_formation


BENCH_POLICIES = ("vertical", "equal", "grid")


@dataclass
class BenchConfig:
    """Parameters for the bench placement policies."""

    policy: str = field(
        default_factory=lambda: os.getenv("PITCHSIDE_BENCH_POLICY", "vertical")
    )

    # Vertical list: x fixed, y = base_y + index * row_spacing
    base_x: float = 105.0
    base_y: float = 10.0
    row_spacing: float = 15.0

    # Grid: wraps every `columns` players
    columns: int = 4
    col_spacing: float = 6.0

    # Equal spacing: players spread over [span_top, span_bottom]
    span_top: float = 0.0
    span_bottom: float = 100.0

    def validate(self) -> list[str]:
        errors = []
        if self.policy not in BENCH_POLICIES:
            errors.append(
                f"Unknown bench policy {self.policy!r} (expected one of {', '.join(BENCH_POLICIES)})"
            )
        if self.row_spacing <= 0:
            errors.append("row_spacing must be positive")
        if self.col_spacing <= 0:
            errors.append("col_spacing must be positive")
        if self.columns < 1:
            errors.append("columns must be at least 1")
        if self.span_bottom <= self.span_top:
            errors.append("span_bottom must be below span_top")
        return errors


@dataclass
class ColorScheme:
    """Marker colours keyed by grade (school year / cohort)."""

    grades: dict[int, str] = field(default_factory=lambda: {
        1: "#2196f3",  # blue
        2: "#ffc107",  # yellow
        3: "#f44336",  # red
    })
    default: str = "#9e9e9e"
    ball: str = "#ffffff"


@dataclass
class BoardConfig:
    """Everything the layout pipeline and both views need to agree on."""

    starter_count: int = 11
    formation_name: str = field(
        default_factory=lambda: os.getenv("PITCHSIDE_FORMATION", DEFAULT_FORMATION)
    )
    # Explicit table; takes precedence over formation_name when set
    formation_table: Optional[FormationTable] = None

    bench: BenchConfig = field(default_factory=BenchConfig)
    colors: ColorScheme = field(default_factory=ColorScheme)

    ball_x: float = 50.0
    ball_y: float = 50.0
    fallback_x: float = 50.0
    fallback_y: float = 50.0
    pitch_right_edge: float = 100.0

    # 3D projection
    depth_scale: float = field(
        default_factory=lambda: float(os.getenv("PITCHSIDE_DEPTH_SCALE", "0.7"))
    )

    # Remote roster source
    source_url: str = field(default_factory=lambda: os.getenv("PITCHSIDE_SHEET_URL", ""))
    fetch_timeout: float = field(
        default_factory=lambda: float(os.getenv("PITCHSIDE_FETCH_TIMEOUT", "10"))
    )

    @classmethod
    def from_env(cls) -> "BoardConfig":
        """Create config from environment variables."""
        return cls()

    @property
    def formation(self) -> FormationTable:
        if self.formation_table is not None:
            return self.formation_table
        return get_formation(self.formation_name)

    @property
    def starter_max_x(self) -> float:
        """Right-most x used by any starter slot (or the fallback spot)."""
        xs = [slot[0] for slot in self.formation[: self.starter_count] if slot is not None]
        xs.append(self.fallback_x)
        return max(xs)

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = list(self.bench.validate())
        if self.starter_count < 0:
            errors.append("starter_count must not be negative")
        try:
            self.formation
        except KeyError as e:
            errors.append(str(e.args[0]))
            return errors

        bench_left = self.bench.base_x
        if bench_left <= self.pitch_right_edge:
            errors.append(
                f"bench base_x ({bench_left}) must lie right of the pitch edge ({self.pitch_right_edge})"
            )
        if bench_left <= self.starter_max_x:
            errors.append(
                f"bench base_x ({bench_left}) must lie right of every starter slot ({self.starter_max_x})"
            )
        if self.depth_scale <= 0:
            errors.append("depth_scale must be positive")
        return errors


# Singleton config instance
_config: Optional[BoardConfig] = None


def get_config() -> BoardConfig:
    """Get the global board configuration."""
    global _config
    if _config is None:
        _config = BoardConfig.from_env()
    return _config


def set_config(config: Optional[BoardConfig]) -> None:
    """
    Replace the global configuration.

    Passing None resets it so the next get_config() re-reads the environment.
    """
    global _config
    _config = config
