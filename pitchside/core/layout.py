"""Layout assigner: give every parsed player a starting board position.

The first `starter_count` rows take the formation slots in order. Everyone
after that goes to the bench, which sits right of the pitch and is laid out
by a bench policy computed from the bench index. The ball is appended last
at the centre spot.
"""

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Optional, Sequence

from pitchside.core.config import BenchConfig, BoardConfig, get_config
from pitchside.core.models.entity import Ball, BoardPoint, Entity, Player


class BenchPolicy(ABC):
    """Computes a bench position from (bench_index, bench_count)."""

    def __init__(self, config: BenchConfig) -> None:
        self.config = config

    @abstractmethod
    def place(self, bench_index: int, bench_count: int) -> BoardPoint:
        """Return the board position for the bench_index-th substitute."""


class VerticalBench(BenchPolicy):
    """Single column, fixed row spacing. Grows downward without bound."""

    def place(self, bench_index: int, bench_count: int) -> BoardPoint:
        c = self.config
        return BoardPoint(c.base_x, c.base_y + bench_index * c.row_spacing)


class EqualSpacingBench(BenchPolicy):
    """Single column spread evenly over the bench span, whatever its size."""

    def place(self, bench_index: int, bench_count: int) -> BoardPoint:
        c = self.config
        unit = (c.span_bottom - c.span_top) / (bench_count + 1)
        return BoardPoint(c.base_x, c.span_top + (bench_index + 1) * unit)


class GridBench(BenchPolicy):
    """Wraps into rows of `columns` players."""

    def place(self, bench_index: int, bench_count: int) -> BoardPoint:
        c = self.config
        col = bench_index % c.columns
        row = bench_index // c.columns
        return BoardPoint(c.base_x + col * c.col_spacing, c.base_y + row * c.row_spacing)


BENCH_POLICY_CLASSES: dict[str, type[BenchPolicy]] = {
    "vertical": VerticalBench,
    "equal": EqualSpacingBench,
    "grid": GridBench,
}


def make_bench_policy(config: BenchConfig) -> BenchPolicy:
    """Instantiate the policy named by config.policy."""
    try:
        policy_cls = BENCH_POLICY_CLASSES[config.policy]
    except KeyError:
        raise ValueError(f"Unknown bench policy: {config.policy!r}") from None
    return policy_cls(config)


class LayoutAssigner:
    """
    Assigns starting coordinates for a freshly parsed roster.

    Deterministic: the same roster and config always produce the same
    coordinates.

    Raises:
        ValueError: On construction, if the config fails validation
    """

    def __init__(self, config: Optional[BoardConfig] = None) -> None:
        self.config = config or get_config()
        errors = self.config.validate()
        if errors:
            raise ValueError("Invalid board configuration: " + "; ".join(errors))
        self.bench_policy = make_bench_policy(self.config.bench)

    def starter_slot(self, index: int) -> BoardPoint:
        """Formation slot for starter `index`, or the centre spot if missing."""
        table = self.config.formation
        slot = table[index] if index < len(table) else None
        if slot is None:
            return BoardPoint(self.config.fallback_x, self.config.fallback_y)
        return BoardPoint(float(slot[0]), float(slot[1]))

    def position_for(self, index: int, player_count: int) -> BoardPoint:
        starters = self.config.starter_count
        if index < starters:
            return self.starter_slot(index)
        bench_count = max(0, player_count - starters)
        return self.bench_policy.place(index - starters, bench_count)

    def make_ball(self) -> Ball:
        return Ball(x=self.config.ball_x, y=self.config.ball_y)

    def assign(self, players: Sequence[Player]) -> list[Entity]:
        """
        Place every player and append the ball.

        Input records are not modified; positioned copies are returned.

        Returns:
            len(players) + 1 entities, ball last
        """
        count = len(players)
        placed: list[Entity] = []
        for index, player in enumerate(players):
            point = self.position_for(index, count)
            placed.append(replace(player, x=point.x, y=point.y))
        placed.append(self.make_ball())
        return placed


def assign_layout(players: Sequence[Player], config: Optional[BoardConfig] = None) -> list[Entity]:
    """Convenience wrapper around LayoutAssigner(config).assign(players)."""
    return LayoutAssigner(config).assign(players)
