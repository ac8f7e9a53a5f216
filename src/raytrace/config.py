# config.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Shadow-acne offset for secondary rays. Tuned, not derived.
T_MIN = 0.001


class RowOrder(Enum):
    """Order of rows in the output pixel grid."""

    TOP_DOWN = "top-down"    # Row 0 is the top of the image
    BOTTOM_UP = "bottom-up"  # Row 0 is viewport v = 0


class ExecutorKind(Enum):
    """Worker pool used to render rows in parallel."""

    THREAD = "thread"
    PROCESS = "process"


# Named quality levels: samples per pixel and bounce depth.
QUALITY_PRESETS = {
    "preview": {"samples_per_pixel": 1, "max_depth": 4},
    "balanced": {"samples_per_pixel": 16, "max_depth": 16},
    "final": {"samples_per_pixel": 100, "max_depth": 50},
}


@dataclass(frozen=True)
class RenderConfig:
    """Image size and sampling settings for a render.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        samples_per_pixel: Jittered primary rays averaged per pixel.
        max_depth: Maximum number of bounces per primary ray.
        seed: Root seed. None draws fresh entropy for every render.
        row_order: Order of rows in the returned grid.
        workers: Size of the worker pool. None lets the executor decide.
        executor: Thread pool or process pool.
    """

    width: int
    height: int
    samples_per_pixel: int = 100
    max_depth: int = 50
    seed: Optional[int] = None
    row_order: RowOrder = RowOrder.TOP_DOWN
    workers: Optional[int] = None
    executor: ExecutorKind = ExecutorKind.THREAD

    def __post_init__(self) -> None:
        for name in ("width", "height", "samples_per_pixel", "max_depth"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        for name in ("width", "height", "samples_per_pixel"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        # A depth of 0 is allowed and renders black.
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        if self.seed is not None and (not isinstance(self.seed, int) or self.seed < 0):
            raise ValueError(f"seed must be a non-negative integer or None, got {self.seed!r}")
        if self.workers is not None and self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")
        if not isinstance(self.row_order, RowOrder):
            raise ValueError(f"row_order must be a RowOrder, got {self.row_order!r}")
        if not isinstance(self.executor, ExecutorKind):
            raise ValueError(f"executor must be an ExecutorKind, got {self.executor!r}")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @classmethod
    def from_preset(cls, name: str, width: int, height: int, **overrides) -> "RenderConfig":
        """Build a config from a named quality level, with optional overrides."""
        if name not in QUALITY_PRESETS:
            raise ValueError(
                f"Unknown quality preset {name!r}; expected one of {sorted(QUALITY_PRESETS)}"
            )
        settings = dict(QUALITY_PRESETS[name])
        settings.update(overrides)
        return cls(width=width, height=height, **settings)
