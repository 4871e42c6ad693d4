from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class Dataset:
    x: tuple[float, ...]
    y: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.x) != len(self.y):
            raise ValueError(f"x and y must have the same length (got {len(self.x)} and {len(self.y)})")
        if len(self.x) == 0:
            raise ValueError("dataset must contain at least one sample")

    def __len__(self) -> int:
        return len(self.x)

    def to_dict(self) -> dict[str, Any]:
        return {"x": list(self.x), "y": list(self.y)}


@dataclass(frozen=True)
class TrainConfig:
    learning_rate: float = 0.01
    epochs: int = 1000

    # report every N-th epoch (1-indexed)
    log_every: int = 200

    # query point for the prediction made after training
    x_new: float = 7.0

    w0: float = 0.0
    b0: float = 0.0

    def __post_init__(self) -> None:
        if not self.learning_rate > 0:
            raise ValueError(f"learning_rate must be > 0 (got {self.learning_rate!r})")
        if self.epochs < 0:
            raise ValueError(f"epochs must be >= 0 (got {self.epochs!r})")
        if self.log_every < 1:
            raise ValueError(f"log_every must be >= 1 (got {self.log_every!r})")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Checkpoint:
    epoch: int
    mse: float  # computed from the errors before this epoch's update
    w: float
    b: float


@dataclass(frozen=True)
class TrainResult:
    w: float
    b: float
    x_new: float
    y_pred_new: float
    checkpoints: list[Checkpoint] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
