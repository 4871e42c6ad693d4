"""Single-variable linear regression trained with batch gradient descent.

The default configuration fits y = w*x + b to a small built-in dataset
(y = 2x exactly) and reports progress every 200 epochs.
"""

from __future__ import annotations

from .dataset import default_dataset
from .schemas import Checkpoint, Dataset, TrainConfig, TrainResult
from .train import mse, predict, train

__all__ = [
    "Checkpoint",
    "Dataset",
    "TrainConfig",
    "TrainResult",
    "default_dataset",
    "mse",
    "predict",
    "train",
]
