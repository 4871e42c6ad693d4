from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import numpy as np
import pandas as pd
from tqdm import tqdm

from .metrics import write_metric
from .schemas import Checkpoint, Dataset, TrainConfig, TrainResult


def predict(w: float, b: float, x: float | np.ndarray) -> float | np.ndarray:
    return w * x + b


def mse(w: float, b: float, ds: Dataset) -> float:
    x = np.asarray(ds.x, dtype=np.float64)
    y = np.asarray(ds.y, dtype=np.float64)
    error = predict(w, b, x) - y
    return float(np.mean(error**2))


def format_checkpoint(c: Checkpoint) -> str:
    return f"Epoch {c.epoch}, MSE: {c.mse:.4f}, w: {c.w:.4f}, b: {c.b:.4f}"


def format_summary(result: TrainResult) -> list[str]:
    return [
        "",
        "Trained model:",
        f"w ≈ {result.w:.4f}, b ≈ {result.b:.4f}",
        f"For x = {result.x_new:g}, y_pred ≈ {result.y_pred_new:.4f}",
    ]


def train(
    ds: Dataset,
    cfg: TrainConfig,
    *,
    on_checkpoint: Callable[[Checkpoint], None] | None = None,
    progress: bool = False,
) -> TrainResult:
    """Fit y = w*x + b by full-batch gradient descent on the mean squared error.

    Every ``cfg.log_every``-th epoch a :class:`Checkpoint` is recorded. Its MSE
    comes from the errors used for that epoch's gradient (pre-update), while
    w and b are the values after the update.
    """

    x = np.asarray(ds.x, dtype=np.float64)
    y = np.asarray(ds.y, dtype=np.float64)
    m = float(len(x))

    w = float(cfg.w0)
    b = float(cfg.b0)
    lr = float(cfg.learning_rate)

    checkpoints: list[Checkpoint] = []
    for epoch in tqdm(range(cfg.epochs), desc="GD", disable=not progress):
        error = predict(w, b, x) - y

        dw = (2.0 / m) * float(np.dot(error, x))
        db = (2.0 / m) * float(np.sum(error))

        w -= lr * dw
        b -= lr * db

        if (epoch + 1) % cfg.log_every == 0:
            c = Checkpoint(epoch=epoch + 1, mse=float(np.mean(error**2)), w=w, b=b)
            checkpoints.append(c)
            if on_checkpoint is not None:
                on_checkpoint(c)

    return TrainResult(
        w=w,
        b=b,
        x_new=float(cfg.x_new),
        y_pred_new=float(predict(w, b, cfg.x_new)),
        checkpoints=checkpoints,
    )


def run(
    cfg: TrainConfig,
    *,
    ds: Dataset,
    out_dir: Path | None = None,
    progress: bool = False,
) -> TrainResult:
    """Train, echo checkpoint lines as they arrive and optionally export artefacts.

    With ``out_dir`` set, writes config.json, metrics.jsonl (recreated per run),
    history.csv and result.json.
    """

    metrics_path: Path | None = None
    if out_dir is not None:
        out_dir.mkdir(parents=True, exist_ok=True)
        (out_dir / "config.json").write_text(
            json.dumps(cfg.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8"
        )
        metrics_path = out_dir / "metrics.jsonl"
        if metrics_path.exists():
            metrics_path.unlink()

    def _on_checkpoint(c: Checkpoint) -> None:
        tqdm.write(format_checkpoint(c))
        if metrics_path is not None:
            write_metric(path=metrics_path, epoch=c.epoch, split="train", name="mse", value=c.mse)
            write_metric(path=metrics_path, epoch=c.epoch, split="train", name="w", value=c.w)
            write_metric(path=metrics_path, epoch=c.epoch, split="train", name="b", value=c.b)

    result = train(ds, cfg, on_checkpoint=_on_checkpoint, progress=progress)

    if out_dir is not None:
        history = pd.DataFrame(
            [{"epoch": c.epoch, "mse": c.mse, "w": c.w, "b": c.b} for c in result.checkpoints],
            columns=["epoch", "mse", "w", "b"],
        )
        history.to_csv(out_dir / "history.csv", index=False)
        (out_dir / "result.json").write_text(
            json.dumps(result.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8"
        )

    return result
