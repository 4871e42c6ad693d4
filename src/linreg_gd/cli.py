from __future__ import annotations

from pathlib import Path

import typer

from .dataset import default_dataset
from .schemas import TrainConfig
from .train import format_summary, run

app = typer.Typer(no_args_is_help=True)


@app.callback()
def _root() -> None:
    """linreg-gd: fit y = w*x + b with batch gradient descent."""
    return


@app.command("train")
def train_cmd(
    learning_rate: float = typer.Option(0.01, help="Step size of each gradient update"),
    epochs: int = typer.Option(1000, help="Number of full-batch epochs"),
    log_every: int = typer.Option(200, help="Print a progress line every N epochs"),
    x_new: float = typer.Option(7.0, help="Input for the prediction printed after training"),
    progress: bool = typer.Option(False, "--progress/--no-progress", help="Show a progress bar on stderr"),
    out_dir: Path | None = typer.Option(None, help="Optional: write config.json/metrics.jsonl/history.csv/result.json"),
) -> None:
    """Train on the built-in dataset (y = 2x) and print the fitted parameters."""

    try:
        cfg = TrainConfig(
            learning_rate=float(learning_rate),
            epochs=int(epochs),
            log_every=int(log_every),
            x_new=float(x_new),
        )
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    result = run(cfg, ds=default_dataset(), out_dir=out_dir, progress=progress)
    for line in format_summary(result):
        typer.echo(line)

    if out_dir is not None:
        typer.echo(f"Wrote run artefacts -> {out_dir}", err=True)


if __name__ == "__main__":
    app()
