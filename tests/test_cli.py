"""Tests for the linreg-gd command line."""

from __future__ import annotations

import json
import re

import pandas as pd
from typer.testing import CliRunner

from linreg_gd.cli import app
from linreg_gd.metrics import read_metrics

runner = CliRunner()


def _lines(output: str) -> list[str]:
    return output.splitlines()


def test_default_run_output():
    result = runner.invoke(app, ["train"])
    assert result.exit_code == 0, result.output
    lines = _lines(result.output)

    progress = [line for line in lines if line.startswith("Epoch ")]
    assert [line.split(",")[0] for line in progress] == [
        "Epoch 200",
        "Epoch 400",
        "Epoch 600",
        "Epoch 800",
        "Epoch 1000",
    ]
    assert lines[-4:-2] == ["", "Trained model:"]
    assert lines[-2].startswith("w ≈ 1.99")
    assert lines[-1].startswith("For x = 7, y_pred ≈ 13.9")


def test_output_is_deterministic():
    first = runner.invoke(app, ["train"])
    second = runner.invoke(app, ["train"])
    assert first.exit_code == 0
    assert first.output == second.output


def test_custom_options():
    result = runner.invoke(app, ["train", "--epochs", "300", "--log-every", "100", "--x-new", "10"])
    assert result.exit_code == 0, result.output
    lines = _lines(result.output)
    assert sum(1 for line in lines if line.startswith("Epoch ")) == 3
    assert lines[-1].startswith("For x = 10, y_pred ≈ ")


def test_progress_bar_keeps_report_lines():
    result = runner.invoke(app, ["train", "--progress"])
    assert result.exit_code == 0, result.output

    # the bar may share the captured stream, so match by position
    out = result.output
    matches = list(re.finditer(r"Epoch (\d+), MSE: \d+\.\d{4}, w: -?\d+\.\d{4}, b: -?\d+\.\d{4}", out))
    assert [int(m.group(1)) for m in matches] == [200, 400, 600, 800, 1000]

    trained = out.index("Trained model:")
    assert trained > matches[-1].end()
    assert out.index("w ≈ ", trained) < out.index("For x = 7, y_pred ≈ ", trained)


def test_invalid_option_is_usage_error():
    result = runner.invoke(app, ["train", "--log-every", "0"])
    assert result.exit_code == 2

    result = runner.invoke(app, ["train", "--learning-rate=-0.1"])
    assert result.exit_code == 2


def test_out_dir_artefacts(tmp_path):
    out_dir = tmp_path / "run"
    result = runner.invoke(app, ["train", "--out-dir", str(out_dir)])
    assert result.exit_code == 0, result.output

    cfg = json.loads((out_dir / "config.json").read_text(encoding="utf-8"))
    assert cfg["learning_rate"] == 0.01
    assert cfg["epochs"] == 1000

    history = pd.read_csv(out_dir / "history.csv", float_precision="round_trip")
    assert list(history.columns) == ["epoch", "mse", "w", "b"]
    assert history["epoch"].tolist() == [200, 400, 600, 800, 1000]

    saved = json.loads((out_dir / "result.json").read_text(encoding="utf-8"))
    assert abs(saved["w"] - 2.0) < 0.05
    assert len(saved["checkpoints"]) == 5
    assert [c["mse"] for c in saved["checkpoints"]] == history["mse"].tolist()

    rows = [r for r in read_metrics(out_dir / "metrics.jsonl") if r.name == "mse"]
    assert [r.epoch for r in rows] == [200, 400, 600, 800, 1000]
    assert [r.value for r in rows] == history["mse"].tolist()


def test_out_dir_metrics_recreated(tmp_path):
    out_dir = tmp_path / "run"
    for _ in range(2):
        result = runner.invoke(app, ["train", "--out-dir", str(out_dir)])
        assert result.exit_code == 0
    rows = read_metrics(out_dir / "metrics.jsonl")
    assert len(rows) == 15
