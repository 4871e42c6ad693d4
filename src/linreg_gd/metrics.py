from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class MetricRow:
    epoch: int
    split: str
    name: str
    value: float


def read_metrics(path: str | Path) -> list[MetricRow]:
    rows: list[MetricRow] = []
    p = Path(path)
    if not p.exists():
        return rows
    with p.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            d = json.loads(line)
            rows.append(
                MetricRow(
                    epoch=int(d.get("epoch", 0)),
                    split=str(d.get("split", "train")),
                    name=str(d["name"]),
                    value=float(d["value"]),
                )
            )
    return rows


def write_metric(*, path: Path, epoch: int, split: str, name: str, value: float) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    row = {"epoch": int(epoch), "split": split, "name": name, "value": float(value)}
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(row, ensure_ascii=False) + "\n")

