"""Sample file loading and writing for the command-line harness."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Sequence

import pandas as pd


def ingest_samples(path: str | Path, value_column: str | None = None) -> List[float]:
    """Load samples from a JSON list, JSONL, or CSV file."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Sample file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".jsonl":
        values: List[float] = []
        for line in path.read_text(encoding="utf-8").splitlines():
            if not line.strip():
                continue
            obj = json.loads(line)
            if isinstance(obj, (int, float)):
                values.append(float(obj))
            elif isinstance(obj, dict) and value_column and value_column in obj:
                values.append(float(obj[value_column]))
        return values
    if suffix == ".json":
        loaded = json.loads(path.read_text(encoding="utf-8"))
        if isinstance(loaded, dict) and isinstance(loaded.get("samples"), list):
            loaded = loaded["samples"]
        if isinstance(loaded, list):
            return [float(x) for x in loaded if isinstance(x, (int, float))]
        raise ValueError("JSON sample file must contain a list of numbers")

    df = pd.read_csv(path)
    if df.empty:
        return []
    if value_column is None:
        value_column = df.columns[0]
    return df[value_column].astype(float).tolist()


def write_samples(path: str | Path, samples: Sequence[float]) -> Path:
    """Write samples as CSV (``.csv``) or a JSON list (anything else)."""

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".csv":
        pd.DataFrame({"value": list(samples)}).to_csv(path, index=False)
    else:
        path.write_text(json.dumps([float(s) for s in samples]), encoding="utf-8")
    return path
