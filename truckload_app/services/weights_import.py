"""
Import lists of item weights for auto fill.

Accepts free text (comma or newline separated) or a CSV / .xlsx file with a
weight column. Header names are flexible (e.g. "Weight (kg)", "Mass", "kg").
Legacy .xls workbooks are rejected; save them as .xlsx first.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List

import pandas as pd

_LOG = logging.getLogger(__name__)

_WEIGHT_ALIASES = (
    "weight",
    "weight (kg)",
    "weight(kg)",
    "weight kg",
    "weights",
    "mass",
    "mass (kg)",
    "mass kg",
    "kg",
    "gross weight",
    "gross weight (kg)",
    "pallet weight",
)


@dataclass(slots=True)
class WeightsImportError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


def parse_weights_text(text: str) -> List[float]:
    """Split on commas and line breaks; keep finite positive numbers only."""
    weights: List[float] = []
    for token in re.split(r"[,\n\r]+", text or ""):
        token = token.strip()
        if not token:
            continue
        try:
            value = float(token)
        except ValueError:
            continue
        if math.isfinite(value) and value > 0:
            weights.append(value)
    return weights


def _normalize_key(column: object) -> str:
    key = str(column).lower().replace("\n", " ").replace("\t", " ")
    return re.sub(r"\s+", " ", key).strip()


def _find_weight_column(df: pd.DataFrame) -> str | None:
    for c in df.columns:
        if _normalize_key(c) in _WEIGHT_ALIASES:
            return c
    for c in df.columns:
        key = _normalize_key(c)
        if "weight" in key or "mass" in key:
            return c
    return None


def weights_from_dataframe(df: pd.DataFrame) -> List[float]:
    column = _find_weight_column(df)
    if column is None:
        raise WeightsImportError("No weight column found (expected e.g. 'Weight (kg)').")
    values = pd.to_numeric(df[column], errors="coerce")
    dropped = int(values.isna().sum())
    values = values[values.notna() & (values > 0)]
    if dropped:
        _LOG.warning("Weights import: skipped %d non-numeric row(s) in column '%s'", dropped, column)
    return [float(v) for v in values.to_list()]


def load_weights_file(path: Path | str) -> List[float]:
    """Read weights from .csv or .xlsx."""
    path = Path(path)
    if not path.exists():
        raise WeightsImportError(f"File not found: {path}")
    suffix = path.suffix.lower()
    if suffix == ".xls":
        raise WeightsImportError(f"{path.name}: legacy .xls is not supported, save it as .xlsx.")
    try:
        if suffix == ".xlsx":
            df = pd.read_excel(path, engine="openpyxl")
        else:
            df = pd.read_csv(path)
    except (OSError, ValueError) as exc:
        _LOG.warning("Weights import: failed to read %s", path, exc_info=True)
        raise WeightsImportError(f"Could not read {path.name}: {exc}") from exc
    if df.empty:
        raise WeightsImportError(f"{path.name} contains no rows.")
    return weights_from_dataframe(df)
