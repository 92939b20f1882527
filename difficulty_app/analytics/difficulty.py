"""Batch difficulty classification and DataFrame enrichment."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import pandas as pd

from difficulty_app.core.column_config import get_columns
from difficulty_app.core.config import LEVEL_ORDER, SETTINGS
from difficulty_app.core.difficulty import calculate_difficulty
from difficulty_app.core.mappers import record_from_mapping
from difficulty_app.core.models import DifficultyResult

logger = logging.getLogger(__name__)


def classify_issues(
    issues: Iterable[Any],
    *,
    max_workers: int | None = None,
) -> list[DifficultyResult]:
    """Classify many issues, returning results in input order.

    Parameters
    ----------
    issues : Iterable
        Records or raw payloads accepted by ``calculate_difficulty``.
    max_workers : int | None
        Thread cap for large batches (defaults to ``SETTINGS.batch_max_workers``).
        Batches smaller than ``SETTINGS.batch_min_parallel`` run sequentially.

    Returns
    -------
    list[DifficultyResult]
        One result per input, same order.
    """
    work = list(issues)
    if not work:
        return []
    if len(work) < SETTINGS.batch_min_parallel:
        return [calculate_difficulty(issue) for issue in work]

    workers = max_workers or SETTINGS.batch_max_workers
    logger.debug("Classifying %s issues with %s workers", len(work), workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(calculate_difficulty, work))


def add_difficulty_metrics(df: pd.DataFrame) -> pd.DataFrame:
    """Add difficulty columns to an issue DataFrame.

    Adds ``difficulty_level``, ``difficulty_score`` and
    ``difficulty_explanation``. Rows are read with
    ``mappers.record_from_mapping``, so ``labels`` may be a list or the
    comma-separated display string, and the body may be given either as
    ``body_length`` or as ``body``/``description`` text. ``comment_count``
    and ``body_length`` are filled in when absent.

    Parameters
    ----------
    df : pd.DataFrame
        Issue rows.

    Returns
    -------
    pd.DataFrame
        Copy of input with difficulty columns added.
    """
    if df.empty:
        return df
    out = df.copy()
    records = [record_from_mapping(row) for row in out.to_dict(orient="records")]
    results = classify_issues(records)
    out["difficulty_level"] = [r.level for r in results]
    out["difficulty_score"] = pd.Series([r.score for r in results], index=out.index, dtype="int64")
    out["difficulty_explanation"] = [r.explanation for r in results]
    if "comment_count" not in out.columns:
        out["comment_count"] = [r.comment_count for r in records]
    if "body_length" not in out.columns:
        out["body_length"] = [r.body_length for r in records]
    return out


def difficulty_distribution(df: pd.DataFrame) -> pd.DataFrame:
    """Count issues per level in easy/medium/hard order, zero-filled."""
    if df.empty or "difficulty_level" not in df.columns:
        counts = pd.Series(0, index=list(LEVEL_ORDER), dtype="int64")
    else:
        counts = (
            df["difficulty_level"].value_counts().reindex(list(LEVEL_ORDER), fill_value=0).astype("int64")
        )
    total = int(counts.sum())
    out = counts.rename_axis("difficulty_level").reset_index(name="count")
    out["share"] = out["count"] / total if total else 0.0
    return out


def difficulty_table(df: pd.DataFrame) -> pd.DataFrame:
    """Select the configured difficulty display columns present in ``df``."""
    if df.empty:
        return df
    if "difficulty_level" not in df.columns:
        df = add_difficulty_metrics(df)
    cols = [c for c in get_columns("difficulty") if c in df.columns]
    return df[cols].reset_index(drop=True)

