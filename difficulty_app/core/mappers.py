"""Mapping raw issue payloads (Jira, GitHub, table rows) into IssueRecord instances."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import pandas as pd

from .config import JIRA_COMMENT_FIELD, JIRA_DESCRIPTION_FIELD, JIRA_LABELS_FIELD
from .models import IssueRecord

logger = logging.getLogger(__name__)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, Mapping, list, tuple, set, frozenset)):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _extract_adf_text(value: Any) -> str:
    """Concatenate the text nodes of an Atlassian Document Format tree."""
    parts: list[str] = []

    def walk(node: Any):
        if isinstance(node, dict):
            if node.get("type") == "text" and isinstance(node.get("text"), str):
                parts.append(node["text"])
            elif node.get("type") == "hardBreak":
                parts.append("\n")
            for child in node.get("content") or []:
                walk(child)
        elif isinstance(node, list):
            for item in node:
                walk(item)

    walk(value)
    return "".join(parts)


def text_length(value: Any) -> int:
    """Character count of a description that may be plain text or ADF."""
    if _is_missing(value):
        return 0
    if isinstance(value, str):
        return len(value)
    if isinstance(value, (dict, list)):
        return len(_extract_adf_text(value))
    return len(str(value))


def _label_names(value: Any) -> list[str]:
    """Pull label names out of strings, lists of strings, or lists of {"name": ...}."""
    if _is_missing(value):
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, Mapping):
        # GraphQL connection: {"nodes": [...]}
        return _label_names(value.get("nodes") or [])
    names: list[str] = []
    try:
        items = list(value)
    except TypeError:
        logger.warning("Ignoring unrecognized labels payload: %r", value)
        return []
    for item in items:
        if isinstance(item, Mapping):
            name = item.get("name")
            if isinstance(name, str):
                names.append(name)
        elif item is not None:
            names.append(str(item))
    return names


def record_from_jira(raw: Mapping[str, Any]) -> IssueRecord:
    """Build a record from a Jira REST v3 issue payload.

    Comment volume prefers ``fields.comment.total`` since search results often
    embed only the first page of comments.
    """
    fields = raw.get("fields")
    if not isinstance(fields, Mapping):
        fields = {}
    comment_block = fields.get(JIRA_COMMENT_FIELD)
    if not isinstance(comment_block, Mapping):
        comment_block = {}
    comments = comment_block.get("comments")
    if not isinstance(comments, (list, tuple)):
        comments = []
    total = comment_block.get("total")
    comment_count = total if isinstance(total, int) and not isinstance(total, bool) else len(comments)
    key = raw.get("key")
    return IssueRecord.build(
        labels=_label_names(fields.get(JIRA_LABELS_FIELD)),
        comment_count=comment_count,
        body_length=text_length(fields.get(JIRA_DESCRIPTION_FIELD)),
        key=None if _is_missing(key) else str(key),
    )


def record_from_github(node: Mapping[str, Any]) -> IssueRecord:
    """Build a record from a GitHub issue (GraphQL node or REST object)."""
    comments = node.get("comments")
    if isinstance(comments, Mapping):
        comment_count = comments.get("totalCount")
    elif isinstance(comments, (list, tuple)):
        comment_count = len(comments)
    else:
        comment_count = comments
    labels = node.get("labels")
    if isinstance(labels, Mapping) and not isinstance(labels.get("nodes"), (list, tuple)):
        labels = None
    number = node.get("number")
    key = node.get("id") if _is_missing(number) else f"#{number}"
    return IssueRecord.build(
        labels=_label_names(labels),
        comment_count=comment_count,
        body_length=text_length(node.get("body")),
        key=None if _is_missing(key) else str(key),
    )


def record_from_mapping(row: Mapping[str, Any]) -> IssueRecord:
    """Build a record from a flat dict or DataFrame row.

    Recognized keys: ``labels``, ``comment_count`` (or ``comments``, as a
    count or list), ``body_length`` or ``body``/``description`` text, ``key``.
    """
    if "comment_count" in row:
        comment_count = row.get("comment_count")
    else:
        comments = row.get("comments")
        comment_count = len(comments) if isinstance(comments, (list, tuple)) else comments
    if "body_length" in row and not _is_missing(row.get("body_length")):
        body_length = row.get("body_length")
    else:
        body = row.get("body")
        if _is_missing(body):
            body = row.get("description")
        body_length = text_length(body)
    key = row.get("key")
    return IssueRecord.build(
        labels=_label_names(row.get("labels")),
        comment_count=None if _is_missing(comment_count) else comment_count,
        body_length=body_length,
        key=None if _is_missing(key) else str(key),
    )


def to_record(value: Any) -> IssueRecord:
    """Coerce any supported payload into an IssueRecord.

    ``None`` yields an empty record; Jira payloads are recognized by their
    ``fields`` block, GitHub nodes by ``totalCount``-style comments or a
    ``nodes`` label connection.
    """
    if isinstance(value, IssueRecord):
        # Directly constructed records skip build(); normalize them here
        return IssueRecord.build(value.labels, value.comment_count, value.body_length, value.key)
    if value is None:
        return IssueRecord()
    if isinstance(value, pd.Series):
        return record_from_mapping(value.to_dict())
    if isinstance(value, Mapping):
        if isinstance(value.get("fields"), Mapping):
            return record_from_jira(value)
        if isinstance(value.get("comments"), Mapping) or isinstance(value.get("labels"), Mapping):
            return record_from_github(value)
        return record_from_mapping(value)
    logger.warning("Unsupported issue payload type %s; treating as empty", type(value).__name__)
    return IssueRecord()
