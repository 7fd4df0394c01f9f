"""Collapse catalog rows that share an identity into one entry."""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union

from vibeflow.domain.recommendation.entities import Recommendation

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")

Row = Union[Mapping[str, Any], Recommendation]


def normalize_title(title: str) -> str:
    """Lowercase and turn every whitespace run into a single hyphen."""
    return _WHITESPACE.sub("-", title or "").lower()


def _get(row: Row, name: str, default: Any = None) -> Any:
    if isinstance(row, Mapping):
        return row.get(name, default)
    return getattr(row, name, default)


def recommendation_key(row: Row) -> Tuple[str, str]:
    """Identity of a row: the (id, normalized title) pair."""
    return str(_get(row, "id")), normalize_title(_get(row, "title", ""))


def to_recommendation(row: Row) -> Recommendation:
    """Project a store row onto the domain shape; domain values pass through."""
    if isinstance(row, Recommendation):
        return row
    return Recommendation(
        id=str(row["id"]),
        title=row["title"],
        description=row.get("description") or "",
        category=row.get("category") or "",
        mood_types=tuple(row.get("mood_types") or ()),
        energy_levels=tuple(row.get("energy_levels") or ()),
        image_url=row.get("image_url"),
    )


def deduplicate(rows: Iterable[Row]) -> List[Recommendation]:
    """First occurrence of each (id, normalized title) wins; input order is kept."""
    rows = list(rows or [])
    if not rows:
        return []

    unique: Dict[Tuple[str, str], Row] = {}
    dropped: List[str] = []
    for row in rows:
        key = recommendation_key(row)
        if key in unique:
            dropped.append(f"{key[0]}:{key[1]}")
            continue
        unique[key] = row

    if dropped:
        logger.debug(f"Dropped {len(dropped)} duplicate recommendations: {', '.join(dropped)}")
    logger.info(f"Deduplication kept {len(unique)} of {len(rows)} recommendations")

    return [to_recommendation(row) for row in unique.values()]
