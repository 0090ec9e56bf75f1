"""Mapping functions to convert raw listing children to our data models."""

import logging
from typing import Any, Dict, List

from reddit_skill.models.listing import PostRecord

logger = logging.getLogger(__name__)


def child_to_record(child: Dict[str, Any]) -> PostRecord:
    """
    Convert one raw listing child to a PostRecord.

    Args:
        child: A ``{"kind": ..., "data": {...}}`` entry from the listing

    Returns:
        A PostRecord TypedDict with the post data

    Raises:
        KeyError: If ``kind``, ``data`` or ``data.title`` is missing
        TypeError: If the child or its title has the wrong shape
    """
    data = child["data"]
    title = data["title"]
    if not isinstance(title, str):
        raise TypeError(f"title is {type(title).__name__}, expected str")

    selftext = data.get("selftext")
    if selftext is not None and not isinstance(selftext, str):
        raise TypeError(f"selftext is {type(selftext).__name__}, expected str")

    record: PostRecord = {
        "kind": child["kind"],
        "title": title,
        "selftext": selftext,
    }
    return record


def children_to_records(children: List[Any]) -> List[PostRecord]:
    """
    Convert listing children to PostRecords, skipping malformed entries.

    Args:
        children: Raw ``data.children`` sequence

    Returns:
        PostRecords in listing order
    """
    records = []

    for position, child in enumerate(children):
        try:
            records.append(child_to_record(child))
        except (KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Skipping malformed listing entry at position {position}: {e!r}")

    return records
