"""Render Reddit listings as SSML the voice platform can read out."""

import logging
import re
from typing import Optional

from reddit_skill.exceptions import MalformedListingError
from reddit_skill.models.listing import TEXT_POST_KIND, ListingDocument, PostRecord, listing_children
from reddit_skill.models.mapping import children_to_records

logger = logging.getLogger(__name__)

BREAK = "<break time='1s'/>"
INTRO = "Here is your {label} from Reddit, the homepage of the internet. "

_TAG_RE = re.compile(r"<[^>]+>")


def render_post(record: PostRecord, category: str) -> str:
    """
    Text spoken for one post, or an empty string if the post is skipped.

    ``jokes`` reads title and body of self posts only; every other
    category, known or not, reads the title.
    """
    if category == "jokes":
        if record["kind"] != TEXT_POST_KIND:
            return ""
        if record["selftext"] is None:
            logger.warning(f"Skipping joke without a body: {record['title']!r}")
            return ""
        return record["title"] + BREAK + " " + record["selftext"]

    return record["title"]


def format_listing(document: ListingDocument, category: str, label: Optional[str] = None) -> str:
    """
    Build the SSML for a listing.

    Args:
        document: Parsed listing JSON
        category: Category label selecting the per-post rule
        label: Name spoken in the intro; defaults to ``category``

    Returns:
        A ``<speak>`` document with the results numbered from 1

    Raises:
        MalformedListingError: If the document has no ``data.children``
    """
    try:
        children = listing_children(document)
    except (KeyError, TypeError) as e:
        raise MalformedListingError(f"Listing has no children: {e!r}") from e

    parts = ["<speak>", INTRO.format(label=label or category)]

    count = 0
    for record in children_to_records(children):
        result = render_post(record, category)
        if result != "":
            count += 1
            parts.append(f"{count}{BREAK}{result}{BREAK}")

    parts.append("</speak>")
    logger.debug(f"Formatted {count} of {len(children)} entries for '{category}'")
    return "".join(parts)


def strip_markup(ssml: str) -> str:
    """Plain-text rendering of SSML for display cards."""
    text = _TAG_RE.sub(" ", ssml)
    return " ".join(text.split())
