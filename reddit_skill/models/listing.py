"""Data models for Reddit listing documents."""

from typing import Any, Dict, List, Optional, TypedDict

# Kind discriminator Reddit uses for link/self posts
TEXT_POST_KIND = "t3"


class PostRecord(TypedDict):
    """
    TypedDict for one child entry of a Reddit listing.
    Only the fields the skill reads out are kept.
    """
    kind: str  # Reddit thing kind, e.g. "t3"
    title: str  # Post title
    selftext: Optional[str]  # Self-post body (None when the payload has none)


ListingDocument = Dict[str, Any]


def listing_children(document: ListingDocument) -> List[Any]:
    """
    Return the ordered ``data.children`` sequence of a listing document.

    Raises:
        KeyError: If the document has no ``data.children``
        TypeError: If ``data.children`` is not a list
    """
    children = document["data"]["children"]
    if not isinstance(children, list):
        raise TypeError(f"Expected a list of children, got {type(children).__name__}")
    return children
