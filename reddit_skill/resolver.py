"""Mapping of spoken topics to Reddit resource paths."""

import logging
from typing import Iterable, Optional

logger = logging.getLogger(__name__)


class UnsupportedTopicError(ValueError):
    """Raised when a spoken topic is missing or outside the supported set."""

    def __init__(self, topic: Optional[str]):
        self.topic = topic
        super().__init__(f"Unsupported topic: {topic!r}")


def combine_phrase(phrase: str) -> str:
    """
    Remove the spaces between the words of a phrase.

    'today i learned' becomes 'todayilearned'. Leading and trailing spaces
    go away as a side effect of the split.
    """
    return "".join(phrase.split(" "))


def get_subreddit(topic: str) -> str:
    """
    Build the subreddit path for a topic, e.g. 'world news' -> 'r/worldnews/'.

    No check is made that the subreddit exists; see ``resolve_topic``.
    """
    return "r/" + combine_phrase(topic) + "/"


def category_for(topic: str) -> str:
    """Formatting category label for a topic: no whitespace, lower case."""
    return "".join(topic.split()).lower()


def resolve_topic(topic: Optional[str], supported_topics: Iterable[str]) -> str:
    """
    Resolve a spoken topic into a subreddit path after checking it is supported.

    Topics are compared by their category label, so 'World News' matches a
    configured 'world news'. An empty ``supported_topics`` accepts any
    non-empty topic.

    Args:
        topic: Topic slot value as heard by the voice platform
        supported_topics: Allow-list of topics

    Returns:
        Subreddit path for the topic

    Raises:
        UnsupportedTopicError: If the topic is empty or not in the allow-list
    """
    if not topic or not topic.strip():
        raise UnsupportedTopicError(topic)

    allowed = {category_for(t) for t in supported_topics}
    category = category_for(topic)
    if allowed and category not in allowed:
        logger.info(f"Rejecting unsupported topic '{topic}'")
        raise UnsupportedTopicError(topic)

    return get_subreddit(category)
