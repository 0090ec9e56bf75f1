"""Client for the public Reddit JSON API."""

import asyncio
import json
import logging
from typing import Optional

import aiohttp

from reddit_skill.config import Config
from reddit_skill.exceptions import MalformedListingError, TransportFailure, UpstreamFailure
from reddit_skill.models.listing import ListingDocument

logger = logging.getLogger(__name__)


class RedditClient:
    """
    Fetches listing documents from Reddit.

    Each call issues exactly one GET with no query string, body or
    authentication. Nothing is retried.
    """

    def __init__(self, config: Config, session: Optional[aiohttp.ClientSession] = None):
        """
        Initialize the Reddit client with configuration.

        Args:
            config: Application configuration
            session: Optional aiohttp session to reuse; when omitted a session
                is opened and closed around every fetch
        """
        self.config = config
        self._session = session
        self.headers = {"user-agent": config.user_agent, "accept": "*/*"}

    def url_for(self, subreddit_path: str) -> str:
        """Absolute URL for a resource path such as 'r/news/'."""
        return self.config.base_url + subreddit_path

    async def fetch_listing(self, subreddit_path: str) -> ListingDocument:
        """
        Fetch and parse the listing at ``subreddit_path``.

        Args:
            subreddit_path: Resource path, e.g. 'r/worldnews/'

        Returns:
            Parsed JSON document

        Raises:
            TransportFailure: On connection errors or timeouts
            UpstreamFailure: If Reddit does not answer 200
            MalformedListingError: If the 200 body is not JSON
        """
        if self._session is not None:
            return await self._fetch(self._session, subreddit_path)

        timeout = None
        if self.config.request_timeout_sec is not None:
            timeout = aiohttp.ClientTimeout(total=self.config.request_timeout_sec)

        kwargs = {"headers": self.headers}
        if timeout is not None:
            kwargs["timeout"] = timeout
        async with aiohttp.ClientSession(**kwargs) as session:
            return await self._fetch(session, subreddit_path)

    async def _fetch(self, session: aiohttp.ClientSession, subreddit_path: str) -> ListingDocument:
        url = self.url_for(subreddit_path)
        logger.debug(f"GET {url}")

        try:
            async with session.get(url, headers=self.headers) as response:
                logger.info(f"status code: {response.status}")
                if response.status != 200:
                    raise UpstreamFailure(
                        f"Error calling Reddit: HTTP {response.status}", response.status
                    )
                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Transport error fetching {url}: {e!r}")
            raise TransportFailure(f"Could not reach Reddit: {e!r}") from e

        # Bytes in; UnicodeDecodeError is a ValueError
        try:
            return json.loads(body)
        except ValueError as e:
            logger.error(f"Unparseable body from {url}: {e}")
            raise MalformedListingError(f"Reddit returned invalid JSON: {e}", 200) from e
