"""
Voice skill that reads out posts from a subreddit.

Examples:
    "Alexa, ask Reddit for world news."
    "Alexa, ask Reddit for top jokes."
    "Alexa, ask Reddit for news."
"""

import asyncio
import logging
from typing import Any, Dict, Optional

from reddit_skill.config import Config
from reddit_skill.exceptions import RedditAPIError
from reddit_skill.formatter import format_listing, strip_markup
from reddit_skill.monitoring.metrics import PrometheusExporter
from reddit_skill.reddit_client import RedditClient
from reddit_skill.resolver import UnsupportedTopicError, category_for, resolve_topic
from reddit_skill.skill.base import BaseSkill, IntentHandler, ResponseBuilder
from reddit_skill.skill.envelope import Intent, Session, SkillRequest, SpeechOutput, SpeechType

logger = logging.getLogger(__name__)

CARD_TITLE = "Reddit"
HELP_TEXT = (
    "I will read out information from Reddit. "
    "For example, you can say 'Ask Reddit for top news' or 'Ask Reddit for new jokes'"
)
REPROMPT_TEXT = "You can say 'Ask Reddit for top news'"
ERROR_TEXT = "Sorry an error occurred while connecting to Reddit. Please try a tad bit later."
UNSUPPORTED_TEXT = "Sorry, I can't read {topic} from Reddit yet."
SUGGESTION_TEXT = " You can ask for {topics}."
STOP_TEXT = "Goodbye, and may the force be with you!"
CANCEL_TEXT = "Goodbye, and thanks for all the fish!"


def _spoken_list(items) -> str:
    items = list(items)
    if len(items) <= 1:
        return "".join(items)
    return ", ".join(items[:-1]) + ", or " + items[-1]


class RedditSkill(BaseSkill):
    """Reads the current posts of a topic's subreddit."""

    def __init__(
        self,
        config: Config,
        client: Optional[RedditClient] = None,
        exporter: Optional[PrometheusExporter] = None,
    ):
        super().__init__(app_id=config.app_id, exporter=exporter)
        self.config = config
        self.client = client or RedditClient(config)

    @property
    def intent_handlers(self) -> Dict[str, IntentHandler]:
        return {
            "RedditIntent": self.handle_reddit_intent,
            "AMAZON.HelpIntent": self.handle_help_intent,
            "AMAZON.StopIntent": self.handle_stop_intent,
            "AMAZON.CancelIntent": self.handle_cancel_intent,
        }

    async def on_session_started(self, request: SkillRequest, session: Session) -> None:
        logger.info(f"onSessionStarted requestId: {request.request_id}, sessionId: {session.session_id}")

    async def on_launch(self, request: SkillRequest, session: Session, response: ResponseBuilder) -> None:
        logger.info(f"RedditSkill onLaunch requestId: {request.request_id}, sessionId: {session.session_id}")
        self._help(response)

    async def on_session_ended(self, request: SkillRequest, session: Session) -> None:
        logger.info(
            f"onSessionEnded requestId: {request.request_id}, sessionId: {session.session_id}, "
            f"reason: {request.reason}"
        )

    async def handle_help_intent(self, intent: Intent, session: Session, response: ResponseBuilder) -> None:
        self._help(response)

    async def handle_stop_intent(self, intent: Intent, session: Session, response: ResponseBuilder) -> None:
        response.tell(STOP_TEXT)

    async def handle_cancel_intent(self, intent: Intent, session: Session, response: ResponseBuilder) -> None:
        response.tell(CANCEL_TEXT)

    async def handle_reddit_intent(self, intent: Intent, session: Session, response: ResponseBuilder) -> None:
        """Fetch the topic's subreddit and read its posts."""
        topic = intent.slot_value("Topic")
        list_type = intent.slot_value("ListType")
        # ListType is not applied to the request path
        logger.info(f"RedditIntent topic={topic!r} listType={list_type!r}")

        try:
            speech = await self.read_topic(topic)
        except UnsupportedTopicError:
            if self.exporter:
                self.exporter.record_unsupported_topic()
            text = UNSUPPORTED_TEXT.format(topic=topic or "that")
            if self.config.supported_topics:
                text += SUGGESTION_TEXT.format(topics=_spoken_list(self.config.supported_topics))
            response.ask(text, REPROMPT_TEXT)
            return
        except RedditAPIError as e:
            logger.error(f"reddit client error ({e.error_type}): {e}")
            response.ask_with_card(ERROR_TEXT, REPROMPT_TEXT, CARD_TITLE, ERROR_TEXT)
            return

        response.ask_with_card(
            SpeechOutput(speech=speech, type=SpeechType.SSML),
            REPROMPT_TEXT,
            CARD_TITLE,
            strip_markup(speech),
        )

    async def read_topic(self, topic: Optional[str]) -> str:
        """
        Run the resolve, fetch and format pipeline for one topic.

        Returns:
            SSML for the topic's posts

        Raises:
            UnsupportedTopicError: If the topic is not supported
            RedditAPIError: If the fetch fails or the listing is unusable
        """
        path = resolve_topic(topic, self.config.supported_topics)
        category = category_for(topic)

        try:
            if self.exporter:
                with self.exporter.time_request():
                    document = await self.client.fetch_listing(path)
            else:
                document = await self.client.fetch_listing(path)
            speech = format_listing(document, category, label=topic.strip())
        except RedditAPIError as e:
            if self.exporter:
                self.exporter.record_fetch(e.error_type)
                self.exporter.record_api_error(e.error_type)
            raise

        if self.exporter:
            self.exporter.record_fetch("success")
        return speech

    def _help(self, response: ResponseBuilder) -> None:
        response.ask(HELP_TEXT, HELP_TEXT)


def handler(event: Dict[str, Any], context: Any = None, config_path: str = "config.yaml") -> Dict[str, Any]:
    """Lambda-style entry point; builds a fresh skill for every invocation."""
    skill = RedditSkill(Config.from_files(config_path))
    return asyncio.run(skill.execute(event))
