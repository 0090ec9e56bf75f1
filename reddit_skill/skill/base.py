"""Base skill class for voice platform request handling.

A concrete skill implements the session callbacks and an intent dispatch
table; ``BaseSkill.execute`` takes care of parsing the request envelope,
routing it and building the response envelope.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, Optional, Union

from pydantic import ValidationError

from reddit_skill.monitoring.metrics import PrometheusExporter
from reddit_skill.skill.envelope import (
    Card,
    Intent,
    Reprompt,
    RequestEnvelope,
    ResponseBody,
    ResponseEnvelope,
    Session,
    SkillRequest,
    SpeechOutput,
)

logger = logging.getLogger(__name__)

Speech = Union[str, SpeechOutput]
IntentHandler = Callable[[Intent, Session, "ResponseBuilder"], Awaitable[None]]


class SkillError(Exception):
    """Base exception for requests a skill refuses to handle."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class MalformedRequestError(SkillError):
    """The inbound event is not a valid request envelope."""


class InvalidApplicationError(SkillError):
    """The request targets a different application id."""


class UnsupportedRequestError(SkillError):
    """The request type has no handler."""


class UnsupportedIntentError(SkillError):
    """The intent name is missing from the dispatch table."""


def _as_speech_output(speech: Speech) -> SpeechOutput:
    if isinstance(speech, SpeechOutput):
        return speech
    return SpeechOutput(speech=speech)


class ResponseBuilder:
    """
    Collects the reply for one request.

    ``tell`` variants end the session, ``ask`` variants keep it open and
    carry a reprompt played if the user stays silent.
    """

    def __init__(self, session: Session):
        self.session = session
        self._body = ResponseBody()

    def tell(self, speech: Speech) -> None:
        self._set(speech, end_session=True)

    def tell_with_card(self, speech: Speech, card_title: str, card_content: str) -> None:
        self._set(speech, end_session=True, card=Card(title=card_title, content=card_content))

    def ask(self, speech: Speech, reprompt: Speech) -> None:
        self._set(speech, reprompt=reprompt, end_session=False)

    def ask_with_card(self, speech: Speech, reprompt: Speech, card_title: str, card_content: str) -> None:
        self._set(
            speech,
            reprompt=reprompt,
            end_session=False,
            card=Card(title=card_title, content=card_content),
        )

    def _set(
        self,
        speech: Speech,
        end_session: bool,
        reprompt: Optional[Speech] = None,
        card: Optional[Card] = None,
    ) -> None:
        self._body = ResponseBody(
            output_speech=_as_speech_output(speech).to_output_speech(),
            reprompt=(
                Reprompt(output_speech=_as_speech_output(reprompt).to_output_speech())
                if reprompt is not None
                else None
            ),
            card=card,
            should_end_session=end_session,
        )

    def build(self) -> Dict[str, Any]:
        """Response envelope as a JSON-ready dict."""
        envelope = ResponseEnvelope(
            session_attributes=self.session.attributes or {},
            response=self._body,
        )
        return envelope.to_dict()


class BaseSkill(ABC):
    """Base class for voice skills."""

    def __init__(self, app_id: str = "", exporter: Optional[PrometheusExporter] = None):
        """
        Args:
            app_id: Application id requests must carry; empty skips the check
            exporter: Optional Prometheus exporter for metrics
        """
        self.app_id = app_id
        self.exporter = exporter

    @property
    @abstractmethod
    def intent_handlers(self) -> Dict[str, IntentHandler]:
        """Intent name to handler coroutine."""

    async def on_session_started(self, request: SkillRequest, session: Session) -> None:
        """Called for the first request of a new session."""

    @abstractmethod
    async def on_launch(self, request: SkillRequest, session: Session, response: ResponseBuilder) -> None:
        """Called when the user opens the skill without an intent."""

    async def on_session_ended(self, request: SkillRequest, session: Session) -> None:
        """Called when the platform closes the session."""

    async def execute(self, event: Dict[str, Any]) -> Dict[str, Any]:
        """
        Handle one inbound request envelope.

        Args:
            event: Decoded JSON request from the voice platform

        Returns:
            Response envelope as a dict

        Raises:
            MalformedRequestError: If the event does not parse
            InvalidApplicationError: If the application id does not match
            UnsupportedRequestError: For request types other than launch,
                intent and session-ended
            UnsupportedIntentError: For intents missing from ``intent_handlers``
        """
        try:
            envelope = RequestEnvelope.model_validate(event)
        except ValidationError as e:
            raise MalformedRequestError(f"Invalid request envelope: {e}") from e

        session = envelope.session
        request = envelope.request

        if self.app_id:
            received = session.application.application_id if session.application else ""
            if received != self.app_id:
                logger.error(f"Invalid applicationId: {received}")
                raise InvalidApplicationError(f"Invalid applicationId: {received}")

        if session.attributes is None:
            session.attributes = {}

        if self.exporter:
            self.exporter.record_request(request.type)

        if session.new:
            await self.on_session_started(request, session)

        response = ResponseBuilder(session)

        if request.type == "LaunchRequest":
            await self.on_launch(request, session, response)
        elif request.type == "IntentRequest":
            await self._dispatch_intent(request, session, response)
        elif request.type == "SessionEndedRequest":
            await self.on_session_ended(request, session)
        else:
            raise UnsupportedRequestError(f"Unsupported request type: {request.type}")

        return response.build()

    async def _dispatch_intent(self, request: SkillRequest, session: Session, response: ResponseBuilder) -> None:
        intent = request.intent
        if intent is None:
            raise MalformedRequestError("IntentRequest without an intent")

        handler = self.intent_handlers.get(intent.name)
        if handler is None:
            raise UnsupportedIntentError(f"Unsupported intent: {intent.name}")

        if self.exporter:
            self.exporter.record_intent(intent.name)
        await handler(intent, session, response)
