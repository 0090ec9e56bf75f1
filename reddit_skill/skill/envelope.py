"""
Pydantic models for the voice platform request and response envelopes.

Field names follow the platform's camelCase JSON through aliases; Python code
uses the snake_case attribute names.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Envelope(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Application(_Envelope):
    application_id: str = Field(default="", alias="applicationId")


class Session(_Envelope):
    """Session block of an inbound request."""
    new: bool = False
    session_id: str = Field(default="", alias="sessionId")
    application: Optional[Application] = None
    attributes: Optional[Dict[str, Any]] = None
    user: Optional[Dict[str, Any]] = None


class Slot(_Envelope):
    name: str = ""
    value: Optional[str] = None


class Intent(_Envelope):
    """A named intent and its slot values."""
    name: str
    slots: Dict[str, Slot] = Field(default_factory=dict)

    def slot_value(self, name: str) -> Optional[str]:
        """Value of slot ``name``, or None if the slot is absent or unfilled."""
        slot = self.slots.get(name)
        return slot.value if slot is not None else None


class SkillRequest(_Envelope):
    """The ``request`` block: launch, intent or session-ended."""
    type: str
    request_id: str = Field(default="", alias="requestId")
    timestamp: Optional[str] = None
    intent: Optional[Intent] = None
    reason: Optional[str] = None


class RequestEnvelope(_Envelope):
    version: str = "1.0"
    session: Session = Field(default_factory=Session)
    request: SkillRequest


class SpeechType(str, Enum):
    """Rendering mode of an output speech payload."""
    PLAIN_TEXT = "PlainText"
    SSML = "SSML"


class SpeechOutput(BaseModel):
    """Speech payload paired with its rendering mode."""
    speech: str
    type: SpeechType = SpeechType.PLAIN_TEXT

    def to_output_speech(self) -> "OutputSpeech":
        if self.type == SpeechType.SSML:
            return OutputSpeech(type=self.type.value, ssml=self.speech)
        return OutputSpeech(type=self.type.value, text=self.speech)


class OutputSpeech(_Envelope):
    type: str
    text: Optional[str] = None
    ssml: Optional[str] = None


class Reprompt(_Envelope):
    output_speech: OutputSpeech = Field(alias="outputSpeech")


class Card(_Envelope):
    type: str = "Simple"
    title: str
    content: str


class ResponseBody(_Envelope):
    output_speech: Optional[OutputSpeech] = Field(default=None, alias="outputSpeech")
    reprompt: Optional[Reprompt] = None
    card: Optional[Card] = None
    should_end_session: Optional[bool] = Field(default=None, alias="shouldEndSession")


class ResponseEnvelope(_Envelope):
    version: str = "1.0"
    session_attributes: Dict[str, Any] = Field(default_factory=dict, alias="sessionAttributes")
    response: ResponseBody = Field(default_factory=ResponseBody)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
