"""Project-level pytest configuration and shared fixtures."""

from typing import Any, Dict, List, Optional

import pytest

from reddit_skill.config import Config


def make_child(title: Any, selftext: Optional[str] = None, kind: str = "t3") -> Dict[str, Any]:
    """One listing child the way Reddit returns it."""
    data: Dict[str, Any] = {"title": title}
    if selftext is not None:
        data["selftext"] = selftext
    return {"kind": kind, "data": data}


def make_listing(children: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"kind": "Listing", "data": {"children": children, "after": None, "before": None}}


def make_event(
    request_type: str = "IntentRequest",
    intent: Optional[str] = "RedditIntent",
    slots: Optional[Dict[str, Optional[str]]] = None,
    new: bool = False,
    app_id: str = "amzn1.ask.skill.test",
) -> Dict[str, Any]:
    """Voice platform request envelope."""
    request: Dict[str, Any] = {
        "type": request_type,
        "requestId": "EdwRequestId.1",
        "timestamp": "2026-10-19T12:00:00Z",
    }
    if request_type == "IntentRequest" and intent is not None:
        request["intent"] = {
            "name": intent,
            "slots": {
                name: {"name": name, "value": value}
                for name, value in (slots or {}).items()
            },
        }
    if request_type == "SessionEndedRequest":
        request["reason"] = "USER_INITIATED"

    return {
        "version": "1.0",
        "session": {
            "new": new,
            "sessionId": "SessionId.1",
            "application": {"applicationId": app_id},
            "user": {"userId": "amzn1.ask.account.test"},
        },
        "request": request,
    }


@pytest.fixture
def config() -> Config:
    """Config with defaults and a known application id."""
    return Config(app_id="amzn1.ask.skill.test")


@pytest.fixture
def news_listing() -> Dict[str, Any]:
    return make_listing([
        make_child("Markets rally"),
        make_child("Storm hits coast"),
        make_child("Election results are in"),
    ])


@pytest.fixture
def jokes_listing() -> Dict[str, Any]:
    return make_listing([
        make_child("Why did the chicken cross the road?", "To get to the other side."),
        make_child("Link post", kind="t1"),
        make_child("Knock knock", "Who's there?"),
    ])
