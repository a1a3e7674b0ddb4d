import json
from copy import deepcopy
from typing import Any, Dict, List, Optional

import pytest

from app.llm.base import BaseLLMProvider, LLMProvider, LLMResponse
from app.models.schemas.component_catalog import DEFAULT_THEME


class FakeProvider(BaseLLMProvider):
    """Replays canned replies and records every prompt it receives."""

    def __init__(
        self,
        replies: Optional[List[Any]] = None,
        error: Optional[Exception] = None,
        healthy: bool = True,
    ):
        super().__init__({"request_timeout": 5})
        self.replies = list(replies or [])
        self.error = error
        self.healthy = healthy
        self.prompts: List[str] = []

    @property
    def model_name(self) -> Optional[str]:
        return "fake-model"

    async def complete(self, prompt: str, **kwargs) -> LLMResponse:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        reply = self.replies.pop(0)
        if not isinstance(reply, str):
            reply = json.dumps(reply)
        return LLMResponse(content=reply, provider=LLMProvider.TEXT_COMPLETION, model="fake-model")

    async def health_check(self) -> bool:
        return self.healthy

    def get_provider_type(self) -> LLMProvider:
        return LLMProvider.TEXT_COMPLETION


VALID_DOCUMENT: Dict[str, Any] = {
    "app": {
        "name": "Drone Booking",
        "description": "Book aerial photography drones",
        "theme": dict(DEFAULT_THEME),
        "nav": {
            "type": "tabs",
            "items": [
                {"name": "Home", "icon": "home", "screen": "home"},
                {"name": "Profile", "icon": "user", "screen": "profile"},
            ],
        },
    },
    "screens": [
        {
            "name": "home",
            "title": "Home",
            "description": "Browse available drones",
            "workflowPosition": 1,
            "isStartPoint": True,
            "nextScreens": ["profile"],
            "components": [
                {
                    "id": "header-1",
                    "type": "Header",
                    "dataProperties": {"title": "Drones"},
                    "designProperties": {"hasMenu": True},
                },
                {
                    "id": "button-2",
                    "type": "Button",
                    "dataProperties": {"text": "My profile", "action": "navigate", "screen": "profile"},
                    "designProperties": {"variant": "solid"},
                },
            ],
        },
        {
            "name": "profile",
            "title": "Profile",
            "description": "User details",
            "workflowPosition": 2,
            "isStartPoint": False,
            "nextScreens": [],
            "components": [
                {
                    "id": "avatar-1",
                    "type": "Avatar",
                    "dataProperties": {},
                    "designProperties": {"size": "large"},
                },
                {
                    "id": "text-2",
                    "type": "Text",
                    "dataProperties": {"content": "Pilot since 2021"},
                    "designProperties": {},
                },
            ],
        },
    ],
}


@pytest.fixture
def valid_document() -> Dict[str, Any]:
    return deepcopy(VALID_DOCUMENT)


@pytest.fixture
def fake_provider():
    def make(*replies: Any, error: Optional[Exception] = None, healthy: bool = True) -> FakeProvider:
        return FakeProvider(replies=list(replies), error=error, healthy=healthy)
    return make
