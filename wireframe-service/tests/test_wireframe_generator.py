import json

import pytest

from app.llm.base import GenerationError
from app.services.generation.response_parser import UnparsableJsonError
from app.services.generation.wireframe_generator import WireframeGenerator, resolve_target_screen

WORKFLOW = [
    {"id": "dashboard", "title": "Dashboard", "description": "Upcoming bookings",
     "position": 1, "isStartPoint": True, "nextScreens": ["login"]},
    {"id": "login", "title": "Login", "description": "Sign in", "position": 2, "nextScreens": []},
]

DASHBOARD_REPLY = {
    "app": {
        "name": "SkyBook",
        "theme": {"primary": "#1890ff"},
        "nav": {"type": "tabs", "items": [{"name": "Dashboard", "icon": "home", "screen": "dashboard"}]},
    },
    "screens": [{
        "name": "dashboard",
        "title": "Dashboard",
        "description": "Upcoming bookings",
        "workflowPosition": 1,
        "isStartPoint": True,
        "nextScreens": ["login"],
        "components": [
            {"type": "Header", "dataProperties": {"title": "Dashboard"}, "designProperties": {}},
            {"type": "List", "dataProperties": {"items": []}, "designProperties": {}},
        ],
    }],
}


async def test_single_screen_generation(fake_provider):
    provider = fake_provider(DASHBOARD_REPLY)

    result = await WireframeGenerator(provider).generate("drone booking app", WORKFLOW, 0)

    assert result.success is True
    screens = result.wireframe["screens"]
    assert [s["name"] for s in screens] == ["dashboard"]
    assert screens[0]["isStartPoint"] is True
    assert result.wireframe["app"]["nav"]["items"][0]["screen"] == "dashboard"
    assert result.metadata["targetScreen"] == "dashboard"

    assert len(provider.prompts) == 1
    assert '"name": "dashboard"' in provider.prompts[0]
    assert "SINGLE SCREEN MODE" in provider.prompts[0]


async def test_fenced_reply_with_prose_is_parsed(fake_provider):
    reply = "Sure! Here is your wireframe:\n```json\n" + json.dumps(DASHBOARD_REPLY) + "\n```\nEnjoy."

    result = await WireframeGenerator(fake_provider(reply)).generate("drone booking app", WORKFLOW, 0)

    assert result.wireframe["app"]["name"] == "SkyBook"
    assert result.metadata["repaired"] is False


async def test_defaults_applied_before_validation(fake_provider):
    result = await WireframeGenerator(fake_provider(DASHBOARD_REPLY)).generate("drone booking app", WORKFLOW, 0)

    components = result.wireframe["screens"][0]["components"]
    assert [c["id"] for c in components] == ["header-1", "list-2"]
    assert result.wireframe["metadata"]["description"] == "drone booking app"
    assert result.validation.isValid is True
    # login is only listed in nextScreens
    assert any("login" in w for w in result.validation.warnings)


async def test_repaired_reply_is_flagged(fake_provider):
    reply = """{
      app: {name: 'Notes', nav: {type: 'stack', items: [],},},
      screens: [{name: 'home', components: [{type: 'Text', dataProperties: {content: 'Hi'},},],},],
    }"""

    result = await WireframeGenerator(fake_provider(reply)).generate("notes app")

    assert result.metadata["repaired"] is True
    assert result.wireframe["metadata"]["repaired"] is True
    assert result.wireframe["screens"][0]["components"][0]["id"] == "text-1"


async def test_invalid_document_is_still_returned(fake_provider):
    reply = json.loads(json.dumps(DASHBOARD_REPLY))
    reply["screens"][0]["components"][1]["type"] = "Sidebar"

    result = await WireframeGenerator(fake_provider(reply)).generate("drone booking app", WORKFLOW, 0)

    assert result.success is True
    assert result.validation.isValid is False
    assert len(result.validation.errors) == 1
    assert "Sidebar" in result.validation.errors[0]
    assert result.wireframe["screens"][0]["components"][1]["type"] == "Sidebar"


async def test_prose_reply_is_fatal(fake_provider):
    with pytest.raises(UnparsableJsonError):
        await WireframeGenerator(fake_provider("I'm sorry, I can't do that.")).generate("demo")


async def test_unparsable_reply_keeps_candidate_for_diagnostics(fake_provider):
    with pytest.raises(UnparsableJsonError) as exc_info:
        await WireframeGenerator(fake_provider("{app: oops")).generate("demo")
    assert exc_info.value.snippet == "{app: oops"


async def test_repeated_trailing_commas_are_repaired_in_one_pass(fake_provider):
    reply = "{app: {name: 'Notes', nav: {type: 'stack', items: [,,],},}, screens: [],,}"

    result = await WireframeGenerator(fake_provider(reply)).generate("notes")

    assert result.metadata["repaired"] is True
    assert result.wireframe["app"]["nav"]["items"] == []


async def test_non_object_reply_is_fatal(fake_provider):
    with pytest.raises(UnparsableJsonError):
        await WireframeGenerator(fake_provider("[1, 2, 3]")).generate("demo")


async def test_backend_failure_propagates(fake_provider):
    provider = fake_provider(error=GenerationError("backend down", provider="text_completion"))

    with pytest.raises(GenerationError):
        await WireframeGenerator(provider).generate("demo")
    assert len(provider.prompts) == 1


async def test_out_of_range_index_generates_whole_app(fake_provider):
    provider = fake_provider(DASHBOARD_REPLY)

    result = await WireframeGenerator(provider).generate("drone booking app", WORKFLOW, 7)

    assert "SINGLE SCREEN MODE" not in provider.prompts[0]
    assert "APP WORKFLOW" in provider.prompts[0]
    assert result.metadata["targetScreen"] is None


def test_resolve_target_screen():
    assert resolve_target_screen(WORKFLOW, 1) is WORKFLOW[1]
    assert resolve_target_screen(WORKFLOW, -1) is None
    assert resolve_target_screen(WORKFLOW, 2) is None
    assert resolve_target_screen(WORKFLOW, None) is None
    assert resolve_target_screen([], 0) is None
