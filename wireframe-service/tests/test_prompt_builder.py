from app.models.schemas.component_catalog import VALID_COMPONENT_TYPES, VALID_ICONS, VALID_NAV_TYPES
from app.models.schemas.wireframe import QuestionAnswer, WorkflowScreen
from app.services.generation.prompt_builder import (
    build_improve_description_prompt,
    build_questions_prompt,
    build_wireframe_prompt,
    build_workflow_prompt,
    coerce_screen,
    kebab_case,
)


def test_prompt_embeds_vocabularies_and_description():
    prompt = build_wireframe_prompt("drone booking app")

    for name in VALID_COMPONENT_TYPES + VALID_NAV_TYPES + VALID_ICONS:
        assert name in prompt
    assert "DESCRIPTION: drone booking app" in prompt
    assert "SINGLE SCREEN MODE" not in prompt
    assert "APP WORKFLOW" not in prompt


def test_prompt_marks_required_data_properties():
    prompt = build_wireframe_prompt("demo")

    assert "- Header:" in prompt
    assert "title*" in prompt
    assert "placeholder*" in prompt


def test_target_screen_pins_single_screen():
    target = {"id": "dashboard", "title": "Dashboard", "description": "Overview", "nextScreens": ["login"]}

    prompt = build_wireframe_prompt("drone booking app", workflow=[target], target_screen=target)

    assert "SINGLE SCREEN MODE" in prompt
    assert '"name": "dashboard"' in prompt
    assert '"screen": "dashboard"' in prompt
    assert '"nextScreens": ["login"]' in prompt
    assert '"isStartPoint": true' in prompt
    assert "- dashboard: Dashboard - Overview (connects to: login)" in prompt


def test_target_accepts_model_instances():
    target = WorkflowScreen(id="checkout", title="Checkout", position=4)

    prompt = build_wireframe_prompt("shop", target_screen=target, target_index=3)

    assert '"name": "checkout"' in prompt
    assert '"workflowPosition": 4' in prompt


def test_missing_fields_degrade_to_placeholders():
    prompt = build_wireframe_prompt(None, workflow=[{}, None, {"title": {"bad": 1}}], target_screen={}, target_index=1)

    assert "DESCRIPTION: No description provided" in prompt
    assert '"name": "screen-2"' in prompt
    assert '"title": "Untitled Screen"' in prompt
    assert "- screen-1: Untitled Screen - No description provided (connects to: none)" in prompt
    assert "- screen-3:" in prompt


def test_target_without_id_uses_kebab_title():
    prompt = build_wireframe_prompt("demo", target_screen={"title": "Product Selection"})

    assert '"name": "product-selection"' in prompt


def test_malformed_target_fields_do_not_discard_valid_ones():
    prompt = build_wireframe_prompt("x", target_screen={"id": "dashboard", "title": 42})

    assert '"name": "dashboard"' in prompt
    assert '"title": "42"' in prompt
    assert "screen-1" not in prompt


def test_coerce_screen_drops_only_failing_fields():
    screen = coerce_screen({"id": 7, "title": "Checkout", "isStartPoint": "sometimes", "nextScreens": 3})

    assert screen.id == "7"
    assert screen.title == "Checkout"
    assert screen.isStartPoint is None
    assert screen.nextScreens == []


def test_kebab_case():
    assert kebab_case("Product Selection") == "product-selection"
    assert kebab_case("userProfile") == "user-profile"
    assert kebab_case("  ") == ""


def test_auxiliary_prompts_carry_inputs():
    assert "plan a trip" in build_workflow_prompt("plan a trip")
    assert 'User description: "plan a trip"' in build_questions_prompt("plan a trip")

    prompt = build_improve_description_prompt(
        "plan a trip",
        [QuestionAnswer(question="Platform?", answer="Mobile App")],
    )
    assert "Q1: Platform?" in prompt
    assert "A: Mobile App" in prompt
