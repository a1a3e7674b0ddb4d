"""
Prompt construction for wireframe, workflow and description refinement calls.

All builders are pure and total: missing or malformed inputs degrade to
generic placeholders instead of raising.
"""
import json
import re
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import ValidationError

from app.models.prompts import prompts
from app.models.schemas.component_catalog import (
    COMPONENT_DEFINITIONS,
    DEFAULT_THEME,
    THEME_ROLES,
    VALID_COMPONENT_TYPES,
    VALID_ICONS,
    VALID_NAV_TYPES,
)
from app.models.schemas.wireframe import QuestionAnswer, WorkflowScreen

ScreenLike = Union[WorkflowScreen, Dict[str, Any]]

PLACEHOLDER_TITLE = "Untitled Screen"
PLACEHOLDER_DESCRIPTION = "No description provided"


def kebab_case(text: str) -> str:
    """'Product Selection' -> 'product-selection'"""
    text = re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", text or "")
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")


_TEXT_FIELDS = ("id", "title", "description")


def coerce_screen(screen: Any) -> WorkflowScreen:
    """
    Lenient WorkflowScreen from whatever the caller passed.

    Numeric text fields are stringified; any other field that fails
    validation is dropped on its own, so the valid fields survive.
    """
    if isinstance(screen, WorkflowScreen):
        return screen
    if not isinstance(screen, dict):
        return WorkflowScreen()

    data = dict(screen)
    for key in _TEXT_FIELDS:
        value = data.get(key)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            data[key] = str(value)

    try:
        return WorkflowScreen.model_validate(data)
    except ValidationError as e:
        failing = {error["loc"][0] for error in e.errors() if error.get("loc")}

    data = {key: value for key, value in data.items() if key not in failing}
    try:
        return WorkflowScreen.model_validate(data)
    except ValidationError:
        return WorkflowScreen()


def screen_identifier(screen: WorkflowScreen, index: int = 0) -> str:
    if screen.id and str(screen.id).strip():
        return str(screen.id).strip()
    if screen.title and kebab_case(screen.title):
        return kebab_case(screen.title)
    return f"screen-{index + 1}"


def format_component_specs() -> str:
    lines = []
    for name, definition in COMPONENT_DEFINITIONS.items():
        required = set(definition.get("required", []))
        keys = list(definition.get("data_defaults", {}).keys())
        keys += [key for key in sorted(required) if key not in keys]
        props = ", ".join(f"{key}*" if key in required else key for key in keys) or "none"
        lines.append(f"- {name}: {definition.get('description', '')} | dataProperties: {props}")
    return "\n".join(lines)


def build_example_document(screen_name: str = "home", title: str = "Home") -> Dict[str, Any]:
    """Worked example embedded in the prompt."""
    return {
        "app": {
            "name": "App Name",
            "description": "One sentence about the app",
            "theme": dict(DEFAULT_THEME),
            "nav": {
                "type": "tabs",
                "items": [
                    {"name": title, "icon": "home", "screen": screen_name}
                ]
            }
        },
        "screens": [
            {
                "name": screen_name,
                "title": title,
                "description": "What the user does on this screen",
                "workflowPosition": 1,
                "isStartPoint": True,
                "nextScreens": [],
                "components": [
                    {
                        "id": "header-1",
                        "type": "Header",
                        "dataProperties": {"title": title},
                        "designProperties": {"hasMenu": True}
                    },
                    {
                        "id": "button-2",
                        "type": "Button",
                        "dataProperties": {"text": "Get Started", "action": "navigate", "screen": screen_name},
                        "designProperties": {"variant": "solid", "full": True}
                    }
                ]
            }
        ]
    }


def _workflow_section(workflow: Optional[Sequence[ScreenLike]]) -> str:
    if not workflow:
        return ""
    lines = []
    for index, raw in enumerate(workflow):
        screen = coerce_screen(raw)
        next_screens = ", ".join(screen.nextScreens) or "none"
        lines.append(
            f"- {screen_identifier(screen, index)}: {screen.title or PLACEHOLDER_TITLE} - "
            f"{screen.description or PLACEHOLDER_DESCRIPTION} (connects to: {next_screens})"
        )
    return prompts.WORKFLOW_CONTEXT.format(workflow_lines="\n".join(lines))


def _target_section(screen: WorkflowScreen, index: int) -> str:
    position = screen.position if screen.position is not None else index + 1
    return prompts.TARGET_SCREEN_CONSTRAINTS.format(
        screen_id=json.dumps(screen_identifier(screen, index)),
        title=json.dumps(screen.title or PLACEHOLDER_TITLE),
        description=json.dumps(screen.description or PLACEHOLDER_DESCRIPTION),
        position=position,
        next_screens=json.dumps(screen.nextScreens),
    )


def build_wireframe_prompt(
    description: Optional[str],
    workflow: Optional[Sequence[ScreenLike]] = None,
    target_screen: Optional[ScreenLike] = None,
    target_index: int = 0,
) -> str:
    """
    Build the wireframe generation prompt.

    Args:
        description: Natural-language app description
        workflow: Optional full list of workflow screens (journey context)
        target_screen: Optional screen the output must be pinned to
        target_index: Position of ``target_screen`` in the workflow, used for
            placeholder ids and positions

    Returns:
        Prompt string
    """
    target_section = ""
    example = build_example_document()

    if target_screen is not None:
        screen = coerce_screen(target_screen)
        target_section = _target_section(screen, target_index)
        example = build_example_document(
            screen_name=screen_identifier(screen, target_index),
            title=screen.title or PLACEHOLDER_TITLE,
        )

    return prompts.WIREFRAME_GENERATE.format(
        component_types=", ".join(VALID_COMPONENT_TYPES),
        nav_types=", ".join(VALID_NAV_TYPES),
        icons=", ".join(VALID_ICONS),
        component_specs=format_component_specs(),
        theme_roles=", ".join(THEME_ROLES),
        example_document=json.dumps(example, indent=2),
        workflow_section=_workflow_section(workflow),
        target_section=target_section,
        description=(description or "").strip() or PLACEHOLDER_DESCRIPTION,
    )


def build_workflow_prompt(description: Optional[str]) -> str:
    return prompts.WORKFLOW_GENERATE.format(
        description=(description or "").strip() or PLACEHOLDER_DESCRIPTION
    )


def build_questions_prompt(description: Optional[str]) -> str:
    return prompts.CLARIFYING_QUESTIONS.format(
        description=(description or "").strip() or PLACEHOLDER_DESCRIPTION
    )


def build_improve_description_prompt(
    description: Optional[str],
    answers: List[QuestionAnswer],
) -> str:
    answer_lines = "\n".join(
        f"Q{i + 1}: {a.question}\nA: {a.answer}" for i, a in enumerate(answers)
    ) or "No answers provided"
    return prompts.IMPROVE_DESCRIPTION.format(
        description=(description or "").strip() or PLACEHOLDER_DESCRIPTION,
        answers=answer_lines,
    )
