"""Centralized wireframe vocabulary registry.

This module is the single source of truth for the component, navigation,
icon and theme vocabularies used across prompting, validation and the
component catalog endpoint.
"""

from __future__ import annotations

from copy import deepcopy
from enum import Enum
from typing import Any, Dict, List, Optional, TypedDict


class ComponentType(str, Enum):
    HEADER = "Header"
    BUTTON = "Button"
    INPUT = "Input"
    LIST = "List"
    CARD = "Card"
    CAROUSEL = "Carousel"
    STEPS = "Steps"
    DIVIDER = "Divider"
    FAB = "Fab"
    IMAGE = "Image"
    TEXT = "Text"
    SEARCH_BAR = "SearchBar"
    FILTER = "Filter"
    MODAL = "Modal"
    TABS = "Tabs"
    AVATAR = "Avatar"
    BADGE = "Badge"
    PROGRESS = "Progress"
    ALERT = "Alert"
    DRAWER = "Drawer"
    MENU = "Menu"


class NavType(str, Enum):
    TABS = "tabs"
    DRAWER = "drawer"
    STACK = "stack"


class IconName(str, Enum):
    HOME = "home"
    USER = "user"
    CALENDAR = "calendar"
    HISTORY = "history"
    SEARCH = "search"
    PLUS = "plus"
    MENU = "menu"
    HEART = "heart"
    STAR = "star"
    BELL = "bell"
    SETTINGS = "settings"
    BOOKMARK = "bookmark"
    SHARE = "share"
    EDIT = "edit"
    DELETE = "delete"
    CHECK = "check"
    CLOSE = "close"
    ARROW_LEFT = "arrow-left"
    ARROW_RIGHT = "arrow-right"
    CAMERA = "camera"


VALID_COMPONENT_TYPES: List[str] = [member.value for member in ComponentType]
VALID_NAV_TYPES: List[str] = [member.value for member in NavType]
VALID_ICONS: List[str] = [member.value for member in IconName]

DEFAULT_THEME: Dict[str, str] = {
    "primary": "#1890ff",
    "secondary": "#52c41a",
    "background": "#f5f5f5",
    "surface": "#ffffff",
    "text": "#262626",
    "textSecondary": "#8c8c8c",
    "border": "#d9d9d9",
    "error": "#ff4d4f",
    "success": "#52c41a",
    "warning": "#faad14",
}

THEME_ROLES: List[str] = list(DEFAULT_THEME.keys())


class ComponentDefinition(TypedDict, total=False):
    """Full definition for a wireframe component type."""

    category: str
    description: str
    required: List[str]
    data_defaults: Dict[str, Any]
    design_defaults: Dict[str, Any]


COMPONENT_DEFINITIONS: Dict[str, ComponentDefinition] = {
    "Header": {
        "category": "layout",
        "description": "App header with title and navigation",
        "required": ["title"],
        "data_defaults": {"title": "Header Title", "subtitle": ""},
        "design_defaults": {"backgroundColor": "#1890ff", "textColor": "#ffffff", "height": 60,
                            "hasBack": False, "hasMenu": False},
    },
    "Button": {
        "category": "interactive",
        "description": "Clickable action button, may navigate to a screen",
        "required": ["text"],
        "data_defaults": {"text": "Click me", "action": "navigate", "screen": None},
        "design_defaults": {"variant": "solid", "size": "medium", "full": False, "disabled": False},
    },
    "Input": {
        "category": "interactive",
        "description": "Text input for user data",
        "required": ["placeholder"],
        "data_defaults": {"placeholder": "Enter text here", "label": "", "value": ""},
        "design_defaults": {"type": "text", "required": False, "borderRadius": 4},
    },
    "List": {
        "category": "content",
        "description": "Vertical list of items",
        "required": [],
        "data_defaults": {"items": [], "emptyText": "No items found"},
        "design_defaults": {"selectable": False, "searchable": False, "itemHeight": 48},
    },
    "Card": {
        "category": "content",
        "description": "Content container with title, description and call to action",
        "required": [],
        "data_defaults": {"title": "Card Title", "description": "", "cta": ""},
        "design_defaults": {"bordered": True, "hoverable": False, "borderRadius": 8},
    },
    "Carousel": {
        "category": "content",
        "description": "Sliding image/content carousel",
        "required": [],
        "data_defaults": {"items": []},
        "design_defaults": {"height": 200, "autoplay": False, "dots": True},
    },
    "Steps": {
        "category": "navigation",
        "description": "Step indicator for multi-step flows",
        "required": ["steps", "current"],
        "data_defaults": {"steps": [], "current": 0},
        "design_defaults": {"direction": "horizontal", "size": "default"},
    },
    "Divider": {
        "category": "layout",
        "description": "Visual separator between content",
        "required": [],
        "data_defaults": {},
        "design_defaults": {"borderColor": "#f0f0f0", "margin": "16px 0"},
    },
    "Fab": {
        "category": "interactive",
        "description": "Floating action button",
        "required": ["icon"],
        "data_defaults": {"icon": "plus", "action": "navigate", "screen": None},
        "design_defaults": {"position": "bottom-right", "size": "large"},
    },
    "Image": {
        "category": "content",
        "description": "Image with optional caption",
        "required": [],
        "data_defaults": {"src": "", "alt": "Placeholder image", "caption": ""},
        "design_defaults": {"width": "100%", "height": 200, "objectFit": "cover"},
    },
    "Text": {
        "category": "content",
        "description": "Text content",
        "required": ["content"],
        "data_defaults": {"content": "Your text content here", "type": "body"},
        "design_defaults": {"fontSize": 14, "fontWeight": "normal", "alignment": "left"},
    },
    "SearchBar": {
        "category": "interactive",
        "description": "Search field",
        "required": ["placeholder"],
        "data_defaults": {"placeholder": "Search..."},
        "design_defaults": {"borderRadius": 20, "showIcon": True},
    },
    "Filter": {
        "category": "interactive",
        "description": "Set of filter chips",
        "required": ["options"],
        "data_defaults": {"options": [], "selected": []},
        "design_defaults": {"multiple": False, "layout": "horizontal"},
    },
    "Modal": {
        "category": "overlay",
        "description": "Dialog shown above the screen",
        "required": ["title"],
        "data_defaults": {"title": "Modal Title", "content": ""},
        "design_defaults": {"closable": True, "centered": True},
    },
    "Tabs": {
        "category": "navigation",
        "description": "In-screen tab switcher",
        "required": ["tabs"],
        "data_defaults": {"tabs": [], "activeTab": 0},
        "design_defaults": {"position": "top", "type": "line"},
    },
    "Avatar": {
        "category": "content",
        "description": "User avatar",
        "required": [],
        "data_defaults": {"src": "", "name": ""},
        "design_defaults": {"size": 40, "shape": "circle"},
    },
    "Badge": {
        "category": "content",
        "description": "Small count or status indicator",
        "required": [],
        "data_defaults": {"count": 0, "text": ""},
        "design_defaults": {"color": "#ff4d4f", "dot": False},
    },
    "Progress": {
        "category": "content",
        "description": "Progress bar or circle",
        "required": ["percent"],
        "data_defaults": {"percent": 0},
        "design_defaults": {"type": "line", "showInfo": True},
    },
    "Alert": {
        "category": "overlay",
        "description": "Inline alert message",
        "required": ["message"],
        "data_defaults": {"message": "Alert message", "description": ""},
        "design_defaults": {"type": "info", "closable": False},
    },
    "Drawer": {
        "category": "overlay",
        "description": "Side panel",
        "required": [],
        "data_defaults": {"title": "", "items": []},
        "design_defaults": {"placement": "left", "width": 280},
    },
    "Menu": {
        "category": "navigation",
        "description": "List of menu entries, entries may navigate",
        "required": ["items"],
        "data_defaults": {"items": []},
        "design_defaults": {"mode": "vertical"},
    },
}


_COMPONENT_ALIAS_INDEX: Dict[str, str] = {name.lower(): name for name in COMPONENT_DEFINITIONS}


def get_available_components() -> List[str]:
    return list(VALID_COMPONENT_TYPES)


def is_valid_component_type(component_type: Any) -> bool:
    return isinstance(component_type, str) and component_type in COMPONENT_DEFINITIONS


def is_valid_nav_type(nav_type: Any) -> bool:
    return isinstance(nav_type, str) and nav_type in VALID_NAV_TYPES


def is_valid_icon(icon: Any) -> bool:
    return isinstance(icon, str) and icon in VALID_ICONS


def normalize_component_type(component_type: str, fallback: str = "") -> str:
    """Case-insensitive lookup; unknown names resolve to ``fallback``."""
    if not component_type or not isinstance(component_type, str):
        return fallback
    return _COMPONENT_ALIAS_INDEX.get(component_type.strip().lower(), fallback)


def get_component_definition(component_type: str) -> Optional[ComponentDefinition]:
    return COMPONENT_DEFINITIONS.get(component_type)


def get_required_data_keys(component_type: str) -> List[str]:
    definition = COMPONENT_DEFINITIONS.get(component_type, {})
    return list(definition.get("required", []))


def export_component_catalog() -> Dict[str, Any]:
    return {
        "components": deepcopy(COMPONENT_DEFINITIONS),
        "componentTypes": get_available_components(),
        "navTypes": list(VALID_NAV_TYPES),
        "icons": list(VALID_ICONS),
        "defaultTheme": dict(DEFAULT_THEME),
    }
