"""
Schema system for the wireframe service.

Vocabularies live in ``component_catalog``; request/response models in
``wireframe``.
"""

from .component_catalog import (
    ComponentType,
    NavType,
    IconName,
    VALID_COMPONENT_TYPES,
    VALID_NAV_TYPES,
    VALID_ICONS,
    DEFAULT_THEME,
    THEME_ROLES,
    COMPONENT_DEFINITIONS,
    get_available_components,
    get_component_definition,
    get_required_data_keys,
    is_valid_component_type,
    is_valid_nav_type,
    is_valid_icon,
    normalize_component_type,
    export_component_catalog,
)

from .wireframe import (
    WorkflowScreen,
    ValidationReport,
    WireframeResult,
    WorkflowResult,
    ClarifyingQuestion,
    QuestionAnswer,
)

__all__ = [
    # Vocabularies
    'ComponentType',
    'NavType',
    'IconName',
    'VALID_COMPONENT_TYPES',
    'VALID_NAV_TYPES',
    'VALID_ICONS',
    'DEFAULT_THEME',
    'THEME_ROLES',
    'COMPONENT_DEFINITIONS',
    'get_available_components',
    'get_component_definition',
    'get_required_data_keys',
    'is_valid_component_type',
    'is_valid_nav_type',
    'is_valid_icon',
    'normalize_component_type',
    'export_component_catalog',

    # Models
    'WorkflowScreen',
    'ValidationReport',
    'WireframeResult',
    'WorkflowResult',
    'ClarifyingQuestion',
    'QuestionAnswer',
]
