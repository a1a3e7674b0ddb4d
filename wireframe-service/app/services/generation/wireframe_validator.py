"""
Wireframe Validator - structural and referential checks.

Validates generated wireframe documents for:
- App envelope (name, navigation type)
- Screen list (non-empty, unique names, component lists)
- Component types against the fixed vocabulary
- Screen references from navigation items and components

Cosmetic issues (icons, theme colours, naming style, missing property maps)
are reported as warnings and never affect ``isValid``.
"""
import re
from collections import Counter
from typing import Any, Dict, List, Set

from app.models.schemas.component_catalog import (
    VALID_NAV_TYPES,
    get_required_data_keys,
    is_valid_component_type,
    is_valid_icon,
    is_valid_nav_type,
    normalize_component_type,
)
from app.models.schemas.wireframe import ValidationReport
from app.utils.logging import get_logger

logger = get_logger(__name__)

HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
KEBAB_CASE_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class _Findings:
    def __init__(self):
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def error(self, message: str) -> None:
        self.errors.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)


class WireframeValidator:
    """
    Runs every check on a wireframe document and collects the findings.

    ``validate`` never raises and never short-circuits, so one report lists
    all problems at once.
    """

    def validate(self, document: Any) -> ValidationReport:
        findings = _Findings()

        if not isinstance(document, dict):
            findings.error("Wireframe must be a JSON object")
            return self._report(findings)

        screen_names = self._screen_names(document)

        self._validate_app(document.get("app"), screen_names, findings)
        self._validate_screens(document.get("screens"), screen_names, findings)

        return self._report(findings)

    def _report(self, findings: _Findings) -> ValidationReport:
        report = ValidationReport(
            isValid=not findings.errors,
            errors=findings.errors,
            warnings=findings.warnings,
        )

        logger.info(
            "wireframe.validation.completed",
            extra={
                "is_valid": report.isValid,
                "errors": len(report.errors),
                "warnings": len(report.warnings),
            }
        )

        return report

    @staticmethod
    def _screen_names(document: Dict[str, Any]) -> Set[str]:
        screens = document.get("screens")
        if not isinstance(screens, list):
            return set()
        return {
            s["name"] for s in screens
            if isinstance(s, dict) and isinstance(s.get("name"), str) and s["name"]
        }

    # ------------------------------------------------------------------
    # App envelope
    # ------------------------------------------------------------------

    def _validate_app(self, app: Any, screen_names: Set[str], findings: _Findings) -> None:
        if not isinstance(app, dict):
            findings.error("Missing 'app' section")
            return

        name = app.get("name")
        if name is None:
            findings.error("Missing app.name")
        elif not isinstance(name, str):
            findings.error("app.name must be a string")

        self._validate_theme(app.get("theme"), findings)
        self._validate_nav(app.get("nav"), screen_names, findings)

    def _validate_theme(self, theme: Any, findings: _Findings) -> None:
        if theme is None:
            return
        if not isinstance(theme, dict):
            findings.warn("app.theme should be an object of hex colours")
            return
        for role, value in theme.items():
            if not isinstance(value, str) or not HEX_COLOR_RE.match(value):
                findings.warn(f"Invalid theme colour for '{role}': {value!r}")

    def _validate_nav(self, nav: Any, screen_names: Set[str], findings: _Findings) -> None:
        if not isinstance(nav, dict):
            findings.error("Missing app.nav")
            return

        nav_type = nav.get("type")
        if not is_valid_nav_type(nav_type):
            findings.error(
                f"Invalid navigation type {nav_type!r}, expected one of: {', '.join(VALID_NAV_TYPES)}"
            )

        items = nav.get("items")
        if not isinstance(items, list):
            return

        for index, item in enumerate(items):
            if not isinstance(item, dict):
                continue
            label = item.get("name") or f"#{index}"

            icon = item.get("icon")
            if icon is not None and not is_valid_icon(icon):
                findings.warn(f"Navigation item '{label}' uses unknown icon {icon!r}")

            target = item.get("screen")
            if not isinstance(target, str) or not target:
                findings.error(f"Navigation item '{label}' is missing a screen reference")
            elif not self._resolves(target, screen_names):
                findings.error(f"Navigation item '{label}' references unknown screen {target!r}")

    # ------------------------------------------------------------------
    # Screens and components
    # ------------------------------------------------------------------

    def _validate_screens(self, screens: Any, screen_names: Set[str], findings: _Findings) -> None:
        if not isinstance(screens, list) or not screens:
            findings.error("'screens' must be a non-empty array")
            return

        counts = Counter(
            s["name"] for s in screens
            if isinstance(s, dict) and isinstance(s.get("name"), str) and s["name"]
        )
        for name, count in counts.items():
            if count > 1:
                findings.error(f"Duplicate screen name '{name}' ({count} screens)")

        for index, screen in enumerate(screens):
            if not isinstance(screen, dict):
                findings.error(f"Screen at index {index} must be an object")
                continue
            self._validate_screen(screen, index, screen_names, findings)

    def _validate_screen(
        self,
        screen: Dict[str, Any],
        index: int,
        screen_names: Set[str],
        findings: _Findings,
    ) -> None:
        name = screen.get("name")
        if not isinstance(name, str) or not name:
            findings.error(f"Screen at index {index} is missing a name")
            label = f"#{index}"
        else:
            label = name
            if not KEBAB_CASE_RE.match(name):
                findings.warn(f"Screen name '{name}' is not kebab-case")

        next_screens = screen.get("nextScreens")
        if isinstance(next_screens, list):
            for target in next_screens:
                if not self._resolves(target, screen_names):
                    findings.warn(f"Screen '{label}' lists unknown next screen {target!r}")

        components = screen.get("components")
        if not isinstance(components, list):
            findings.error(f"Screen '{label}' is missing a components array")
            return

        seen_ids: Set[str] = set()
        for position, component in enumerate(components):
            self._validate_component(component, position, label, seen_ids, screen_names, findings)

    def _validate_component(
        self,
        component: Any,
        position: int,
        screen_label: str,
        seen_ids: Set[str],
        screen_names: Set[str],
        findings: _Findings,
    ) -> None:
        if not isinstance(component, dict):
            findings.error(f"Component at index {position} in screen '{screen_label}' is missing a type")
            return

        component_id = component.get("id")
        if isinstance(component_id, str) and component_id:
            if component_id in seen_ids:
                findings.warn(f"Duplicate component id '{component_id}' in screen '{screen_label}'")
            seen_ids.add(component_id)
        label = component_id if isinstance(component_id, str) and component_id else f"#{position}"

        component_type = component.get("type")
        if component_type is None:
            findings.error(f"Component '{label}' in screen '{screen_label}' is missing a type")
        elif not is_valid_component_type(component_type):
            message = f"Invalid component type {component_type!r} in screen '{screen_label}'"
            suggestion = normalize_component_type(component_type)
            if suggestion:
                message += f" (did you mean '{suggestion}'?)"
            findings.error(message)

        data = component.get("dataProperties")
        if data is None:
            findings.warn(f"Component '{label}' in screen '{screen_label}' has no dataProperties")
        elif isinstance(data, dict):
            if is_valid_component_type(component_type):
                for key in get_required_data_keys(component_type):
                    if key not in data:
                        findings.warn(
                            f"{component_type} '{label}' in screen '{screen_label}' "
                            f"is missing dataProperties.{key}"
                        )

            target = data.get("screen")
            if target is not None and target != "" and not self._resolves(target, screen_names):
                findings.error(
                    f"Component '{label}' in screen '{screen_label}' references unknown screen {target!r}"
                )

        if component.get("designProperties") is None:
            findings.warn(f"Component '{label}' in screen '{screen_label}' has no designProperties")

    @staticmethod
    def _resolves(target: Any, screen_names: Set[str]) -> bool:
        return isinstance(target, str) and target in screen_names


wireframe_validator = WireframeValidator()
