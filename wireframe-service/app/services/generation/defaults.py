"""
Fills the gaps a model reply commonly leaves: component ids and the
document metadata block.
"""
from typing import Any, Dict, Optional, Set

from app.config import settings
from app.utils.datetime_utils import to_iso_string
from app.utils.logging import get_logger

logger = get_logger(__name__)


def description_excerpt(description: Optional[str], limit: Optional[int] = None) -> str:
    """Truncate to at most ``limit`` characters, ending in '...' when cut."""
    limit = limit or settings.description_excerpt_length
    text = (description or "").strip()
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


class DefaultsApplier:
    """
    Assigns missing component ids and synthesises ``metadata``.

    Applying twice is a no-op. Malformed parts of the document (a screen that
    is not an object, a components value that is not a list) are skipped and
    left for the validator to report.
    """

    def apply(
        self,
        document: Any,
        description: Optional[str] = None,
        repaired: bool = False,
    ) -> Any:
        if not isinstance(document, dict):
            return document

        assigned = 0
        screens = document.get("screens")
        if isinstance(screens, list):
            for screen in screens:
                if isinstance(screen, dict):
                    assigned += self._assign_component_ids(screen)

        added_metadata = "metadata" not in document
        if added_metadata:
            document["metadata"] = self.build_metadata(description, repaired)

        if assigned or added_metadata:
            logger.debug(
                "wireframe.defaults.applied",
                extra={"ids_assigned": assigned, "metadata_added": added_metadata}
            )

        return document

    def build_metadata(self, description: Optional[str], repaired: bool = False) -> Dict[str, Any]:
        return {
            "generatedAt": to_iso_string(),
            "version": settings.metadata_version,
            "description": description_excerpt(description),
            "repaired": repaired,
        }

    def _assign_component_ids(self, screen: Dict[str, Any]) -> int:
        components = screen.get("components")
        if not isinstance(components, list):
            return 0

        taken: Set[str] = {
            c["id"] for c in components
            if isinstance(c, dict) and isinstance(c.get("id"), str) and c["id"]
        }

        assigned = 0
        for index, component in enumerate(components, start=1):
            if not isinstance(component, dict) or component.get("id"):
                continue

            component_type = component.get("type")
            prefix = component_type.lower() if isinstance(component_type, str) and component_type else "component"
            candidate = f"{prefix}-{index}"
            suffix = 2
            while candidate in taken:
                candidate = f"{prefix}-{index}-{suffix}"
                suffix += 1

            component["id"] = candidate
            taken.add(candidate)
            assigned += 1

        return assigned


defaults_applier = DefaultsApplier()
