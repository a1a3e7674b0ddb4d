"""
Wireframe generation models.

The wireframe document itself stays a plain JSON object: it is produced by a
language model, may be partially invalid, and is handed back unchanged
together with its ValidationReport.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WorkflowScreen(BaseModel):
    """Upstream screen descriptor from the workflow step"""
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    position: Optional[int] = None
    isStartPoint: Optional[bool] = None
    nextScreens: List[str] = Field(default_factory=list)
    previousScreens: List[str] = Field(default_factory=list)

    @field_validator('nextScreens', 'previousScreens', mode='before')
    @classmethod
    def coerce_screen_refs(cls, v: Any) -> List[str]:
        """Models sometimes send a bare string or null"""
        if v is None:
            return []
        if isinstance(v, str):
            return [v] if v else []
        if not isinstance(v, (list, tuple)):
            return []
        return [str(item) for item in v if item]

    @field_validator('position', mode='before')
    @classmethod
    def coerce_position(cls, v: Any) -> Optional[int]:
        try:
            return int(v) if v is not None else None
        except (TypeError, ValueError):
            return None


class ValidationReport(BaseModel):
    """Structural and referential problems found in a wireframe document"""
    isValid: bool
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class WireframeResult(BaseModel):
    """
    Successful pipeline outcome.

    ``success`` is True whenever a document was parsed; ``validation.isValid``
    tells whether it passed the structural checks.
    """
    success: bool = True
    wireframe: Any
    validation: ValidationReport
    metadata: Dict[str, Any] = Field(default_factory=dict)


class WorkflowResult(BaseModel):
    """Flat list of workflow screens, returned as generated"""
    workflow: List[Any]
    metadata: Dict[str, Any] = Field(default_factory=dict)


class ClarifyingQuestion(BaseModel):
    question: str
    options: List[str] = Field(default_factory=list)


class QuestionAnswer(BaseModel):
    question: str
    answer: str
