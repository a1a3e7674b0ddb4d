"""
Design flow endpoints.

POST /api/v1/design/process                - clarifying questions for a description
POST /api/v1/design/construct-description  - improved description from answers
POST /api/v1/design/generate-pages         - workflow (list of screens)
POST /api/v1/design/generate-wireframe     - wireframe document + validation report
"""
from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, List, Optional

from app.api.dependencies import (
    get_description_refiner,
    get_wireframe_generator,
    get_workflow_generator,
)
from app.models.schemas.wireframe import (
    ClarifyingQuestion,
    QuestionAnswer,
    WireframeResult,
    WorkflowScreen,
)
from app.services.generation import DescriptionRefiner, WireframeGenerator, WorkflowGenerator
from app.utils.logging import get_logger, log_context

router = APIRouter()
logger = get_logger(__name__)


def _strip_description(v: str) -> str:
    if not v.strip():
        raise ValueError("Description cannot be empty or whitespace")
    return v.strip()


# ============================================================================
# REQUEST / RESPONSE MODELS
# ============================================================================

class ProcessRequest(BaseModel):
    description: str = Field(..., min_length=1, max_length=5000)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        return _strip_description(v)


class ProcessResponse(BaseModel):
    message: str = "Description processed successfully"
    questions: List[ClarifyingQuestion]


class ConstructDescriptionRequest(BaseModel):
    description: str = Field(..., min_length=1, max_length=5000)
    answers: List[QuestionAnswer]

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        return _strip_description(v)


class ConstructDescriptionResponse(BaseModel):
    message: str = "Constructed better description successfully"
    improvedDescription: str


class GeneratePagesRequest(BaseModel):
    description: str = Field(..., min_length=1, max_length=10000)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        return _strip_description(v)


class GeneratePagesResponse(BaseModel):
    success: bool = True
    data: Dict[str, List[Any]]
    metadata: Dict[str, Any] = Field(default_factory=dict)


class GenerateWireframeRequest(BaseModel):
    improvedDescription: str = Field(..., min_length=1, max_length=10000)
    workflow: List[WorkflowScreen] = Field(default_factory=list)
    targetScreenIndex: Optional[int] = None

    @field_validator("improvedDescription")
    @classmethod
    def validate_description(cls, v: str) -> str:
        return _strip_description(v)

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "improvedDescription": "A drone booking app for aerial photography",
            "workflow": [
                {"id": "dashboard", "title": "Dashboard", "position": 1,
                 "isStartPoint": True, "nextScreens": ["login"]}
            ],
            "targetScreenIndex": 0
        }
    })


class WireframeResponse(WireframeResult):
    message: str = "Wireframe generated successfully"


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post("/process", response_model=ProcessResponse)
async def process_description(
    request: ProcessRequest,
    refiner: DescriptionRefiner = Depends(get_description_refiner),
) -> ProcessResponse:
    with log_context(operation="process_description"):
        questions = await refiner.generate_questions(request.description)
        return ProcessResponse(questions=questions)


@router.post("/construct-description", response_model=ConstructDescriptionResponse)
async def construct_description(
    request: ConstructDescriptionRequest,
    refiner: DescriptionRefiner = Depends(get_description_refiner),
) -> ConstructDescriptionResponse:
    with log_context(operation="construct_description"):
        improved = await refiner.improve_description(request.description, request.answers)
        return ConstructDescriptionResponse(improvedDescription=improved)


@router.post("/generate-pages", response_model=GeneratePagesResponse)
async def generate_pages(
    request: GeneratePagesRequest,
    generator: WorkflowGenerator = Depends(get_workflow_generator),
) -> GeneratePagesResponse:
    with log_context(operation="generate_pages"):
        result = await generator.generate(request.description)
        return GeneratePagesResponse(data={"workflow": result.workflow}, metadata=result.metadata)


@router.post("/generate-wireframe", response_model=WireframeResponse)
async def generate_wireframe(
    request: GenerateWireframeRequest,
    generator: WireframeGenerator = Depends(get_wireframe_generator),
) -> WireframeResponse:
    """
    Returns 200 with ``validation.isValid == false`` when the document has
    structural problems; only backend and parse failures are HTTP errors.
    """
    with log_context(operation="generate_wireframe", target_screen_index=request.targetScreenIndex):
        result = await generator.generate(
            request.improvedDescription,
            workflow=request.workflow,
            target_screen_index=request.targetScreenIndex,
        )

        logger.info(
            "http.wireframe.generated",
            extra={
                "is_valid": result.validation.isValid,
                "errors": len(result.validation.errors),
                "warnings": len(result.validation.warnings),
            }
        )

        return WireframeResponse(**result.model_dump())
