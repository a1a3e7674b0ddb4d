"""
Workflow (pages) generation: description to a flat list of screens.
"""
import time
from typing import Optional

from app.llm.base import BaseLLMProvider
from app.models.schemas.wireframe import WorkflowResult
from app.services.generation.prompt_builder import build_workflow_prompt
from app.services.generation.response_parser import UnparsableJsonError, parse_model_json
from app.utils.logging import get_logger, trace_async

logger = get_logger(__name__)


class WorkflowGenerator:
    """Shares the generation backend with the wireframe pipeline, no nested validation."""

    def __init__(self, provider: BaseLLMProvider):
        self.provider = provider

    @trace_async("workflow.generation")
    async def generate(self, description: Optional[str]) -> WorkflowResult:
        """
        Raises:
            GenerationError: Backend unreachable or erroring
            UnparsableJsonError: Reply is not a non-empty JSON array
        """
        start = time.monotonic()
        response = await self.provider.complete(build_workflow_prompt(description))

        workflow, repaired = parse_model_json(response.content, expect=list)
        if not workflow:
            raise UnparsableJsonError("Model returned an empty workflow", candidate=response.content)

        logger.info(
            "workflow.generation.completed",
            extra={"screens": len(workflow), "repaired": repaired}
        )

        return WorkflowResult(
            workflow=workflow,
            metadata={
                "provider": self.provider.get_provider_type().value,
                "model": response.model,
                "durationMs": int((time.monotonic() - start) * 1000),
                "repaired": repaired,
            },
        )
