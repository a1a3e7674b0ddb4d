"""
Wireframe Generator - description to validated wireframe document.

Pipeline per call:
    Building -> AwaitingModel -> Extracting -> {Parsed | Repairing -> {Parsed | Failed}}
    -> Defaulting -> Validating -> Done

``Failed`` (UnparsableJsonError) and a backend GenerationError are the only
fatal outcomes. A document that fails validation is still returned, with
its report.
"""
import time
import uuid
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple

from app.llm.base import BaseLLMProvider
from app.models.schemas.wireframe import WireframeResult
from app.services.generation.defaults import DefaultsApplier
from app.services.generation.prompt_builder import ScreenLike, build_wireframe_prompt
from app.services.generation.response_parser import (
    UnparsableJsonError,
    extract_json,
    loads_with_repair,
)
from app.services.generation.wireframe_validator import WireframeValidator
from app.utils.logging import get_logger, log_context, trace_async

logger = get_logger(__name__)


class PipelineStage(str, Enum):
    BUILDING = "building"
    AWAITING_MODEL = "awaiting_model"
    EXTRACTING = "extracting"
    REPAIRING = "repairing"
    PARSED = "parsed"
    FAILED = "failed"
    DEFAULTING = "defaulting"
    VALIDATING = "validating"
    DONE = "done"


def resolve_target_screen(
    workflow: Optional[Sequence[ScreenLike]],
    target_screen_index: Optional[int],
) -> Optional[ScreenLike]:
    """workflow[index] when the index is in range, otherwise no target."""
    if not workflow or target_screen_index is None:
        return None
    if 0 <= target_screen_index < len(workflow):
        return workflow[target_screen_index]
    return None


class WireframeGenerator:
    """
    Generates one wireframe document per call.

    Holds no per-call state: concurrent ``generate`` calls are independent
    and each makes exactly one backend request.
    """

    def __init__(
        self,
        provider: BaseLLMProvider,
        validator: Optional[WireframeValidator] = None,
        defaults: Optional[DefaultsApplier] = None,
    ):
        self.provider = provider
        self.validator = validator or WireframeValidator()
        self.defaults = defaults or DefaultsApplier()

    @trace_async("wireframe.generation")
    async def generate(
        self,
        description: str,
        workflow: Optional[Sequence[ScreenLike]] = None,
        target_screen_index: Optional[int] = None,
    ) -> WireframeResult:
        """
        Generate a wireframe document.

        Args:
            description: Natural-language app description
            workflow: Upstream workflow screens, used as journey context
            target_screen_index: Screen of ``workflow`` to generate; out of
                range or None generates the whole app

        Returns:
            WireframeResult, including when validation failed

        Raises:
            GenerationError: Backend unreachable or erroring
            UnparsableJsonError: Reply could not be parsed into a JSON object
        """
        generation_id = str(uuid.uuid4())
        start = time.monotonic()

        with log_context(generation_id=generation_id, operation="wireframe"):
            self._stage(PipelineStage.BUILDING)
            target = resolve_target_screen(workflow, target_screen_index)
            prompt = build_wireframe_prompt(
                description,
                workflow=workflow,
                target_screen=target,
                target_index=target_screen_index or 0,
            )
            logger.debug(
                "wireframe.prompt.built",
                extra={
                    "prompt_length": len(prompt),
                    "workflow_screens": len(workflow) if workflow else 0,
                    "single_screen": target is not None,
                }
            )

            self._stage(PipelineStage.AWAITING_MODEL)
            response = await self.provider.complete(prompt)

            self._stage(PipelineStage.EXTRACTING)
            candidate = extract_json(response.content)
            document, repaired = self._parse(candidate)

            self._stage(PipelineStage.DEFAULTING)
            self.defaults.apply(document, description, repaired=repaired)

            self._stage(PipelineStage.VALIDATING)
            report = self.validator.validate(document)

            duration_ms = int((time.monotonic() - start) * 1000)
            self._stage(PipelineStage.DONE, valid=report.isValid)

            if not report.isValid:
                logger.warning(
                    "wireframe.validation.failed",
                    extra={"errors": report.errors[:10], "warnings": len(report.warnings)}
                )

            return WireframeResult(
                success=True,
                wireframe=document,
                validation=report,
                metadata=self._result_metadata(generation_id, response, repaired, target, duration_ms),
            )

    def _parse(self, candidate: str) -> Tuple[Dict[str, Any], bool]:
        try:
            document, repaired = loads_with_repair(candidate)
        except UnparsableJsonError:
            self._stage(PipelineStage.FAILED)
            raise

        if repaired:
            self._stage(PipelineStage.REPAIRING)

        if not isinstance(document, dict):
            self._stage(PipelineStage.FAILED)
            raise UnparsableJsonError(
                f"Expected a JSON object, got {type(document).__name__}", candidate=candidate
            )

        self._stage(PipelineStage.PARSED, repaired=repaired)
        return document, repaired

    @staticmethod
    def _stage(stage: PipelineStage, **extra: Any) -> None:
        logger.debug("wireframe.pipeline.stage", extra={"stage": stage.value, **extra})

    def _result_metadata(
        self,
        generation_id: str,
        response: Any,
        repaired: bool,
        target: Optional[ScreenLike],
        duration_ms: int,
    ) -> Dict[str, Any]:
        target_id = None
        if target is not None:
            target_id = target.get("id") if isinstance(target, dict) else getattr(target, "id", None)

        return {
            "generationId": generation_id,
            "provider": self.provider.get_provider_type().value,
            "model": response.model,
            "tokensUsed": response.tokens_used,
            "durationMs": duration_ms,
            "repaired": repaired,
            "targetScreen": target_id,
        }
