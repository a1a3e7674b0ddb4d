"""
Description refinement: clarifying questions and the improved description
built from the user's answers.
"""
from typing import List, Optional

from app.llm.base import BaseLLMProvider
from app.models.schemas.wireframe import ClarifyingQuestion, QuestionAnswer
from app.services.generation.prompt_builder import (
    build_improve_description_prompt,
    build_questions_prompt,
)
from app.services.generation.response_parser import UnparsableJsonError, parse_model_json
from app.utils.logging import get_logger, trace_async

logger = get_logger(__name__)


class DescriptionRefiner:

    def __init__(self, provider: BaseLLMProvider):
        self.provider = provider

    @trace_async("description.questions")
    async def generate_questions(self, description: Optional[str]) -> List[ClarifyingQuestion]:
        """
        Ask the backend for multiple-choice clarifying questions.

        Entries without a question text are dropped; option values are
        coerced to strings.

        Raises:
            GenerationError: Backend unreachable or erroring
            UnparsableJsonError: No usable question in the reply
        """
        response = await self.provider.complete(build_questions_prompt(description))
        items, _ = parse_model_json(response.content, expect=list)

        questions = []
        for item in items:
            if not isinstance(item, dict) or not isinstance(item.get("question"), str):
                continue
            options = item.get("options")
            questions.append(ClarifyingQuestion(
                question=item["question"],
                options=[str(o) for o in options] if isinstance(options, list) else [],
            ))

        if not questions:
            raise UnparsableJsonError("Model returned no clarifying questions", candidate=response.content)

        logger.info("description.questions.generated", extra={"count": len(questions)})
        return questions

    @trace_async("description.improve")
    async def improve_description(
        self,
        description: Optional[str],
        answers: List[QuestionAnswer],
    ) -> str:
        response = await self.provider.complete(build_improve_description_prompt(description, answers))
        improved = response.content.strip().strip('"').strip()

        logger.info(
            "description.improve.completed",
            extra={"answers": len(answers), "length": len(improved)}
        )
        return improved
