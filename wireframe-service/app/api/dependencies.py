"""
FastAPI dependencies for the generation services.

The backend client is created once per process; tests replace it through
``app.dependency_overrides[get_provider]``.
"""
from functools import lru_cache

from fastapi import Depends

from app.llm import BaseLLMProvider, create_provider
from app.services.generation import DescriptionRefiner, WireframeGenerator, WorkflowGenerator


@lru_cache()
def get_provider() -> BaseLLMProvider:
    return create_provider()


def get_wireframe_generator(provider: BaseLLMProvider = Depends(get_provider)) -> WireframeGenerator:
    return WireframeGenerator(provider)


def get_workflow_generator(provider: BaseLLMProvider = Depends(get_provider)) -> WorkflowGenerator:
    return WorkflowGenerator(provider)


def get_description_refiner(provider: BaseLLMProvider = Depends(get_provider)) -> DescriptionRefiner:
    return DescriptionRefiner(provider)
