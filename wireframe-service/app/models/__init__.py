"""
Models package.

Exports:
- schemas: vocabularies and data models
- prompts: prompt templates
"""

from .schemas import (
    WorkflowScreen,
    ValidationReport,
    WireframeResult,
    WorkflowResult,
    ClarifyingQuestion,
    QuestionAnswer,
)
from .prompts import prompts, PromptTemplate, PromptLibrary

__all__ = [
    'WorkflowScreen',
    'ValidationReport',
    'WireframeResult',
    'WorkflowResult',
    'ClarifyingQuestion',
    'QuestionAnswer',
    'prompts',
    'PromptTemplate',
    'PromptLibrary',
]
