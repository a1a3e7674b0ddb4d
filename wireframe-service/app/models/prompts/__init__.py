"""
Prompt templates for the wireframe service.
"""
from .templates import (
    PromptTemplate,
    PromptLibrary,
)

# Create an instance of PromptLibrary
prompts = PromptLibrary()

__all__ = [
    'PromptTemplate',
    'PromptLibrary',
    'prompts'
]
