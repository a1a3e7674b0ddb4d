"""
Generation services - description refinement, workflow and wireframe generation.
"""

from app.services.generation.response_parser import (
    UnparsableJsonError,
    extract_json,
    extract_json_array,
    repair_json,
    parse_model_json,
)

from app.services.generation.defaults import (
    defaults_applier,
    DefaultsApplier
)

from app.services.generation.wireframe_validator import (
    wireframe_validator,
    WireframeValidator
)

from app.services.generation.wireframe_generator import (
    WireframeGenerator,
    PipelineStage
)

from app.services.generation.workflow_generator import WorkflowGenerator
from app.services.generation.description_refiner import DescriptionRefiner

__all__ = [
    'UnparsableJsonError',
    'extract_json',
    'extract_json_array',
    'repair_json',
    'parse_model_json',
    'defaults_applier',
    'DefaultsApplier',
    'wireframe_validator',
    'WireframeValidator',
    'WireframeGenerator',
    'PipelineStage',
    'WorkflowGenerator',
    'DescriptionRefiner',
]
