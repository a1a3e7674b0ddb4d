"""
Prompt templates for the generation backend.

The backend is a plain text-completion endpoint, so every template renders
to a single prompt string.
"""

from typing import Any
from dataclasses import dataclass


@dataclass
class PromptTemplate:
    """
    Reusable prompt template.
    """
    template: str

    def format(self, **kwargs: Any) -> str:
        return self.template.format(**kwargs).strip() + "\n"


class PromptLibrary:
    """
    Collection of all prompt templates used by the wireframe service.
    """

    # ======================================================================
    # SHARED STRICT JSON RULES
    # ======================================================================

    STRICT_JSON_RULES = """
CRITICAL OUTPUT RULES (MANDATORY):
1. Output MUST be a SINGLE valid JSON value
2. NO comments, NO explanations
3. NO text before or after JSON
4. Use DOUBLE QUOTES for all strings and keys
5. NO trailing commas
"""

    # ======================================================================
    # WIREFRAME GENERATION
    # ======================================================================

    WIREFRAME_GENERATE = PromptTemplate(
        template=f"""
ROLE: You are a specialized UI wireframe generator for mobile apps using Ant Design components.

OBJECTIVE: Generate a robust, validated JSON structure for mobile app wireframes.

{STRICT_JSON_RULES}

CRITICAL REQUIREMENTS:
1. Use ONLY these component types: {{component_types}}
2. Use ONLY these navigation types: {{nav_types}}
3. Use ONLY these icons: {{icons}}
4. All screen references must be valid
5. All required component dataProperties must be present
6. Follow kebab-case for screen names, camelCase for properties
7. Every component has "id", "type", "dataProperties" (content) and "designProperties" (styling)

COMPONENT SPECIFICATIONS (required dataProperties marked with *):
{{component_specs}}

THEME ROLES (hex colors): {{theme_roles}}

REQUIRED JSON STRUCTURE:
{{example_document}}

VALIDATION RULES:
- All navigation screen references must exist in screens array
- All component "dataProperties.screen" references must exist in screens array
- Screen names must be unique and use kebab-case
- Theme colors must be valid hex codes
- Icons must be from the approved list
{{workflow_section}}{{target_section}}
DESCRIPTION: {{description}}

Return ONLY the JSON structure. Ensure all validations pass.
"""
    )

    WORKFLOW_CONTEXT = PromptTemplate(
        template="""
APP WORKFLOW (the complete user journey, for context):
{workflow_lines}
"""
    )

    TARGET_SCREEN_CONSTRAINTS = PromptTemplate(
        template="""
SINGLE SCREEN MODE (MANDATORY):
Generate the wireframe for EXACTLY ONE screen. The "screens" array MUST contain exactly one entry:
- "name": {screen_id}
- "title": {title}
- "description": {description}
- "workflowPosition": {position}
- "isStartPoint": true
- "nextScreens": {next_screens}
The first item of "app.nav.items" MUST have "screen": {screen_id}.
Buttons may navigate only to {screen_id}; list follow-up screens in "nextScreens" instead of "dataProperties.screen".
"""
    )

    # ======================================================================
    # WORKFLOW (PAGES) GENERATION
    # ======================================================================

    WORKFLOW_GENERATE = PromptTemplate(
        template="""
You are a specialized AI tasked with converting user requirements into a detailed mobile app workflow diagram.
The user has provided the following design description and preferences:

DESIGN DESCRIPTION and USER PREFERENCES:
{description}

YOUR TASK:
Generate a detailed workflow for a mobile application based on the above requirements.

RESPONSE FORMAT:
Respond ONLY with a valid JSON array of workflow screens. Each screen is a JSON object with the following structure:

[
  {{
    "id": "unique-identifier",
    "title": "Screen Title",
    "description": "A detailed description of this screen's purpose and functionality (40-60 words)",
    "position": 1,
    "isStartPoint": true,
    "nextScreens": ["id of screen(s) that follow this one (must match 'id' field of other screens)"],
    "previousScreens": ["id-of-previous-screen"]
  }}
]

IMPORTANT GUIDELINES:
1. Create between 5-9 screens that form a logical user journey
2. First screen should have isStartPoint: true
3. The title should be short (1-3 words)
4. The description should clearly explain what the screen does
5. Connections between screens should make logical sense
6. The workflow should begin with a dashboard/home screen and follow standard mobile app patterns
7. Your response must be a parseable JSON array

Output the JSON array only, with no additional text before or after it.
"""
    )

    # ======================================================================
    # DESCRIPTION REFINEMENT
    # ======================================================================

    CLARIFYING_QUESTIONS = PromptTemplate(
        template="""
You are a helpful assistant for a design generator app.
Given the following user description, generate 4-5 clarifying questions to better understand the design requirements.
For each question, provide 3-5 multiple-choice options.
Return your response as a JSON array in the following format:
[
  {{
    "question": "What type of design do you want?",
    "options": ["Website", "Mobile App", "Logo", "Poster"]
  }}
]
User description: "{description}"
"""
    )

    IMPROVE_DESCRIPTION = PromptTemplate(
        template="""
You are a helpful assistant for a design generator app.
Given the following user description and their answers to clarifying questions, construct a more complete and well-structured design description.

User description: "{description}"

Answers to clarifying questions:
{answers}

Return only the improved description as a string.
"""
    )
