import pytest

from app.models.schemas.wireframe import QuestionAnswer
from app.services.generation.description_refiner import DescriptionRefiner
from app.services.generation.response_parser import UnparsableJsonError
from app.services.generation.workflow_generator import WorkflowGenerator


async def test_workflow_is_returned_as_generated(fake_provider):
    reply = 'Here you go:\n[{"id": "home", "title": "Home", "nextScreens": ["search"]}, {"id": "search"}]'
    provider = fake_provider(reply)

    result = await WorkflowGenerator(provider).generate("plan a trip")

    assert [s["id"] for s in result.workflow] == ["home", "search"]
    assert result.metadata["repaired"] is False
    assert "plan a trip" in provider.prompts[0]


async def test_workflow_must_be_non_empty_array(fake_provider):
    with pytest.raises(UnparsableJsonError):
        await WorkflowGenerator(fake_provider("[]")).generate("plan a trip")

    with pytest.raises(UnparsableJsonError):
        await WorkflowGenerator(fake_provider('{"screens": []}')).generate("plan a trip")


async def test_questions_are_parsed_and_cleaned(fake_provider):
    reply = """[
      {"question": "Which platform?", "options": ["iOS", "Android", 3]},
      {"question": "Any brand colours?"},
      {"options": ["orphan"]},
    ]"""

    questions = await DescriptionRefiner(fake_provider(reply)).generate_questions("a fitness app")

    assert [q.question for q in questions] == ["Which platform?", "Any brand colours?"]
    assert questions[0].options == ["iOS", "Android", "3"]
    assert questions[1].options == []


async def test_no_usable_questions_is_fatal(fake_provider):
    with pytest.raises(UnparsableJsonError):
        await DescriptionRefiner(fake_provider('[{"text": "?"}]')).generate_questions("a fitness app")


async def test_improve_description_returns_backend_text(fake_provider):
    provider = fake_provider('  "A fitness app for runners with weekly plans."  ')
    answers = [QuestionAnswer(question="Audience?", answer="Runners")]

    improved = await DescriptionRefiner(provider).improve_description("a fitness app", answers)

    assert improved == "A fitness app for runners with weekly plans."
    assert "A: Runners" in provider.prompts[0]
