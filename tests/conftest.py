import pytest

from ebookstudio.models import Brief


def make_brief(**changes):
    fields = {
        "title": "Test",
        "author": "Tester",
        "topic": "testing systems",
        "audience": "Engineers",
        "tone": "practical",
        "chapters": 3,
        "words_per_chapter": 200,
        "brief": "",
        "include_highlights": True,
        "include_action_plan": True,
    }
    fields.update(changes)
    return Brief(**fields)


@pytest.fixture
def brief():
    return make_brief()
