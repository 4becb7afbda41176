import pytest

from ebookstudio.document import (
    assemble_ebook,
    build_markdown,
    ebook_to_dict,
    slugify,
    validate_ebook_data,
)
from ebookstudio.models import Chapter, Ebook
from ebookstudio.pipeline import EbookStudio

from conftest import make_brief


def small_ebook(**changes):
    fields = {
        "title": "T",
        "subtitle": "S",
        "author": "A",
        "theme": "topic",
        "audience": "Aud",
        "positioning": "P",
        "chapters": (Chapter(title="C1", summary="sum", content=("p1", "p2"), spotlight="spot"),),
        "highlights": (),
        "action_plan": (),
        "closing": "close",
        "hero_hook": "H",
    }
    fields.update(changes)
    return Ebook(**fields)


def test_build_markdown_drops_empty_lines():
    assert build_markdown(small_ebook()) == (
        "# T\n_S_\n**Author:** A\n**Audience:** Aud\n**Positioning:** P\n"
        "## Hero Hook\nH\n## Table of Contents\n1. C1\n"
        "## C1\n_sum_\np1\np2\n> spot\n"
        "\n## Closing Thoughts\n\nclose"
    )


def test_build_markdown_optional_sections():
    markdown = build_markdown(small_ebook(highlights=("h1",), action_plan=("a1", "a2")))

    assert "## Highlights\n- h1\n\n## Action Plan\n\n1. a1\n2. a2\n" in markdown


def test_assemble_ebook_applies_fallbacks():
    brief = make_brief(title="   ", author="")
    ebook = assemble_ebook(brief, [], [], [], "close", "hook")

    assert ebook.title == "Untitled Ebook"
    assert ebook.author == "Unknown Author"
    assert ebook.subtitle == "An agentic playbook for testing systems"
    assert ebook.positioning == "Crafted for engineers with a practical strategist cadence."


def test_titles_appear_once_in_toc_and_headings():
    result = EbookStudio(pace=0).run(make_brief(chapters=9, words_per_chapter=700))
    lines = build_markdown(result.ebook).split("\n")
    titles = [chapter.title for chapter in result.ebook.chapters]

    toc = [line for line in lines if line.split(". ", 1)[-1] in titles and not line.startswith("#")]
    headings = [line[3:] for line in lines if line.startswith("## Chapter")]

    assert toc == [f"{number}. {title}" for number, title in enumerate(titles, 1)]
    assert headings == titles


def test_optional_sections_omitted_when_disabled():
    brief = make_brief(include_highlights=False, include_action_plan=False)
    ebook = EbookStudio(pace=0).run(brief).ebook
    markdown = build_markdown(ebook)

    assert ebook.highlights == ()
    assert ebook.action_plan == ()
    assert "## Highlights" not in markdown
    assert "## Action Plan" not in markdown
    assert "## Closing Thoughts" in markdown


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Agents of Imagination!", "agents-of-imagination"),
        ("", "ebook"),
        ("!!!", "ebook"),
        ("  Hello -- World  ", "hello-world"),
        ("x" * 80, "x" * 60),
    ],
)
def test_slugify(text, expected):
    assert slugify(text) == expected


def test_ebook_dict_matches_schema():
    pytest.importorskip("jsonschema")
    ebook = EbookStudio(pace=0).run(make_brief()).ebook
    data = ebook_to_dict(ebook)

    validate_ebook_data(data)
    assert isinstance(data["chapters"][0]["content"], list)
    assert data["hero_hook"] == ebook.hero_hook


def test_validate_ebook_data_rejects_bad_shape():
    pytest.importorskip("jsonschema")
    data = ebook_to_dict(EbookStudio(pace=0).run(make_brief()).ebook)
    data["chapters"] = data["chapters"][:1]

    with pytest.raises(ValueError, match="chapters"):
        validate_ebook_data(data)
