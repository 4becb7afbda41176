from ebookstudio.architecture import build_outline
from ebookstudio.discovery import build_insights
from ebookstudio.editorial import (
    ACTION_STEPS,
    RESONANCES,
    build_hero_hook,
    craft_action_plan,
    craft_closing,
    craft_highlights,
    rewrite_summary,
)
from ebookstudio.models import Chapter
from ebookstudio.weaver import craft_chapter, target_paragraphs, weave_chapters

from conftest import make_brief


def test_insights_pick_from_each_pool(brief):
    insights = build_insights(brief, 0)

    assert len(insights) == 4
    assert insights[0] == (
        "Signal clusters reveal ecosystem orchestration replacing siloed automation "
        "as a defining opportunity."
    )
    assert insights[1].startswith("Successful teams choreograph story-driven dashboards")
    assert insights[2] == (
        "Emotional voltage comes from addressing the relief of moving from chaotic "
        "brainstorming to guided flow."
    )
    assert insights[3].endswith("shrink the distance between concept and launch.")


def test_outline_titles_and_summaries(brief):
    outline = build_outline(brief, 0)

    assert [chapter.title for chapter in outline] == [
        "Chapter 1: Scaling The Narrative",
        "Chapter 2: Momentum Mechanics",
        "Chapter 3: Experiments In Motion",
    ]
    assert outline[0].summary == (
        "Igniting testing systems by weaving experience craft with clean structure "
        "and actionable breakdowns."
    )
    assert outline[1].summary.startswith("Amplifying testing systems by weaving narrative intelligence")
    assert all(chapter.content == () for chapter in outline)


def test_outline_length_is_clamped():
    assert len(build_outline(make_brief(chapters=1), 5)) == 3
    assert len(build_outline(make_brief(chapters=99), 5)) == 12
    assert len(build_outline(make_brief(chapters=7), 5)) == 7


def test_target_paragraphs_rounds_half_up():
    assert target_paragraphs(200) == 3
    assert target_paragraphs(450) == 3
    assert target_paragraphs(630) == 4
    assert target_paragraphs(810) == 5
    assert target_paragraphs(1000) == 6


def test_craft_chapter_fills_content_and_spotlight(brief):
    chapter = craft_chapter(brief, Chapter(title="Chapter 1: X", summary="S"), 0, 0)

    assert chapter.title == "Chapter 1: X"
    assert len(chapter.content) == 3
    assert chapter.content[0] == (
        "The engineers in this chapter confront the myths around testing systems. "
        "Momentum leaks out when creators can't see their fingerprints across the system."
    )
    assert chapter.spotlight == (
        "Agent Spotlight: Pair a Pattern Archivist with a Momentum Coach to orchestrate this move."
    )


def test_craft_chapter_truncates_from_the_end():
    outline_chapter = Chapter(title="Chapter 1: X", summary="S")
    full = craft_chapter(make_brief(words_per_chapter=1000), outline_chapter, 2, 40)
    short = craft_chapter(make_brief(words_per_chapter=630), outline_chapter, 2, 40)

    assert len(full.content) == 6
    assert short.content == full.content[:4]
    assert full.content[4].startswith("Next move:")
    assert full.content[5].startswith("Reflection prompt:")


def test_craft_chapter_honours_brief_text():
    brief = make_brief(brief="Keep it human.")
    chapter = craft_chapter(brief, Chapter(title="T", summary="S"), 0, 0)

    assert chapter.content[2].endswith("Throughout, we honour the brief: Keep it human.")


def test_weave_chapters_varies_by_index(brief):
    chapters = weave_chapters(brief, build_outline(brief, 0), 0)

    assert len(chapters) == 3
    assert len({chapter.content for chapter in chapters}) > 1


def test_rewrite_summary_replaces_first_matches_only():
    assert rewrite_summary("This chapter shows how we build what we need") == (
        "the work shows how teams build what we need"
    )
    assert rewrite_summary("Mapping by weaving craft") == "Mapping by teamsaving craft"


def test_highlights_cover_first_six_chapters():
    brief = make_brief(chapters=8)
    chapters = build_outline(brief, 3)
    highlights = craft_highlights(brief, chapters)

    assert len(highlights) == 6
    assert highlights[0].startswith("Momentum multiplies once")
    assert highlights[0].endswith("so engineers can move faster with testing systems.")


def test_highlights_for_short_outline(brief):
    highlights = craft_highlights(brief, build_outline(brief, 0))

    assert len(highlights) == 3
    assert highlights[0].startswith("Teams stay calibrated because Igniting testing systems")


def test_action_plan_has_five_steps(brief):
    steps = craft_action_plan(brief, 0)

    assert len(steps) == 5
    assert steps == [ACTION_STEPS[0]] * 5


def test_closing_and_hero_hook(brief):
    assert craft_closing(brief, 2) == RESONANCES[2]
    assert build_hero_hook(brief, 0) == (
        "Imagine testing systems tuned to clean structure and actionable breakdowns, "
        "delivering momentum to engineers."
    )
