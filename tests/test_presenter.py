"""Tests for rendering decks to PowerPoint."""

import os

import pytest
from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.enum.text import PP_ALIGN
from pptx.oxml.ns import qn
from pptx.util import Pt

from patterns_deck.builder import DeckBuilder
from patterns_deck.presenter import (
    MARGIN,
    SLIDE_WIDTH,
    SlideRenderer,
    render_presentation,
    save_presentation,
    text_lines,
)


@pytest.fixture
def prs(deck, theme):
    return render_presentation(deck, theme)


@pytest.fixture
def small_prs(small_deck, theme):
    return render_presentation(small_deck, theme)


class TestDeckRendering:
    """The design patterns deck rendered with the venonat theme."""

    def test_one_pptx_slide_per_deck_slide(self, deck, prs):
        assert len(prs.slides) == len(deck.slides) == 29

    def test_core_title(self, prs):
        assert prs.core_properties.title == "Design patterns"

    def test_background_from_theme(self, prs):
        for slide in prs.slides:
            assert slide.background.fill.fore_color.rgb == RGBColor(0x62, 0x4A, 0x7B)

    def test_one_shape_per_content_node(self, deck, prs):
        assert [len(s.shapes) for s in prs.slides] == [len(s.content) for s in deck.slides]

    def test_first_slide_title(self, prs):
        shape = prs.slides[0].shapes[0]
        assert shape.text_frame.text == "Design patterns in CardApp"
        paragraph = shape.text_frame.paragraphs[0]
        assert paragraph.alignment == PP_ALIGN.CENTER
        font = paragraph.runs[0].font
        assert font.size == Pt(40)
        assert font.bold is True
        assert font.name == "Calibri"
        assert font.color.rgb == RGBColor(0xFF, 0x5A, 0x5A)

    def test_presenter_notes(self, prs):
        first = prs.slides[0]
        assert first.has_notes_slide
        assert first.notes_slide.notes_text_frame.text == "Here are some presenter notes"
        assert not prs.slides[2].has_notes_slide

    def test_title_with_subtitle(self, prs):
        paragraphs = prs.slides[2].shapes[0].text_frame.paragraphs
        assert [p.text for p in paragraphs] == ["Design patterns", "Head first Design Patterns"]
        subtitle_font = paragraphs[1].runs[0].font
        assert subtitle_font.italic is True
        assert subtitle_font.size == Pt(25)
        assert subtitle_font.color.rgb == RGBColor(0xA4, 0x8B, 0xBD)

    def test_empty_subtitle_is_not_drawn(self, prs):
        paragraphs = prs.slides[3].shapes[0].text_frame.paragraphs
        assert [p.text for p in paragraphs] == ["Observer Pattern"]

    def test_bullets(self, prs):
        paragraphs = prs.slides[2].shapes[1].text_frame.paragraphs
        assert len(paragraphs) == 3
        for p in paragraphs:
            assert p._p.pPr.find(qn("a:buChar")).get("char") == "•"
            assert p.alignment == PP_ALIGN.LEFT

    def test_inline_code_uses_code_font(self, prs):
        runs = prs.slides[4].shapes[1].text_frame.paragraphs[0].runs
        assert [r.text for r in runs][:2] == ["In iOS, ", "NotificationCenter"]
        assert runs[0].font.name == "Calibri"
        assert runs[1].font.name == "Courier New"

    def test_code_block_one_paragraph_per_line(self, deck, prs):
        block = deck.slides[4].content[2]
        frame = prs.slides[4].shapes[2].text_frame
        assert [p.text for p in frame.paragraphs] == list(block.lines)
        font = frame.paragraphs[0].runs[0].font
        assert font.name == "Courier New"
        assert font.size == Pt(13)

    def test_top_leading_slides_start_at_margin(self, prs):
        assert prs.slides[2].shapes[0].top == MARGIN

    def test_centered_slides_are_pushed_down(self, prs):
        assert prs.slides[0].shapes[0].top > MARGIN

    def test_shapes_follow_node_order(self, prs):
        tops = [shape.top for shape in prs.slides[4].shapes]
        assert tops == sorted(tops)

    def test_font_scale(self, deck, theme):
        prs = render_presentation(deck, theme, font_scale=1.0)
        assert prs.slides[0].shapes[0].text_frame.paragraphs[0].runs[0].font.size == Pt(80)


class TestNodeRendering:
    """Node kinds the literal deck does not exercise."""

    def test_subtitle_node(self, small_prs):
        shape = small_prs.slides[1].shapes[0]
        assert shape.text_frame.text == "A subtitle"
        assert shape.text_frame.paragraphs[0].runs[0].font.italic is True

    def test_numbered_bullets(self, small_prs):
        paragraphs = small_prs.slides[1].shapes[1].text_frame.paragraphs
        for p in paragraphs:
            assert p._p.pPr.find(qn("a:buAutoNum")).get("type") == "arabicPeriod"

    def test_highlighted_code_line(self, small_prs):
        frame = small_prs.slides[1].shapes[3].text_frame
        plain, marked, _ = [p.runs[0] for p in frame.paragraphs]

        assert plain._r.rPr.find(qn("a:highlight")) is None
        highlight = marked._r.rPr.find(qn("a:highlight"))
        assert highlight.find(qn("a:srgbClr")).get("val") == "312952"
        assert marked.font.bold is True
        assert plain.font.bold is False

        children = [child.tag for child in marked._r.rPr]
        assert children.index(qn("a:highlight")) < children.index(qn("a:latin"))

    def test_raw_content(self, small_prs):
        shape = small_prs.slides[2].shapes[0]
        assert shape.text_frame.text == "RAW"
        run = shape.text_frame.paragraphs[0].runs[0]
        assert run.font.size == Pt(50)
        assert run.font.name == "Courier New"
        assert shape.text_frame.margin_left == Pt(10)
        assert abs(shape.left + shape.width / 2 - SLIDE_WIDTH / 2) <= 1

    def test_raw_border(self, small_prs):
        shape = small_prs.slides[2].shapes[0]
        assert shape.line.width == Pt(5)
        assert shape.line.color.rgb == RGBColor(0xFF, 0xFF, 0xFF)
        srgb = shape._element.spPr.ln.find(qn("a:solidFill")).find(qn("a:srgbClr"))
        assert srgb.find(qn("a:alpha")).get("val") == "50000"


def long_listing_deck(lines):
    builder = DeckBuilder("Long listing")
    builder.slide() \
        .title("Listing") \
        .code("swift", "\n".join(f"let value{i} = {i}" for i in range(lines)))
    return builder.build()


class TestFitToSlide:
    """Crowded slides shrink until the stack stays inside the margins."""

    def test_every_shape_inside_the_slide(self, prs):
        bottom = prs.slide_height - MARGIN
        for number, slide in enumerate(prs.slides, start=1):
            for shape in slide.shapes:
                assert shape.top >= MARGIN, f"slide {number}"
                assert shape.top + shape.height <= bottom, f"slide {number}"

    def test_long_listing_shrinks_code_only(self, theme):
        prs = render_presentation(long_listing_deck(40), theme)
        title, code = prs.slides[0].shapes
        assert title.text_frame.paragraphs[0].runs[0].font.size == Pt(40)
        assert code.text_frame.paragraphs[0].runs[0].font.size < Pt(13)
        assert code.top + code.height <= prs.slide_height - MARGIN

    def test_very_long_listing_shrinks_everything(self, theme):
        prs = render_presentation(long_listing_deck(200), theme)
        title, code = prs.slides[0].shapes
        assert title.text_frame.paragraphs[0].runs[0].font.size < Pt(40)
        assert code.top + code.height <= prs.slide_height - MARGIN

    def test_short_slides_keep_the_deck_scale(self, theme):
        renderer = SlideRenderer(theme, font_scale=0.5)
        assert renderer.fit_scales(long_listing_deck(3).slides[0]) == [0.5, 0.5]


class TestTextLines:

    def test_short_text_is_one_line(self):
        assert text_lines("short", 25, SLIDE_WIDTH) == 1

    def test_explicit_newlines_count(self):
        assert text_lines("a\nb\n\nc", 25, SLIDE_WIDTH) == 4

    def test_long_text_wraps(self):
        assert text_lines("x" * 500, 25, SLIDE_WIDTH) > 1


class TestSavePresentation:

    def test_save_and_reload(self, prs, tmp_path):
        path = save_presentation(prs, str(tmp_path / "out"), "design_patterns")
        assert os.path.exists(path)
        assert path.endswith(".pptx")
        reloaded = Presentation(path)
        assert len(reloaded.slides) == 29
        assert reloaded.core_properties.title == "Design patterns"
