"""
Hands a Deck and a Theme to python-pptx.

Each deck slide becomes one blank-layout slide. Content nodes are drawn as
text boxes stacked top to bottom in declaration order; ``center`` slides
get the stack vertically centered and their text center-aligned. Font
sizes in the theme are design-canvas points, multiplied by ``font_scale``
to fit a 13.333in x 7.5in slide.
"""
import logging
import math
import os
from typing import List
from lxml import etree
from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.enum.text import MSO_ANCHOR, PP_ALIGN
from pptx.oxml.ns import qn
from pptx.util import Inches, Pt

from patterns_deck.model import (
    BulletList,
    CodeBlock,
    Deck,
    FontSpec,
    Paragraph,
    RawContent,
    Slide,
    Subtitle,
    Theme,
    Title,
)
from patterns_deck.utils import (
    font_family,
    generate_timestamped_filename,
    hex_to_rgb,
    is_bold,
    split_inline_code,
)

logger = logging.getLogger(__name__)

SLIDE_WIDTH = Inches(13.333)
SLIDE_HEIGHT = Inches(7.5)
MARGIN = Inches(0.6)
GAP = Inches(0.2)
BLANK_LAYOUT = 6
LINE_HEIGHT = 1.2
# average glyph width as a fraction of the font size
CHAR_WIDTH = 0.5
BULLET_CHARS = {"bullet": "•", "dash": "-"}
# crowded slides: code shrinks first, down to this fraction of font_scale
MIN_CODE_SHRINK = 0.4
SHRINK_STEP = 0.9
MAX_SHRINK_STEPS = 100


def style_font(font, color: str, spec: FontSpec, font_scale: float) -> None:
    font.size = Pt(spec.size * font_scale)
    font.bold = is_bold(spec)
    font.italic = spec.italic
    font.name = font_family(spec)
    font.color.rgb = RGBColor(*hex_to_rgb(color))


def set_background(slide, color: str) -> None:
    fill = slide.background.fill
    fill.solid()
    fill.fore_color.rgb = RGBColor(*hex_to_rgb(color))


def set_bullet(paragraph, style: str) -> None:
    pPr = paragraph._p.get_or_add_pPr()
    pPr.set("marL", str(Inches(0.4)))
    pPr.set("indent", str(-Inches(0.3)))
    if style == "number":
        bullet = etree.SubElement(pPr, qn("a:buAutoNum"))
        bullet.set("type", "arabicPeriod")
    else:
        bullet = etree.SubElement(pPr, qn("a:buChar"))
        bullet.set("char", BULLET_CHARS[style])


def set_highlight(run, color: str) -> None:
    """Put a background highlight behind a run; a:highlight must precede a:latin."""
    rPr = run._r.get_or_add_rPr()
    highlight = etree.Element(qn("a:highlight"))
    srgb = etree.SubElement(highlight, qn("a:srgbClr"))
    srgb.set("val", color.lstrip("#").upper())
    latin = rPr.find(qn("a:latin"))
    if latin is not None:
        latin.addprevious(highlight)
    else:
        rPr.append(highlight)


def set_line_alpha(shape, opacity: float) -> None:
    srgb = shape._element.spPr.ln.find(qn("a:solidFill")).find(qn("a:srgbClr"))
    alpha = etree.SubElement(srgb, qn("a:alpha"))
    alpha.set("val", str(int(round(opacity * 100000))))


def text_lines(text: str, size_pt: float, width) -> int:
    per_line = max(1, int(width / max(1, Pt(size_pt * CHAR_WIDTH))))
    return sum(max(1, math.ceil(len(line) / per_line)) for line in text.split("\n"))


class SlideRenderer:

    def __init__(self, theme: Theme, font_scale: float = 0.5):
        self.theme = theme
        self.font_scale = font_scale
        self.width = SLIDE_WIDTH - 2 * MARGIN

    def block_height(self, text: str, spec: FontSpec, scale: float) -> int:
        size = spec.size * scale
        lines = text_lines(text, size, self.width)
        return int(Pt(size * LINE_HEIGHT * lines))

    def height(self, node, scale: float) -> int:
        theme = self.theme
        if isinstance(node, Title):
            height = self.block_height(node.text, theme.title.font, scale)
            if node.subtitle:
                height += self.block_height(node.subtitle, theme.subtitle.font, scale)
            return height
        if isinstance(node, Subtitle):
            return self.block_height(node.text, theme.subtitle.font, scale)
        if isinstance(node, BulletList):
            return sum(self.block_height(item, theme.body.font, scale) for item in node.items)
        if isinstance(node, Paragraph):
            return self.block_height(node.text, theme.body.font, scale)
        if isinstance(node, CodeBlock):
            return int(Pt(theme.code.font.size * scale * LINE_HEIGHT * len(node.lines)))
        if isinstance(node, RawContent):
            return int(Pt((node.font.size * LINE_HEIGHT + 2 * node.padding) * scale))
        raise TypeError(f"unsupported content node: {type(node).__name__}")

    def fit_scales(self, slide: Slide) -> List[float]:
        """
        Font scale per content node such that the stack fits between the
        top and bottom margins. Code blocks shrink first, down to
        MIN_CODE_SHRINK of the deck scale; after that every node shrinks.
        """
        available = SLIDE_HEIGHT - 2 * MARGIN - GAP * max(0, len(slide.content) - 1)
        floor = self.font_scale * MIN_CODE_SHRINK
        scales = [self.font_scale] * len(slide.content)
        for _ in range(MAX_SHRINK_STEPS):
            if sum(self.height(n, s) for n, s in zip(slide.content, scales)) <= available:
                break
            code_can_shrink = any(
                isinstance(n, CodeBlock) and s * SHRINK_STEP >= floor
                for n, s in zip(slide.content, scales)
            )
            scales = [
                s * SHRINK_STEP
                if not code_can_shrink or (isinstance(n, CodeBlock) and s * SHRINK_STEP >= floor)
                else s
                for n, s in zip(slide.content, scales)
            ]
        return scales

    def render(self, pptx_slide, slide: Slide) -> None:
        set_background(pptx_slide, self.theme.background)
        centered = slide.alignment == "center"
        scales = self.fit_scales(slide)
        heights = [self.height(node, scale) for node, scale in zip(slide.content, scales)]
        total = sum(heights) + GAP * max(0, len(heights) - 1)
        top = max(MARGIN, (SLIDE_HEIGHT - total) // 2) if centered else MARGIN
        for node, height, scale in zip(slide.content, heights, scales):
            self.draw(pptx_slide, node, int(top), height, centered, scale)
            top += height + GAP
        if slide.comment:
            pptx_slide.notes_slide.notes_text_frame.text = slide.comment

    def text_frame(self, pptx_slide, top: int, height: int):
        box = pptx_slide.shapes.add_textbox(MARGIN, top, self.width, height)
        tf = box.text_frame
        tf.word_wrap = True
        return tf

    def paragraphs(self, tf):
        """Yield the frame's first paragraph, then fresh ones."""
        yield tf.paragraphs[0]
        while True:
            yield tf.add_paragraph()

    def draw(self, pptx_slide, node, top: int, height: int, centered: bool, scale: float) -> None:
        theme = self.theme
        align = PP_ALIGN.CENTER if centered else PP_ALIGN.LEFT

        if isinstance(node, RawContent):
            self.draw_raw(pptx_slide, node, top, height, scale)
            return

        tf = self.text_frame(pptx_slide, top, height)
        paragraphs = self.paragraphs(tf)

        if isinstance(node, (Title, Subtitle)):
            lines = []
            if isinstance(node, Title):
                lines.append((node.text, theme.title))
                if node.subtitle:
                    lines.append((node.subtitle, theme.subtitle))
            else:
                lines.append((node.text, theme.subtitle))
            for text, fg in lines:
                p = next(paragraphs)
                p.alignment = align
                run = p.add_run()
                run.text = text
                style_font(run.font, fg.color, fg.font, scale)

        elif isinstance(node, BulletList):
            for item in node.items:
                p = next(paragraphs)
                p.alignment = align
                set_bullet(p, node.style)
                run = p.add_run()
                run.text = item
                style_font(run.font, theme.body.color, theme.body.font, scale)

        elif isinstance(node, Paragraph):
            p = next(paragraphs)
            p.alignment = align
            for text, is_code in split_inline_code(node.text):
                run = p.add_run()
                run.text = text
                style_font(run.font, theme.body.color, theme.body.font, scale)
                if is_code:
                    run.font.name = font_family(theme.code.font)

        elif isinstance(node, CodeBlock):
            tf.word_wrap = False
            highlighted = set(node.highlighted_lines)
            for number, line in enumerate(node.lines, start=1):
                p = next(paragraphs)
                p.alignment = PP_ALIGN.LEFT
                run = p.add_run()
                run.text = line
                if number in highlighted:
                    fg = theme.code_highlighted.foreground
                    style_font(run.font, fg.color, fg.font, scale)
                    set_highlight(run, theme.code_highlighted.background)
                else:
                    style_font(run.font, theme.code.color, theme.code.font, scale)

        else:
            raise TypeError(f"unsupported content node: {type(node).__name__}")

    def draw_raw(self, pptx_slide, node: RawContent, top: int, height: int, scale: float) -> None:
        size = node.font.size * scale
        padding = Pt(node.padding * scale)
        width = int(Pt(len(node.text) * size * 0.6)) + 2 * padding
        width = min(width, SLIDE_WIDTH - 2 * MARGIN)
        left = (SLIDE_WIDTH - width) // 2
        box = pptx_slide.shapes.add_textbox(left, top, width, height)
        tf = box.text_frame
        tf.word_wrap = False
        tf.vertical_anchor = MSO_ANCHOR.MIDDLE
        tf.margin_left = tf.margin_right = tf.margin_top = tf.margin_bottom = padding
        p = tf.paragraphs[0]
        p.alignment = PP_ALIGN.CENTER
        run = p.add_run()
        run.text = node.text
        style_font(run.font, node.color, node.font, scale)
        if node.border_color and node.border_width:
            box.line.color.rgb = RGBColor(*hex_to_rgb(node.border_color))
            box.line.width = Pt(node.border_width * scale)
            if node.border_opacity < 1:
                set_line_alpha(box, node.border_opacity)


def render_presentation(deck: Deck, theme: Theme, font_scale: float = 0.5) -> Presentation:
    """
    Render every slide of the deck with the given theme.
    """
    prs = Presentation()
    prs.slide_width = SLIDE_WIDTH
    prs.slide_height = SLIDE_HEIGHT
    prs.core_properties.title = deck.title
    renderer = SlideRenderer(theme, font_scale)
    layout = prs.slide_layouts[BLANK_LAYOUT]
    for slide in deck.slides:
        renderer.render(prs.slides.add_slide(layout), slide)
    logger.info("Rendered %d slides of %r with theme %s", len(deck.slides), deck.title, theme.name)
    return prs


def save_presentation(prs: Presentation, save_location: str, name: str) -> str:
    os.makedirs(save_location, exist_ok=True)
    path = generate_timestamped_filename(save_location, name, "pptx")
    prs.save(path)
    logger.info("Presentation saved to %s", path)
    return path
