import logging
import os
from docx import Document
from docx.shared import Pt

from patterns_deck.model import (
    BulletList,
    CodeBlock,
    Deck,
    Paragraph,
    RawContent,
    Subtitle,
    Title,
)
from patterns_deck.utils import generate_timestamped_filename

logger = logging.getLogger(__name__)

CODE_FONT = "Courier New"
LIST_STYLES = {"bullet": "List Bullet", "dash": "List Bullet", "number": "List Number"}


def build_handout(deck: Deck) -> Document:
    """
    Speaker handout: one section per slide with its text, code and notes.
    """
    doc = Document()
    doc.add_heading(deck.title, 0)
    for number, slide in enumerate(deck.slides, start=1):
        heading = slide.heading
        doc.add_heading(f"Slide {number}: {heading}" if heading else f"Slide {number}", level=1)
        for node in slide.content:
            if isinstance(node, Title):
                if node.subtitle:
                    doc.add_heading(node.subtitle, level=2)
            elif isinstance(node, Subtitle):
                doc.add_heading(node.text, level=2)
            elif isinstance(node, BulletList):
                for item in node.items:
                    doc.add_paragraph(item, style=LIST_STYLES[node.style])
            elif isinstance(node, Paragraph):
                doc.add_paragraph(node.text)
            elif isinstance(node, CodeBlock):
                para = doc.add_paragraph()
                run = para.add_run(node.code)
                run.font.name = CODE_FONT
                run.font.size = Pt(9)
            elif isinstance(node, RawContent):
                doc.add_paragraph(node.text)
        if slide.comment:
            notes = doc.add_paragraph()
            notes.add_run(f"Presenter notes: {slide.comment}").italic = True
    return doc


def save_handout(doc: Document, save_location: str, name: str) -> str:
    os.makedirs(save_location, exist_ok=True)
    path = generate_timestamped_filename(save_location, name, "docx")
    doc.save(path)
    logger.info("Handout saved to %s", path)
    return path
