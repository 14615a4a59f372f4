"""
Append-style construction of a Deck.

    builder = DeckBuilder("Design patterns")
    builder.slide(alignment="center").title("Design patterns in CardApp")
    deck = builder.build()

Every append returns the SlideBuilder so calls can be chained. Once
``build()`` has run, the builders refuse further appends.
"""
from typing import Iterable, List, Optional

from patterns_deck.model import (
    Alignment,
    BulletList,
    CodeBlock,
    Deck,
    FontSpec,
    Paragraph,
    RawContent,
    Slide,
    Subtitle,
    Title,
)


class SlideBuilder:

    def __init__(
        self,
        owner: "DeckBuilder",
        alignment: Alignment = "top_leading",
        comment: Optional[str] = None,
    ):
        self._owner = owner
        self.alignment = alignment
        self.comment = comment
        self._content: List = []

    def _append(self, node) -> "SlideBuilder":
        if self._owner.built:
            raise RuntimeError("deck already built; slides can no longer change")
        self._content.append(node)
        return self

    def title(self, text: str, subtitle: Optional[str] = None) -> "SlideBuilder":
        return self._append(Title(text=text, subtitle=subtitle))

    def subtitle(self, text: str) -> "SlideBuilder":
        return self._append(Subtitle(text=text))

    def bullets(self, items: Iterable[str], style: str = "bullet") -> "SlideBuilder":
        return self._append(BulletList(items=tuple(items), style=style))

    def words(self, text: str) -> "SlideBuilder":
        return self._append(Paragraph(text=text))

    def code(
        self,
        language: str,
        code: str,
        highlighted_lines: Iterable[int] = (),
    ) -> "SlideBuilder":
        return self._append(
            CodeBlock(language=language, code=code, highlighted_lines=tuple(highlighted_lines))
        )

    def raw(self, text: str, color: str, font: FontSpec, **frame) -> "SlideBuilder":
        """Append opaque styled content; ``frame`` takes padding and border options."""
        return self._append(RawContent(text=text, color=color, font=font, **frame))

    def to_slide(self) -> Slide:
        return Slide(content=tuple(self._content), alignment=self.alignment, comment=self.comment)


class DeckBuilder:

    def __init__(self, title: str):
        self.title = title
        self.built = False
        self._slides: List[SlideBuilder] = []

    def slide(
        self,
        alignment: Alignment = "top_leading",
        comment: Optional[str] = None,
    ) -> SlideBuilder:
        if self.built:
            raise RuntimeError("deck already built; slides can no longer change")
        slide = SlideBuilder(self, alignment=alignment, comment=comment)
        self._slides.append(slide)
        return slide

    def build(self) -> Deck:
        deck = Deck(title=self.title, slides=tuple(s.to_slide() for s in self._slides))
        self.built = True
        return deck
