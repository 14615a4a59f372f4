import re
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from typing import Annotated, Literal, Optional, Tuple, Union

HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")

FontWeight = Literal[
    "ultralight", "thin", "light", "regular", "medium",
    "semibold", "bold", "heavy", "black",
]
FontDesign = Literal["default", "monospaced", "serif", "rounded"]
Alignment = Literal["top_leading", "center"]


def check_hex(value: str) -> str:
    if not HEX_COLOR.match(value):
        raise ValueError(f"expected a #RRGGBB color, got {value!r}")
    return value


HexColor = Annotated[str, AfterValidator(check_hex)]


class Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# Theme

class FontSpec(Frozen):
    size: float = Field(..., gt=0)
    weight: FontWeight = "regular"
    design: FontDesign = "default"
    italic: bool = False


class Foreground(Frozen):
    color: HexColor
    font: FontSpec


class HighlightedCode(Frozen):
    background: HexColor
    foreground: Foreground


class Theme(Frozen):
    name: str
    background: HexColor
    title: Foreground
    subtitle: Foreground
    body: Foreground
    code: Foreground
    code_highlighted: HighlightedCode


# Content nodes

class Title(Frozen):
    kind: Literal["title"] = "title"
    text: str
    subtitle: Optional[str] = None


class Subtitle(Frozen):
    kind: Literal["subtitle"] = "subtitle"
    text: str


class BulletList(Frozen):
    kind: Literal["bullets"] = "bullets"
    style: Literal["bullet", "dash", "number"] = "bullet"
    items: Tuple[str, ...]


class Paragraph(Frozen):
    kind: Literal["words"] = "words"
    text: str


class CodeBlock(Frozen):
    kind: Literal["code"] = "code"
    language: str
    code: str
    highlighted_lines: Tuple[int, ...] = ()

    @property
    def lines(self) -> Tuple[str, ...]:
        return tuple(self.code.split("\n"))


class RawContent(Frozen):
    """Opaque styled content, drawn as a single framed text block."""
    kind: Literal["raw"] = "raw"
    text: str
    color: HexColor
    font: FontSpec
    padding: float = Field(0, ge=0)
    border_color: Optional[HexColor] = None
    border_width: float = Field(0, ge=0)
    border_opacity: float = Field(1.0, ge=0, le=1)


ContentNode = Annotated[
    Union[Title, Subtitle, BulletList, Paragraph, CodeBlock, RawContent],
    Field(discriminator="kind"),
]


# Deck

class Slide(Frozen):
    content: Tuple[ContentNode, ...]
    alignment: Alignment = "top_leading"
    comment: Optional[str] = None

    @property
    def heading(self) -> Optional[str]:
        """Text of the first title node, if the slide has one."""
        for node in self.content:
            if isinstance(node, Title):
                return node.text
        return None


class Deck(Frozen):
    title: str
    slides: Tuple[Slide, ...]

    def __len__(self) -> int:
        return len(self.slides)
