import os
import re
from datetime import datetime
from functools import lru_cache
from typing import List, Tuple
import yaml

from patterns_deck.model import FontSpec, Theme


ASSETS_DIR = 'assets'
THEME_TEMPLATE = 'themes.yaml'

BOLD_WEIGHTS = {"semibold", "bold", "heavy", "black"}
INLINE_CODE = re.compile(r"`([^`]+)`")


curdir = os.path.dirname(os.path.abspath(__file__))
assets_dir = os.path.join(curdir, ASSETS_DIR)
theme_template = os.path.join(assets_dir, THEME_TEMPLATE)


class ThemeNotFoundError(KeyError):
    pass


def generate_timestamped_filename(
    save_location: str,
    name: str,
    extension: str = "pptx") -> str:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    ext = extension.lstrip('.')
    filename = f"{name}_{timestamp}.{ext}"
    return os.path.join(save_location, filename)

@lru_cache(maxsize=None)
def load_theme_template() -> dict:
    with open(theme_template, "r", encoding="utf-8") as f:
        yaml_data = f.read()
    return yaml.safe_load(yaml_data)

def list_themes() -> List[str]:
    return list(load_theme_template()["themes"].keys())

def load_theme(name: str) -> Theme:
    """
    Build the named Theme from the bundled theme template.
    """
    themes = load_theme_template()["themes"]
    if name not in themes:
        raise ThemeNotFoundError(name)
    return Theme(name=name, **themes[name])

def font_family(font: FontSpec) -> str:
    families = load_theme_template()["font_families"]
    return families.get(font.design, families["default"])

def is_bold(font: FontSpec) -> bool:
    return font.weight in BOLD_WEIGHTS

def hex_to_rgb(
    hex_color: str
    ) -> tuple:
    hex_color = hex_color.lstrip('#')
    r = int(hex_color[0:2], 16)
    g = int(hex_color[2:4], 16)
    b = int(hex_color[4:6], 16)
    return (r, g, b)

def split_inline_code(
    text: str
    ) -> List[Tuple[str, bool]]:
    """
    Split text into (segment, is_code) pairs on backtick-delimited spans.
    Unmatched backticks are kept as plain text.
    """
    segments = []
    pos = 0
    for match in INLINE_CODE.finditer(text):
        if match.start() > pos:
            segments.append((text[pos:match.start()], False))
        segments.append((match.group(1), True))
        pos = match.end()
    if pos < len(text):
        segments.append((text[pos:], False))
    return segments
