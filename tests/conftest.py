"""Shared fixtures for the deck tests."""

import pytest

from patterns_deck.builder import DeckBuilder
from patterns_deck.config import Settings
from patterns_deck.content import build_deck
from patterns_deck.model import FontSpec
from patterns_deck.utils import load_theme


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep outputs in a temp dir and ignore any developer .env values."""
    for name in ("DECK_THEME", "DECK_FONT_SCALE", "LOG_PATH",
                 "CLOUDINARY_CLOUD_NAME", "CLOUDINARY_API_KEY", "CLOUDINARY_API_SECRET"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("WORK_DIR", str(tmp_path / "output"))


@pytest.fixture
def deck():
    return build_deck()


@pytest.fixture
def theme():
    return load_theme("venonat")


@pytest.fixture
def settings(tmp_path):
    return Settings(_env_file=None, work_dir=str(tmp_path / "output"))


@pytest.fixture
def small_deck():
    """One slide of every content kind, with a highlighted code line."""
    builder = DeckBuilder("Sampler")
    builder.slide(alignment="center", comment="opening notes").title("Hello", subtitle="world")
    builder.slide() \
        .subtitle("A subtitle") \
        .bullets(["one", "two"], style="number") \
        .words("Call `render()` twice") \
        .code("python", "a = 1\nb = 2\nc = 3", highlighted_lines=[2])
    builder.slide(alignment="center").raw(
        "RAW",
        color="#FFFFFF",
        font=FontSpec(size=100, weight="bold", design="monospaced"),
        padding=20,
        border_color="#FFFFFF",
        border_width=10,
        border_opacity=0.5,
    )
    return builder.build()
