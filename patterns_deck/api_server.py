from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel, Field
from typing import Optional
import logging

import cloudinary
import cloudinary.uploader

from patterns_deck.config import Settings
from patterns_deck.content import build_deck
from patterns_deck.counter import Counter
from patterns_deck.handout import build_handout, save_handout
from patterns_deck.model import Deck, Theme
from patterns_deck.presenter import render_presentation, save_presentation
from patterns_deck.utils import ThemeNotFoundError, list_themes, load_theme

logger = logging.getLogger(__name__)


class GenerateRequest(BaseModel):
    # a bare file stem; save paths are built under WORK_DIR
    filename: str = Field(default="design_patterns", pattern=r"^[\w\-]+$")
    upload: bool = False


def upload_file(path: str, folder: str, public_id: str) -> str:
    upload_result = cloudinary.uploader.upload(
        path,
        resource_type="raw",
        public_id=public_id,
        folder=folder
    )
    return upload_result.get("secure_url")


def create_app(
    deck: Optional[Deck] = None,
    theme: Optional[Theme] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    settings = settings or Settings()
    if settings.cloudinary_enabled:
        cloudinary.config(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key,
            api_secret=settings.cloudinary_api_secret,
            secure=True
        )

    app = FastAPI(
        title="Design Patterns Deck API",
        description="HTTP API for browsing the design patterns deck and exporting it as PowerPoint slides or a Word handout.",
        version="0.1.0"
    )
    app.state.settings = settings
    app.state.deck = deck if deck is not None else build_deck()
    app.state.theme = theme if theme is not None else load_theme(settings.deck_theme)
    app.state.counter = Counter()

    def deliver(path: str, folder: str, data: GenerateRequest) -> dict:
        result = {
            "save_location": settings.work_dir,
            "filename": path,
            "slides_count": len(app.state.deck.slides),
        }
        if data.upload:
            if not settings.cloudinary_enabled:
                raise HTTPException(status_code=400, detail="Cloudinary is not configured")
            try:
                result["cloudinary_url"] = upload_file(path, folder, data.filename)
            except Exception as upload_err:
                raise HTTPException(status_code=500, detail=f"Cloudinary upload error: {str(upload_err)}")
        return result

    @app.get("/deck")
    async def get_deck(request: Request):
        return request.app.state.deck.model_dump()

    @app.get("/deck/summary")
    async def get_deck_summary(request: Request):
        deck = request.app.state.deck
        return {
            "title": deck.title,
            "slides_count": len(deck.slides),
            "slides": [
                {"number": i, "heading": s.heading, "kinds": [node.kind for node in s.content]}
                for i, s in enumerate(deck.slides, start=1)
            ],
        }

    @app.get("/slides/{number}")
    async def get_slide(number: int, request: Request):
        slides = request.app.state.deck.slides
        if number < 1 or number > len(slides):
            raise HTTPException(status_code=404, detail=f"Slide {number} not found; deck has {len(slides)} slides")
        return slides[number - 1].model_dump()

    @app.get("/themes")
    async def get_themes(request: Request):
        return {"themes": list_themes(), "active": request.app.state.theme.name}

    @app.get("/theme")
    async def get_theme(request: Request, name: Optional[str] = None):
        if name is None:
            return request.app.state.theme.model_dump()
        try:
            return load_theme(name).model_dump()
        except ThemeNotFoundError:
            raise HTTPException(status_code=404, detail=f"Theme {name} not found")

    @app.post("/generate_presentation")
    async def generate_presentation(data: GenerateRequest, request: Request):
        """
        Renders the deck to a .pptx in WORK_DIR, optionally uploads to Cloudinary, returns its location.
        """
        try:
            prs = render_presentation(request.app.state.deck, request.app.state.theme, settings.deck_font_scale)
            path = save_presentation(prs, settings.work_dir, data.filename)
        except Exception as e:
            logger.exception("Presentation generation failed")
            raise HTTPException(status_code=500, detail=f"Error generating PPTX: {str(e)}")
        return deliver(path, "presentations", data)

    @app.post("/generate_handout")
    async def generate_handout(data: GenerateRequest, request: Request):
        """
        Writes the speaker handout as a .docx in WORK_DIR, optionally uploads to Cloudinary, returns its location.
        """
        try:
            doc = build_handout(request.app.state.deck)
            path = save_handout(doc, settings.work_dir, data.filename)
        except Exception as e:
            logger.exception("Handout generation failed")
            raise HTTPException(status_code=500, detail=f"Error generating DOCX: {str(e)}")
        return deliver(path, "word_docs", data)

    @app.get("/counter")
    async def get_counter(request: Request):
        counter = request.app.state.counter
        return {"count": counter.count, "label": counter.label}

    @app.post("/counter/press")
    async def press_counter(request: Request):
        counter = request.app.state.counter
        counter.press()
        return {"count": counter.count, "label": counter.label}

    return app


app = create_app()
