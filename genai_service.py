"""
Gemini-backed copywriting: marketing blurbs for new trains and short trip
itineraries for booked destinations.

Both calls are plain request/response. Any failure, including an empty
answer, becomes a GenerationFailure whose message is shown to the user as is;
there is no retry and no fallback text.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from google import genai
from google.genai import types

from ledger import MoveoError

logger = logging.getLogger(__name__)

MAX_SOURCES = 3

MARKETING_INSTRUCTION = (
    "You are a creative marketing copywriter for a premium railway company. "
    "Your tone should be persuasive and exciting."
)


class GenerationFailure(MoveoError):
    pass


@dataclass
class Itinerary:
    text:    str
    sources: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"text": self.text, "sources": self.sources}


def format_travel_date(date: str) -> str:
    """'2025-01-01' -> 'Wednesday, January 1, 2025'; anything unparseable is passed through."""
    try:
        d = datetime.strptime(date, "%Y-%m-%d")
    except (TypeError, ValueError):
        return date
    return f"{d:%A}, {d:%B} {d.day}, {d.year}"


def grounding_sources(response, limit: int = MAX_SOURCES) -> List[str]:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks   = getattr(metadata, "grounding_chunks", None) or []

    sources = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        label = (getattr(web, "title", None) or getattr(web, "uri", None)) if web else None
        if label:
            sources.append(label)
    return sources[:limit]


class TextGenerator:
    def __init__(self, api_key=None, model: str = "gemini-2.5-flash", client=None):
        self.model = model
        if client is None and api_key:
            client = genai.Client(api_key=api_key)
        if client is None:
            logger.warning("Gemini API key not found. AI features will be disabled.")
        self.client = client

    def _require_client(self):
        if self.client is None:
            raise GenerationFailure("API key not configured.")

    def _generate(self, prompt: str, config: types.GenerateContentConfig):
        return self.client.models.generate_content(model=self.model, contents=prompt, config=config)

    def generate_marketing_description(self, source: str, destination: str,
                                       price_first, price_economy) -> str:
        price_range = (f"Economy class starts at ₹{price_economy:.0f} "
                       f"and First Class is ₹{price_first:.0f}.")
        prompt = (
            f"Write a short, engaging, 2-3 sentence marketing description for a new railway service "
            f"traveling from {source} to {destination}. Highlight the comfort and the convenient "
            f"travel time. Use the price range information: {price_range}"
        )
        config = types.GenerateContentConfig(system_instruction=MARKETING_INSTRUCTION)

        self._require_client()
        try:
            response = self._generate(prompt, config)
            text = (response.text or "").strip()
        except Exception:
            logger.exception("Gemini API Error (Marketing Description)")
            raise GenerationFailure("Failed to generate marketing description.") from None
        if not text:
            logger.error("Gemini API Error (Marketing Description): empty response")
            raise GenerationFailure("Failed to generate marketing description.")
        return text

    def generate_itinerary(self, destination: str, date: str) -> Itinerary:
        prompt = (
            f"Act as a helpful travel guide. Based on the current date, suggest a concise, 3-point "
            f"itinerary for a traveler arriving in {destination} on {date}. Focus on must-see sights "
            f"or activities relevant to the local area. Format the output as a numbered list with "
            f"bold point titles."
        )
        config = types.GenerateContentConfig(tools=[types.Tool(google_search=types.GoogleSearch())])

        self._require_client()
        try:
            response = self._generate(prompt, config)
            text = response.text
            sources = grounding_sources(response)
        except Exception:
            logger.exception("Gemini API Error (Itinerary)")
            raise GenerationFailure("Failed to generate itinerary.") from None
        if not text:
            logger.error("Gemini API Error (Itinerary): empty response")
            raise GenerationFailure("Failed to generate itinerary.")
        return Itinerary(text=text, sources=sources)
