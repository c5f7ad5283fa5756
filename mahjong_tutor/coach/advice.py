"""AI coach - discard advice from the Gemini generateContent REST API.

The engine never waits on this module: the controller runs
request_advice() on a worker thread and falls back to a static tip when it
raises AdviceFailure.
"""

import random
from http import HTTPStatus
from typing import Optional, Sequence

import httpx
import structlog
from pydantic import BaseModel, Field, ValidationError

from mahjong_tutor.core.tile import TileSuit, decode

logger = structlog.get_logger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT = 20.0

RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "suggestion": {"type": "STRING", "description": "Tile to discard"},
        "reason": {"type": "STRING", "description": "Short explanation"},
    },
    "required": ["suggestion", "reason"],
}

_SUIT_WORDS = {
    "en": {TileSuit.MAN: "Man", TileSuit.PIN: "Pin", TileSuit.SOU: "Sou"},
    "ko": {TileSuit.MAN: "만", TileSuit.PIN: "통", TileSuit.SOU: "삭"},
}
_HONOR_WORDS = {
    "en": ["East", "South", "West", "North", "White dragon", "Green dragon", "Red dragon"],
    "ko": ["동(East)", "남(South)", "서(West)", "북(North)", "백(White)", "발(Green)", "중(Red)"],
}

FALLBACK_TIPS = {
    "en": [
        "Throw isolated honor tiles (winds and dragons) early; they rarely form sets.",
        "1 and 9 tiles connect on one side only, so they are weaker than 3-7.",
        "Keep shapes like 2-3 that wait on two tiles (1 or 4) rather than one.",
        "When someone declares riichi, tiles they already discarded are safe to throw.",
    ],
    "ko": [
        "고립된 자패(바람패, 삼원패)는 초반에 버리는 것이 유리합니다.",
        "1과 9는 한쪽으로만 이어지기 때문에 3~7보다 가치가 낮습니다.",
        "2,3처럼 1이나 4 두 종류를 기다리는 양면 형태를 많이 만드세요.",
        "리치를 건 사람이 이미 버린 패(현물)는 안전하게 버릴 수 있습니다.",
    ],
}


class Advice(BaseModel):
    """Coach response: which tile to throw and why."""
    suggestion: str = Field(min_length=1)
    reason: str = Field(min_length=1)


class AdviceFailure(Exception):
    """Advice could not be produced; the caller shows a fallback tip."""

    MISSING_KEY = "missing_key"
    INVALID_KEY = "invalid_key"
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    MALFORMED = "malformed"

    def __init__(self, reason: str, detail: str = ""):
        super().__init__(f"{reason}: {detail}" if detail else reason)
        self.reason = reason
        self.detail = detail


def describe_tile(tile: int, language: str = "en") -> str:
    """Readable tile name for the prompt ('3 Man', 'East')."""
    language = language if language in _SUIT_WORDS else "en"
    info = decode(tile)
    if info.suit == TileSuit.HONOR:
        return _HONOR_WORDS[language][info.rank - 1]
    if info.suit == TileSuit.INVALID:
        return "?"
    if language == "ko":
        return f"{info.rank}{_SUIT_WORDS['ko'][info.suit]}"
    return f"{info.rank} {_SUIT_WORDS['en'][info.suit]}"


def build_prompt(hand: Sequence[int], drawn: Optional[int] = None,
                 language: str = "en") -> str:
    full = list(hand) + ([drawn] if drawn is not None else [])
    names = ", ".join(describe_tile(t, language) for t in full)
    reply_in = "Korean" if language == "ko" else "English"
    lines = [
        "You are a friendly, expert Riichi Mahjong instructor.",
        "The student needs help deciding what to discard.",
        "",
        f"Student's hand: [{names}]",
    ]
    if drawn is not None:
        lines.append(f"Just drew: {describe_tile(drawn, language)}")
    lines += [
        "",
        "Analyze the hand for tile efficiency (speed to tenpai) and yaku potential.",
        "Output JSON with:",
        "1. suggestion: the tile to discard, named as in the hand list above.",
        f"2. reason: a concise, helpful explanation in {reply_in} based on shapes or yaku.",
    ]
    return "\n".join(lines)


def fallback_tip(language: str = "en", rng: Optional[random.Random] = None) -> str:
    tips = FALLBACK_TIPS.get(language, FALLBACK_TIPS["en"])
    return (rng or random).choice(tips)


def parse_advice_response(payload) -> Advice:
    """Pull the JSON text out of a generateContent response and validate it."""
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise AdviceFailure(AdviceFailure.MALFORMED, "no candidate text") from e
    if not isinstance(text, str):
        raise AdviceFailure(AdviceFailure.MALFORMED, "candidate text is not a string")

    try:
        return Advice.model_validate_json(text)
    except ValidationError as e:
        raise AdviceFailure(AdviceFailure.MALFORMED, str(e)) from e


class AdviceClient:
    """Synchronous client; meant to run off the game thread."""

    def __init__(self, api_base: str = DEFAULT_API_BASE, model: str = DEFAULT_MODEL,
                 timeout: float = DEFAULT_TIMEOUT, language: str = "en",
                 transport: Optional[httpx.BaseTransport] = None):
        self.api_base = api_base.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.language = language
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent"

    def _post(self, credential: str, body: dict) -> httpx.Response:
        # HTTP header values must be ASCII
        if not credential.isascii():
            raise AdviceFailure(AdviceFailure.INVALID_KEY, "key has non-ASCII characters")
        with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
            return client.post(
                self.endpoint,
                headers={"x-goog-api-key": credential},
                json=body,
            )

    def request_advice(self, credential: Optional[str], hand: Sequence[int],
                       drawn: Optional[int] = None) -> Advice:
        """Ask for a discard suggestion. Raises AdviceFailure on any problem."""
        if not credential:
            raise AdviceFailure(AdviceFailure.MISSING_KEY)

        body = {
            "contents": [{"parts": [{"text": build_prompt(hand, drawn, self.language)}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": RESPONSE_SCHEMA,
            },
        }
        try:
            response = self._post(credential, body)
        except httpx.RequestError as e:
            raise AdviceFailure(AdviceFailure.TRANSPORT, str(e)) from e

        if response.status_code != HTTPStatus.OK:
            raise AdviceFailure(AdviceFailure.HTTP_STATUS, str(response.status_code))

        try:
            payload = response.json()
        except ValueError as e:
            # JSON decode errors from a non-JSON body
            raise AdviceFailure(AdviceFailure.MALFORMED, "response is not JSON") from e

        advice = parse_advice_response(payload)
        logger.debug("advice received", model=self.model, suggestion=advice.suggestion)
        return advice

    def test_connection(self, credential: Optional[str]) -> bool:
        """Send a minimal request; True only on HTTP 200."""
        if not credential:
            return False
        body = {"contents": [{"parts": [{"text": "Hello"}]}]}
        try:
            response = self._post(credential, body)
        except AdviceFailure as e:
            logger.warning("connection test skipped", reason=e.reason)
            return False
        except httpx.RequestError as e:
            logger.warning("connection test failed", error=str(e))
            return False
        ok = response.status_code == HTTPStatus.OK
        if not ok:
            logger.warning("connection test rejected", status=response.status_code)
        return ok
