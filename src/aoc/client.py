# src/aoc/client.py
"""
Client for the puzzle server.

Responsibilities:
- get_input: cached-or-downloaded puzzle input for (year, day)
- check_answer: submit an answer and classify the server's reply
- parse_answer_response: pure HTML -> AnswerResult classification

Requests carry the session token as a `session=` cookie. Network access
goes through urllib.request.urlopen so tests can monkeypatch it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Union
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from .cache import cache_input, get_cached_input
from .config import AocConfig
from .errors import AnswerSubmitError, InputFetchError, MissingSessionError

log = logging.getLogger(__name__)


@dataclass
class AnswerResult:
    """Classified reply to an answer submission."""

    is_correct: bool
    explanation: str
    message: str


# ---------------------------------------------------------------------------
# HTTP helpers
# ---------------------------------------------------------------------------


def _headers(config: AocConfig) -> dict:
    token = config.session_token()
    if not token:
        raise MissingSessionError(
            f"{config.session_env} environment variable is not set"
        )
    return {
        "Cookie": f"session={token}",
        "User-Agent": config.user_agent,
    }


def _read(request: Request, timeout: float) -> str:
    with urlopen(request, timeout=timeout) as response:
        return response.read().decode("utf-8")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_input(year: int, day: int, config: AocConfig) -> str:
    """
    Return the puzzle input for (year, day).

    Cached input wins; otherwise the input is downloaded and cached.

    Raises:
        MissingSessionError: nothing cached and no session token set.
        InputFetchError: the download failed.
    """
    cached = get_cached_input(year, day, config.cache_dir)
    if cached:
        log.info("Using cached input for day %d", day)
        return cached

    log.info("Fetching input for day %d", day)
    endpoint = f"{config.base_url}/{year}/day/{day}/input"
    request = Request(endpoint, headers=_headers(config))

    try:
        text = _read(request, config.timeout)
    except HTTPError as exc:
        raise InputFetchError(
            f"Failed to fetch puzzle input from URL: {endpoint}. "
            f"HTTP error! status: {exc.code}"
        ) from exc
    except URLError as exc:
        raise InputFetchError(
            f"Failed to fetch puzzle input from URL: {endpoint}. Error: {exc.reason}"
        ) from exc

    cache_input(year, day, text, config.cache_dir)
    return text


def check_answer(
    year: int,
    day: int,
    answer: Union[int, str],
    level: int,
    config: AocConfig,
) -> AnswerResult:
    """
    Submit an answer for one part (level 1 or 2) and classify the reply.

    Raises:
        ValueError: level is not 1 or 2.
        MissingSessionError: no session token set.
        AnswerSubmitError: the request failed.
    """
    if level not in (1, 2):
        raise ValueError(f"level must be 1 or 2, got {level!r}")

    endpoint = f"{config.base_url}/{year}/day/{day}/answer"
    headers = _headers(config)
    headers["Content-Type"] = "application/x-www-form-urlencoded"
    body = urlencode({"level": str(level), "answer": str(answer)}).encode("utf-8")
    request = Request(endpoint, data=body, headers=headers, method="POST")

    try:
        html = _read(request, config.timeout)
    except HTTPError as exc:
        raise AnswerSubmitError(
            f"Failed to submit answer to URL: {endpoint}. HTTP error! status: {exc.code}"
        ) from exc
    except URLError as exc:
        raise AnswerSubmitError(
            f"Failed to submit answer to URL: {endpoint}. Error: {exc.reason}"
        ) from exc

    result = parse_answer_response(html)
    log.info("Day %d part %d answer %s: %s", day, level, answer, result.message)
    return result


# ---------------------------------------------------------------------------
# Response parsing
# ---------------------------------------------------------------------------

_MAIN_RE = re.compile(r"<main[^>]*>([\s\S]*?)</main>", re.IGNORECASE)
_ARTICLE_RE = re.compile(r"<article[^>]*>([\s\S]*?)</article>", re.IGNORECASE)
_PARAGRAPH_RE = re.compile(r"<p[^>]*>([\s\S]*?)</p>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")

_TIME_LEFT_RE = re.compile(r"have\s+(\d+[ms])\s+left", re.IGNORECASE)
_WAIT_RE = re.compile(
    r"(?:wait|waiting)\s+(\d+)\s*(minutes?|mins?|seconds?|secs?|s|m)\b",
    re.IGNORECASE,
)
_ATTEMPTS_RE = re.compile(r"guessed incorrectly (\d+) times", re.IGNORECASE)

_CORRECT_MARKERS = (
    "that's the right answer",
    "you got the right answer",
    "correct answer",
)


def _inner(pattern: re.Pattern, text: str) -> Optional[str]:
    match = pattern.search(text)
    return match.group(1) if match else None


def _wait_time(message: str) -> str:
    time_left = _TIME_LEFT_RE.search(message)
    if time_left:
        return time_left.group(1)
    wait = _WAIT_RE.search(message)
    if wait:
        duration, unit = wait.groups()
        unit = "minutes" if unit.lower().startswith("m") else "seconds"
        return f"{duration} {unit}"
    return "an unknown period"


def parse_answer_response(html: str) -> AnswerResult:
    """Classify the server's answer page (right / too high / too low / rate limited)."""
    main = _inner(_MAIN_RE, html) or html
    article = _inner(_ARTICLE_RE, main) or main
    paragraph = _inner(_PARAGRAPH_RE, article)
    content = paragraph.strip() if paragraph is not None else article

    message = _TAG_RE.sub("", content).strip()
    lowered = message.lower()

    result = AnswerResult(is_correct=False, explanation="", message=message)

    if "wait" in lowered:
        wait_time = _wait_time(message)
        attempts = _ATTEMPTS_RE.search(message)
        if attempts:
            result.explanation = (
                f"Too many incorrect attempts ({attempts.group(1)}). "
                f"Please wait {wait_time} before trying again."
            )
        else:
            result.explanation = f"Rate limited: Please wait {wait_time} before trying again."
    elif any(marker in lowered for marker in _CORRECT_MARKERS):
        result.is_correct = True
    elif "too high" in lowered:
        result.explanation = "Answer is too high."
    elif "too low" in lowered:
        result.explanation = "Answer is too low."

    return result
