# tests/test_aoc_client.py
"""
Tests for aoc.client.

Network access is replaced by monkeypatching aoc.client.urlopen with a
fake that records requests and returns canned bodies.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import List
from urllib.error import HTTPError, URLError
from urllib.parse import parse_qs

import pytest

from aoc import client
from aoc.cache import cache_input, get_cached_input
from aoc.client import check_answer, get_input, parse_answer_response
from aoc.config import AocConfig
from aoc.errors import AnswerSubmitError, InputFetchError, MissingSessionError


class FakeResponse:
    def __init__(self, body: str) -> None:
        self._body = body.encode("utf-8")

    def read(self) -> bytes:
        return self._body

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc) -> None:
        return None


class FakeUrlopen:
    def __init__(self, body: str = "", error: Exception | None = None) -> None:
        self.body = body
        self.error = error
        self.requests: List = []

    def __call__(self, request, timeout=None):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return FakeResponse(self.body)


@pytest.fixture
def config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> AocConfig:
    monkeypatch.setenv("TEST_AOC_SESSION", "secret")
    return AocConfig(
        base_url="https://example.test",
        cache_dir=tmp_path / "cache",
        session_env="TEST_AOC_SESSION",
        timeout=3,
    )


def test_get_input_downloads_and_caches(config: AocConfig, monkeypatch: pytest.MonkeyPatch) -> None:
    fake = FakeUrlopen("3   4\n4   3\n")
    monkeypatch.setattr(client, "urlopen", fake)

    text = get_input(2024, 1, config)

    assert text == "3   4\n4   3\n"
    assert get_cached_input(2024, 1, config.cache_dir) == text
    request = fake.requests[0]
    assert request.full_url == "https://example.test/2024/day/1/input"
    assert request.get_header("Cookie") == "session=secret"


def test_get_input_prefers_cache(config: AocConfig, monkeypatch: pytest.MonkeyPatch) -> None:
    cache_input(2024, 2, "cached", config.cache_dir)
    fake = FakeUrlopen("fresh")
    monkeypatch.setattr(client, "urlopen", fake)

    assert get_input(2024, 2, config) == "cached"
    assert fake.requests == []


def test_get_input_empty_cache_counts_as_missing(config: AocConfig, monkeypatch: pytest.MonkeyPatch) -> None:
    cache_input(2024, 4, "", config.cache_dir)
    monkeypatch.setattr(client, "urlopen", FakeUrlopen("fresh"))

    assert get_input(2024, 4, config) == "fresh"


def test_get_input_requires_session(config: AocConfig, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TEST_AOC_SESSION")
    monkeypatch.setattr(client, "urlopen", FakeUrlopen("unused"))

    with pytest.raises(MissingSessionError, match="TEST_AOC_SESSION"):
        get_input(2024, 5, config)


def test_get_input_http_error(config: AocConfig, monkeypatch: pytest.MonkeyPatch) -> None:
    url = "https://example.test/2024/day/6/input"
    error = HTTPError(url, 404, "Not Found", {}, io.BytesIO(b""))
    monkeypatch.setattr(client, "urlopen", FakeUrlopen(error=error))

    with pytest.raises(InputFetchError, match="status: 404"):
        get_input(2024, 6, config)
    assert get_cached_input(2024, 6, config.cache_dir) is None


def test_get_input_network_error(config: AocConfig, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(client, "urlopen", FakeUrlopen(error=URLError("no route")))

    with pytest.raises(InputFetchError, match="no route"):
        get_input(2024, 6, config)


def test_check_answer_posts_form(config: AocConfig, monkeypatch: pytest.MonkeyPatch) -> None:
    fake = FakeUrlopen(
        "<main><article><p>That's the right answer! You are one gold star closer.</p></article></main>"
    )
    monkeypatch.setattr(client, "urlopen", fake)

    result = check_answer(2024, 18, 22, 1, config)

    assert result.is_correct
    request = fake.requests[0]
    assert request.full_url == "https://example.test/2024/day/18/answer"
    assert request.get_method() == "POST"
    assert parse_qs(request.data.decode("utf-8")) == {"level": ["1"], "answer": ["22"]}


def test_check_answer_rejects_bad_level(config: AocConfig) -> None:
    with pytest.raises(ValueError):
        check_answer(2024, 1, 1, 3, config)


def test_check_answer_http_error(config: AocConfig, monkeypatch: pytest.MonkeyPatch) -> None:
    url = "https://example.test/2024/day/1/answer"
    error = HTTPError(url, 500, "Server Error", {}, io.BytesIO(b""))
    monkeypatch.setattr(client, "urlopen", FakeUrlopen(error=error))

    with pytest.raises(AnswerSubmitError, match="status: 500"):
        check_answer(2024, 1, "x", 2, config)


def _page(paragraph: str) -> str:
    return f"<html><body><main><article><p>{paragraph}</p></article></main></body></html>"


def test_parse_correct_answer() -> None:
    result = parse_answer_response(_page("That's the right answer! <a href='/2024'>[Return]</a>"))
    assert result.is_correct
    assert result.explanation == ""
    assert result.message == "That's the right answer! [Return]"


def test_parse_too_high_and_too_low() -> None:
    high = parse_answer_response(_page("That's not the right answer; your answer is too high."))
    low = parse_answer_response(_page("That's not the right answer; your answer is too low."))

    assert not high.is_correct and high.explanation == "Answer is too high."
    assert not low.is_correct and low.explanation == "Answer is too low."


def test_parse_rate_limited_time_left() -> None:
    result = parse_answer_response(
        _page("You gave an answer too recently; you have to wait after submitting an answer "
              "before trying again.  You have 43s left to wait.")
    )
    assert not result.is_correct
    assert result.explanation == "Rate limited: Please wait 43s before trying again."


def test_parse_rate_limited_minutes_with_attempts() -> None:
    result = parse_answer_response(
        _page("Because you have guessed incorrectly 5 times on this puzzle, "
              "please wait 5 minutes before trying again.")
    )
    assert result.explanation == (
        "Too many incorrect attempts (5). Please wait 5 minutes before trying again."
    )


def test_parse_rate_limited_unknown_period() -> None:
    result = parse_answer_response(_page("Please wait a while."))
    assert result.explanation == "Rate limited: Please wait an unknown period before trying again."


def test_parse_without_markup() -> None:
    result = parse_answer_response("Your answer is too low.")
    assert result.message == "Your answer is too low."
    assert result.explanation == "Answer is too low."
