from __future__ import annotations

import json
from typing import Any

import pytest
import requests

from maskgen.config import Settings
from maskgen.personas import PERSONAS
from maskgen.tts_base import SpeechProvider
from maskgen.tts_types import VoiceSettings
from schemas import Voice


def make_response(
    status: int,
    body: bytes | str | dict | None = b"",
    headers: dict[str, str] | None = None,
) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    if isinstance(body, dict):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")
    resp._content = body or b""
    resp.encoding = "utf-8"
    for k, v in (headers or {}).items():
        resp.headers[k] = v
    return resp


class FakeSession:
    """Hands out scripted responses in order and records every request."""

    def __init__(self, responses: list[requests.Response | Exception]) -> None:
        self._responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self._responses:
            raise AssertionError(f"unexpected request: {method} {url}")
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class RecordingProvider(SpeechProvider):
    name = "recording"

    def __init__(self, audio: bytes = b"ID3fake-mp3") -> None:
        self.audio = audio
        self.calls: list[dict[str, Any]] = []

    def list_voices(self) -> list[Voice]:
        return []

    def synthesize(
        self,
        voice_id: str,
        text: str,
        *,
        model_id: str,
        output_format: str,
        voice_settings: VoiceSettings,
    ) -> bytes:
        self.calls.append(
            {
                "voice_id": voice_id,
                "text": text,
                "model_id": model_id,
                "output_format": output_format,
                "voice_settings": voice_settings,
            }
        )
        return self.audio


class SleepRecorder:
    def __init__(self) -> None:
        self.waits: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.waits.append(seconds)


ENV_NAMES = [
    "ELEVENLABS_API_KEY",
    "ELEVENLABS_TTS_MODEL",
    "ELEVENLABS_OUTPUT_FORMAT",
    "ELEVENLABS_BASE_URL",
    "ELEVENLABS_MAX_ATTEMPTS",
    "ELEVENLABS_CONNECT_TIMEOUT_SECONDS",
    "ELEVENLABS_REQUEST_TIMEOUT_SECONDS",
    "LATENCY_MASK_PACING_MS",
    *[p.voice_id_env for p in PERSONAS],
]


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so teardown also undoes values that load_dotenv writes directly
    for name in ENV_NAMES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    work = tmp_path / "cwd"
    work.mkdir()
    monkeypatch.chdir(work)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_key="test-key",
        voice_ids={p.key: f"voice-{p.key}" for p in PERSONAS},
        pacing_ms=250,
    )


@pytest.fixture
def full_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ELEVENLABS_API_KEY", "test-key")
    for p in PERSONAS:
        monkeypatch.setenv(p.voice_id_env, f"voice-{p.key}")


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()
