from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

from dotenv import load_dotenv

from maskgen.errors import ConfigurationError, MissingConfigValue
from maskgen.personas import PERSONAS

DEFAULT_ENV_FILE = ".env.local"
FALLBACK_ENV_FILE = ".env"
DEFAULT_MODEL_ID = "eleven_multilingual_v2"
DEFAULT_OUTPUT_FORMAT = "mp3_44100_128"
DEFAULT_BASE_URL = "https://api.elevenlabs.io"
API_KEY_ENV = "ELEVENLABS_API_KEY"


def _env_str(env: Mapping[str, str], name: str, default: str = "") -> str:
    value = str(env.get(name) or "").strip()
    return value or default


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except Exception:
        return default


def load_env_file(path: str | None = None) -> str | None:
    """
    Seed os.environ from a dotenv file without overriding existing values.

    With no explicit path, `.env.local` is tried first, then `.env`; finding
    neither is fine. An explicit path that does not exist is an error.
    Returns the path that was loaded, if any.
    """
    if path:
        if not os.path.isfile(path):
            raise ConfigurationError(f"Could not read env file: {path}")
        load_dotenv(path, override=False)
        return path
    for candidate in (DEFAULT_ENV_FILE, FALLBACK_ENV_FILE):
        if os.path.isfile(candidate):
            load_dotenv(candidate, override=False)
            return candidate
    return None


@dataclass(frozen=True)
class Settings:
    api_key: str
    model_id: str = DEFAULT_MODEL_ID
    output_format: str = DEFAULT_OUTPUT_FORMAT
    voice_ids: Mapping[str, str] = field(default_factory=dict)
    base_url: str = DEFAULT_BASE_URL
    max_attempts: int = 4
    connect_timeout: float = 10.0
    request_timeout: float = 60.0
    pacing_ms: int = 250

    def voice_id_for(self, persona_key: str, env_name: str) -> str:
        value = self.voice_ids.get(persona_key, "")
        if not value:
            raise MissingConfigValue(env_name)
        return value


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build the run settings once. Only the API key is checked here."""
    source = os.environ if env is None else env
    api_key = _env_str(source, API_KEY_ENV)
    if not api_key:
        raise MissingConfigValue(API_KEY_ENV)

    voice_ids = {
        persona.key: _env_str(source, persona.voice_id_env)
        for persona in PERSONAS
        if _env_str(source, persona.voice_id_env)
    }
    base_url = _env_str(source, "ELEVENLABS_BASE_URL", DEFAULT_BASE_URL).rstrip("/")
    return Settings(
        api_key=api_key,
        model_id=_env_str(source, "ELEVENLABS_TTS_MODEL", DEFAULT_MODEL_ID),
        output_format=_env_str(source, "ELEVENLABS_OUTPUT_FORMAT", DEFAULT_OUTPUT_FORMAT),
        voice_ids=voice_ids,
        base_url=base_url,
        max_attempts=max(1, _env_int(source, "ELEVENLABS_MAX_ATTEMPTS", 4)),
        connect_timeout=_env_float(source, "ELEVENLABS_CONNECT_TIMEOUT_SECONDS", 10.0),
        request_timeout=_env_float(source, "ELEVENLABS_REQUEST_TIMEOUT_SECONDS", 60.0),
        pacing_ms=max(0, _env_int(source, "LATENCY_MASK_PACING_MS", 250)),
    )
