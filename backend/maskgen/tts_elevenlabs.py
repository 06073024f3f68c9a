from __future__ import annotations

import time
from typing import Callable

import requests

from maskgen.config import Settings
from maskgen.errors import EmptyAudioPayload, ProviderError, RequestExhausted
from maskgen.http_retry import DEFAULT_MAX_ATTEMPTS, request_with_retry
from maskgen.tts_base import SpeechProvider
from maskgen.tts_types import VoiceSettings
from schemas import Voice, VoiceListResponse


class ElevenLabsProvider(SpeechProvider):
    name = "elevenlabs"

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = "https://api.elevenlabs.io",
        session: requests.Session | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        connect_timeout: float = 10.0,
        request_timeout: float = 60.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.max_attempts = max_attempts
        self.timeout = (connect_timeout, request_timeout)
        self._sleep = sleep

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        session: requests.Session | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> "ElevenLabsProvider":
        return cls(
            settings.api_key,
            base_url=settings.base_url,
            session=session,
            max_attempts=settings.max_attempts,
            connect_timeout=settings.connect_timeout,
            request_timeout=settings.request_timeout,
            sleep=sleep,
        )

    def _send(self, method: str, url: str, **kwargs) -> requests.Response:
        try:
            return request_with_retry(
                self.session,
                method,
                url,
                timeout=self.timeout,
                max_attempts=self.max_attempts,
                sleep=self._sleep,
                **kwargs,
            )
        except RequestExhausted as exc:
            raise ProviderError(
                f"ElevenLabs {method} {url} failed after {exc.attempts} attempts ({exc.status}): {exc.body}",
                status=exc.status,
                body=exc.body,
            ) from exc
        except requests.RequestException as exc:
            raise ProviderError(f"ElevenLabs {method} {url} request failed: {exc}") from exc

    def list_voices(self) -> list[Voice]:
        url = f"{self.base_url}/v1/voices"
        response = self._send("GET", url, headers={"xi-api-key": self._api_key})
        if not response.ok:
            raise ProviderError(
                f"ElevenLabs GET {url} failed ({response.status_code}): {response.text}",
                status=response.status_code,
                body=response.text,
            )
        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderError(f"ElevenLabs GET {url} returned invalid JSON.") from exc
        if not isinstance(data, dict):
            return []
        return VoiceListResponse.model_validate(data).voices

    def synthesize(
        self,
        voice_id: str,
        text: str,
        *,
        model_id: str,
        output_format: str,
        voice_settings: VoiceSettings,
    ) -> bytes:
        url = f"{self.base_url}/v1/text-to-speech/{voice_id}"
        params = {"output_format": output_format} if output_format else None
        response = self._send(
            "POST",
            url,
            headers={
                "xi-api-key": self._api_key,
                "Accept": "audio/mpeg",
                "Content-Type": "application/json",
            },
            params=params,
            json_body={
                "text": text,
                "model_id": model_id,
                "voice_settings": voice_settings.to_payload(),
            },
        )
        if not response.ok:
            raise ProviderError(
                f"ElevenLabs TTS failed ({response.status_code}): {response.text}",
                status=response.status_code,
                body=response.text,
            )
        audio = response.content or b""
        if not audio:
            raise EmptyAudioPayload(
                "ElevenLabs returned empty audio buffer.",
                status=response.status_code,
            )
        return audio
