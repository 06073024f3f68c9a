from __future__ import annotations

from abc import ABC, abstractmethod

from maskgen.tts_types import VoiceSettings
from schemas import Voice


class SpeechProvider(ABC):
    name: str

    @abstractmethod
    def list_voices(self) -> list[Voice]:
        raise NotImplementedError

    @abstractmethod
    def synthesize(
        self,
        voice_id: str,
        text: str,
        *,
        model_id: str,
        output_format: str,
        voice_settings: VoiceSettings,
    ) -> bytes:
        raise NotImplementedError
