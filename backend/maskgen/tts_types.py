from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Literal


ClipAction = Literal["skip", "plan", "generate"]


@dataclass(frozen=True)
class VoiceSettings:
    stability: float
    similarity_boost: float
    style: float = 0.0
    use_speaker_boost: bool = True

    def to_payload(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ClipSpec:
    slug: str
    text: str


@dataclass(frozen=True)
class PersonaConfig:
    key: str
    display_name: str
    voice_id_env: str
    voice_settings: VoiceSettings
    clips: tuple[ClipSpec, ...]

    def __post_init__(self) -> None:
        slugs = [clip.slug for clip in self.clips]
        if len(slugs) != len(set(slugs)):
            raise ValueError(f"Duplicate clip slug in persona {self.key!r}: {slugs}")


@dataclass(frozen=True)
class GenerationTarget:
    persona_key: str
    slug: str
    filename: str
    path: str
    voice_id: str
    text: str
    voice_settings: VoiceSettings


def clip_filename(persona_key: str, slug: str) -> str:
    return f"{persona_key}_{slug}.mp3"
