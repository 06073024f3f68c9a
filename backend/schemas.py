from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Voice(BaseModel):
    name: str = ""
    voice_id: str = ""


class VoiceListResponse(BaseModel):
    voices: list[Voice] = Field(default_factory=list)

    @field_validator("voices", mode="before")
    @classmethod
    def _voices_as_list(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return []
        return [v for v in value if isinstance(v, dict)]


class ClipEntry(BaseModel):
    filename: str
    text: str


class PersonaManifest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    display_name: str = Field(alias="displayName")
    voice_id: str = Field(alias="voiceId")
    clips: dict[str, ClipEntry] = Field(default_factory=dict)


class Manifest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    generated_at: str = Field(alias="generatedAt")
    model_id: str = Field(alias="modelId")
    output_format: str = Field(alias="outputFormat")
    out_dir: str = Field(alias="outDir")
    personas: dict[str, PersonaManifest] = Field(default_factory=dict)
