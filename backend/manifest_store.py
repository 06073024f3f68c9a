from __future__ import annotations

import json
import os
from datetime import datetime, timezone

from schemas import ClipEntry, Manifest, PersonaManifest

MANIFEST_FILENAME = "manifest.json"


def utc_now_iso() -> str:
    stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


class ManifestBuilder:
    """
    In-memory manifest for one run.

    - Entries are added as the pipeline walks its targets, in that order.
    - `write()` serializes the whole document once; nothing touches disk before.
    """

    def __init__(
        self,
        *,
        model_id: str,
        output_format: str,
        out_dir: str,
        generated_at: str | None = None,
    ) -> None:
        self._manifest = Manifest(
            generated_at=generated_at or utc_now_iso(),
            model_id=model_id,
            output_format=output_format,
            out_dir=out_dir,
        )

    @property
    def out_dir(self) -> str:
        return self._manifest.out_dir

    def add_persona(self, key: str, *, display_name: str, voice_id: str) -> PersonaManifest:
        persona = self._manifest.personas.get(key)
        if persona is None:
            persona = PersonaManifest(display_name=display_name, voice_id=voice_id)
            self._manifest.personas[key] = persona
        return persona

    def add_clip(self, persona_key: str, slug: str, *, filename: str, text: str) -> ClipEntry:
        persona = self._manifest.personas.get(persona_key)
        if persona is None:
            raise KeyError(persona_key)
        entry = ClipEntry(filename=filename, text=text)
        persona.clips[slug] = entry
        return entry

    def clip_count(self) -> int:
        return sum(len(p.clips) for p in self._manifest.personas.values())

    def to_dict(self) -> dict:
        return self._manifest.model_dump(by_alias=True)

    def write(self, path: str | None = None) -> str:
        target = path or os.path.join(self.out_dir, MANIFEST_FILENAME)
        payload = json.dumps(self.to_dict(), ensure_ascii=False, indent=2)
        with open(target, "w", encoding="utf-8") as f:
            f.write(payload + "\n")
        return target
