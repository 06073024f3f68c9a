from __future__ import annotations

import json
import re

import pytest

from manifest_store import ManifestBuilder, utc_now_iso


def test_timestamp_is_utc_with_millis() -> None:
    assert re.fullmatch(r"\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d\.\d{3}Z", utc_now_iso())


def test_write_produces_camel_case_document(tmp_path) -> None:
    builder = ManifestBuilder(
        model_id="eleven_multilingual_v2",
        output_format="mp3_44100_128",
        out_dir=str(tmp_path),
        generated_at="2026-01-01T00:00:00.000Z",
    )
    builder.add_persona("luna", display_name="Luna", voice_id="v1")
    builder.add_clip("luna", "welcome", filename="luna_welcome.mp3", text="Hi… I’m Luna.")
    builder.add_clip("luna", "hook", filename="luna_hook.mp3", text="Where…")

    path = builder.write()
    with open(path, encoding="utf-8") as f:
        raw = f.read()
    assert path.endswith("manifest.json")
    assert raw.endswith("}\n")
    assert "Hi… I’m Luna." in raw
    assert '\n  "modelId"' in raw

    data = json.loads(raw)
    assert data == {
        "generatedAt": "2026-01-01T00:00:00.000Z",
        "modelId": "eleven_multilingual_v2",
        "outputFormat": "mp3_44100_128",
        "outDir": str(tmp_path),
        "personas": {
            "luna": {
                "displayName": "Luna",
                "voiceId": "v1",
                "clips": {
                    "welcome": {"filename": "luna_welcome.mp3", "text": "Hi… I’m Luna."},
                    "hook": {"filename": "luna_hook.mp3", "text": "Where…"},
                },
            }
        },
    }
    assert list(data["personas"]["luna"]["clips"]) == ["welcome", "hook"]


def test_nothing_written_before_write(tmp_path) -> None:
    builder = ManifestBuilder(model_id="m", output_format="f", out_dir=str(tmp_path))
    builder.add_persona("kai", display_name="Kai", voice_id="v")
    builder.add_clip("kai", "mask", filename="kai_mask.mp3", text="t")
    assert builder.clip_count() == 1
    assert not (tmp_path / "manifest.json").exists()


def test_clip_for_unknown_persona_fails(tmp_path) -> None:
    builder = ManifestBuilder(model_id="m", output_format="f", out_dir=str(tmp_path))
    with pytest.raises(KeyError):
        builder.add_clip("ghost", "welcome", filename="ghost_welcome.mp3", text="t")
