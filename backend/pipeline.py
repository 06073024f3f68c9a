from __future__ import annotations

import os
import time
from typing import Any, Callable, Iterable, Sequence

from manifest_store import MANIFEST_FILENAME, ManifestBuilder
from maskgen.config import Settings
from maskgen.errors import ConfigurationError, NoPersonasSelected
from maskgen.personas import PERSONAS
from maskgen.tts_base import SpeechProvider
from maskgen.tts_types import ClipAction, GenerationTarget, PersonaConfig, clip_filename

DEFAULT_OUT_DIR = os.path.join("generated", "latency-masks")


def parse_only(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [part.strip().lower() for part in raw.split(",") if part.strip()]


def select_personas(
    catalog: Sequence[PersonaConfig],
    only: Iterable[str] | None = None,
) -> list[PersonaConfig]:
    requested = {str(k).strip().lower() for k in (only or []) if str(k).strip()}
    if requested:
        selected = [p for p in catalog if p.key.lower() in requested]
    else:
        selected = list(catalog)
    if not selected:
        raise NoPersonasSelected(sorted(requested))
    return selected


def plan_targets(
    personas: Sequence[PersonaConfig],
    settings: Settings,
    out_dir: str,
) -> list[GenerationTarget]:
    """
    Ordered task list for a run: personas in catalog order, clips in declared order.

    Every selected persona's voice id is resolved here, so a missing one fails
    the run before any file or network work happens.
    """
    targets: list[GenerationTarget] = []
    for persona in personas:
        voice_id = settings.voice_id_for(persona.key, persona.voice_id_env)
        for clip in persona.clips:
            filename = clip_filename(persona.key, clip.slug)
            targets.append(
                GenerationTarget(
                    persona_key=persona.key,
                    slug=clip.slug,
                    filename=filename,
                    path=os.path.join(out_dir, filename),
                    voice_id=voice_id,
                    text=clip.text,
                    voice_settings=persona.voice_settings,
                )
            )
    return targets


def decide_action(target: GenerationTarget, *, overwrite: bool, dry_run: bool) -> ClipAction:
    if not overwrite and os.path.exists(target.path):
        return "skip"
    if dry_run:
        return "plan"
    return "generate"


def run_pipeline(
    *,
    settings: Settings,
    provider: SpeechProvider | None,
    out_dir: str = DEFAULT_OUT_DIR,
    only: Iterable[str] | None = None,
    overwrite: bool = False,
    dry_run: bool = False,
    pacing_ms: int | None = None,
    catalog: Sequence[PersonaConfig] = PERSONAS,
    sleep: Callable[[float], None] = time.sleep,
    on_stage: Callable[[str, dict[str, Any] | None], None] | None = None,
) -> dict[str, Any]:
    personas = select_personas(catalog, only)
    targets = plan_targets(personas, settings, out_dir)
    if provider is None and not dry_run:
        raise ConfigurationError("A speech provider is required unless dry_run is set.")
    pause_ms = settings.pacing_ms if pacing_ms is None else max(0, int(pacing_ms))

    def set_stage(stage: str, payload: dict[str, Any] | None = None) -> None:
        if on_stage:
            on_stage(stage, payload)

    t0 = time.perf_counter()
    os.makedirs(out_dir, exist_ok=True)

    manifest = ManifestBuilder(
        model_id=settings.model_id,
        output_format=settings.output_format,
        out_dir=out_dir,
    )
    display_names = {p.key: p.display_name for p in personas}
    counts: dict[str, int] = {"skip": 0, "plan": 0, "generate": 0}

    for target in targets:
        manifest.add_persona(
            target.persona_key,
            display_name=display_names[target.persona_key],
            voice_id=target.voice_id,
        )
        manifest.add_clip(
            target.persona_key,
            target.slug,
            filename=target.filename,
            text=target.text,
        )

        action = decide_action(target, overwrite=overwrite, dry_run=dry_run)
        counts[action] += 1
        if action == "skip":
            print(f"[pipeline] skip_exists path={target.path}")
            set_stage("skip", {"path": target.path})
            continue
        if action == "plan":
            print(f"[pipeline] plan path={target.path}")
            set_stage("plan", {"path": target.path})
            continue

        print(f"[pipeline] gen path={target.path}")
        set_stage("generate", {"path": target.path})
        audio = provider.synthesize(
            target.voice_id,
            target.text,
            model_id=settings.model_id,
            output_format=settings.output_format,
            voice_settings=target.voice_settings,
        )
        with open(target.path, "wb") as f:
            f.write(audio)
        set_stage("generated", {"path": target.path, "bytes": len(audio)})
        # Light pacing between real requests to avoid bursts of 429s.
        if pause_ms:
            sleep(pause_ms / 1000.0)

    manifest_path = manifest.write(os.path.join(out_dir, MANIFEST_FILENAME))
    print(f"[pipeline] wrote_manifest path={manifest_path}")
    set_stage("manifest_written", {"path": manifest_path, "clips": manifest.clip_count()})

    return {
        "manifest_path": manifest_path,
        "personas": [p.key for p in personas],
        "targets": len(targets),
        "skipped": counts["skip"],
        "planned": counts["plan"],
        "generated": counts["generate"],
        "elapsed_seconds": round(time.perf_counter() - t0, 3),
    }
