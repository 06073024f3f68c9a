from __future__ import annotations

import argparse
import sys
import traceback

from maskgen.config import load_env_file, load_settings
from maskgen.personas import persona_keys, voice_env_names
from maskgen.tts_elevenlabs import ElevenLabsProvider
from pipeline import DEFAULT_OUT_DIR, parse_only, run_pipeline


def _epilog() -> str:
    voices = "\n".join(f"  {name}" for name in voice_env_names())
    return (
        "Required env vars:\n"
        "  ELEVENLABS_API_KEY\n"
        f"{voices}\n"
        "\n"
        "Optional env vars:\n"
        "  ELEVENLABS_TTS_MODEL (default: eleven_multilingual_v2)\n"
        "  ELEVENLABS_OUTPUT_FORMAT (default: mp3_44100_128)\n"
        "  ELEVENLABS_BASE_URL, ELEVENLABS_MAX_ATTEMPTS,\n"
        "  ELEVENLABS_CONNECT_TIMEOUT_SECONDS, ELEVENLABS_REQUEST_TIMEOUT_SECONDS,\n"
        "  LATENCY_MASK_PACING_MS (default: 250)\n"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maskgen",
        description="Pre-generate short MP3 clips for latency masking using ElevenLabs TTS.",
        epilog=_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--env",
        default=None,
        help="Load env vars from a file (default: .env.local, fallback: .env).",
    )
    parser.add_argument(
        "--out",
        default=DEFAULT_OUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUT_DIR}).",
    )
    parser.add_argument(
        "--only",
        default="",
        help=f"Comma-separated persona keys ({','.join(persona_keys())}).",
    )
    parser.add_argument("--overwrite", action="store_true", help="Overwrite existing mp3 files.")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print planned outputs without calling ElevenLabs.",
    )
    parser.add_argument(
        "--list-voices",
        action="store_true",
        help="Print available voices (name + voice_id) and exit.",
    )
    return parser


def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    load_env_file(args.env)
    settings = load_settings()

    if args.list_voices:
        provider = ElevenLabsProvider.from_settings(settings)
        for voice in provider.list_voices():
            print(f"{voice.name}\t{voice.voice_id}")
        return 0

    provider = None if args.dry_run else ElevenLabsProvider.from_settings(settings)
    summary = run_pipeline(
        settings=settings,
        provider=provider,
        out_dir=args.out,
        only=parse_only(args.only),
        overwrite=args.overwrite,
        dry_run=args.dry_run,
    )
    print(
        f"[main] done generated={summary['generated']} skipped={summary['skipped']} "
        f"planned={summary['planned']} seconds={summary['elapsed_seconds']}"
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    try:
        return run(argv)
    except Exception:
        traceback.print_exc(file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
