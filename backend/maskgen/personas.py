from __future__ import annotations

from maskgen.tts_types import ClipSpec, PersonaConfig, VoiceSettings


PERSONAS: tuple[PersonaConfig, ...] = (
    PersonaConfig(
        key="luna",
        display_name="Luna",
        voice_id_env="ELEVENLABS_VOICE_LUNA",
        voice_settings=VoiceSettings(stability=0.75, similarity_boost=0.9, style=0.1),
        clips=(
            ClipSpec(
                slug="welcome",
                text="Hi… I’m Luna.\n\nLet’s slow our breathing…\n\nand drift into the night.",
            ),
            ClipSpec(
                slug="hook",
                text=(
                    "Where should we travel tonight…\n\na snowy forest…\n\n"
                    "a quiet observatory…\n\nor a moonlit sea?"
                ),
            ),
            ClipSpec(
                slug="mask",
                text=(
                    "I’m weaving your story now.\n\nInhale softly…\n\nexhale slowly…\n\n"
                    "and let your eyelids grow heavy."
                ),
            ),
        ),
    ),
    PersonaConfig(
        key="kai",
        display_name="Kai",
        voice_id_env="ELEVENLABS_VOICE_KAI",
        voice_settings=VoiceSettings(stability=0.8, similarity_boost=0.9, style=0.05),
        clips=(
            ClipSpec(
                slug="welcome",
                text="Hey… I’m Kai.\n\nLet your shoulders soften…\n\nas we find calm together.",
            ),
            ClipSpec(
                slug="hook",
                text="Do you want waves on the shore…\n\nrain on leaves…\n\nor a slow walk under pines?",
            ),
            ClipSpec(
                slug="mask",
                text=(
                    "I’m gathering the waves for you.\n\nBreathe in…\n\nand out…\n\n"
                    "like the tide returning to shore."
                ),
            ),
        ),
    ),
    PersonaConfig(
        key="river",
        display_name="River",
        voice_id_env="ELEVENLABS_VOICE_RIVER",
        voice_settings=VoiceSettings(stability=0.78, similarity_boost=0.9, style=0.1),
        clips=(
            ClipSpec(
                slug="welcome",
                text="Hi… I’m River.\n\nWe’ll wander gently…\n\none quiet step at a time.",
            ),
            ClipSpec(
                slug="hook",
                text=(
                    "Where should our path begin…\n\na lantern-lit village…\n\n"
                    "a meadow at dusk…\n\nor a cozy train ride?"
                ),
            ),
            ClipSpec(
                slug="mask",
                text=(
                    "I’m shaping the path for our story.\n\nTake three slow breaths…\n\n"
                    "and let the day fade away."
                ),
            ),
        ),
    ),
    PersonaConfig(
        key="echo",
        display_name="Echo",
        voice_id_env="ELEVENLABS_VOICE_ECHO",
        voice_settings=VoiceSettings(stability=0.86, similarity_boost=0.9, style=0.05),
        clips=(
            ClipSpec(
                slug="welcome",
                text="Hi… I’m Echo.\n\nLet’s keep everything gentle…\n\nsoft…\n\nand slow.",
            ),
            ClipSpec(
                slug="hook",
                text="Which sound relaxes you most…\n\ntapping…\n\nbrushing…\n\nor gentle whispers?",
            ),
            ClipSpec(
                slug="mask",
                text="I’m here with you.\n\nSoften your jaw…\n\nlet your hands rest…\n\nand breathe.",
            ),
        ),
    ),
    PersonaConfig(
        key="sage",
        display_name="Sage",
        voice_id_env="ELEVENLABS_VOICE_SAGE",
        voice_settings=VoiceSettings(stability=0.88, similarity_boost=0.9, style=0.03),
        clips=(
            ClipSpec(
                slug="welcome",
                text="Good evening… I’m Sage.\n\nSettle in by the fire, my friend.\n\nYou’re safe here.",
            ),
            ClipSpec(
                slug="hook",
                text=(
                    "Would you like a folk tale…\n\na calm parable…\n\n"
                    "or a bedtime legend from long ago?"
                ),
            ),
            ClipSpec(
                slug="mask",
                text=(
                    "I’m choosing a gentle tale for you.\n\nBreathe in warmth…\n\n"
                    "breathe out worry…\n\nand rest."
                ),
            ),
        ),
    ),
)


def persona_keys() -> list[str]:
    return [p.key for p in PERSONAS]


def voice_env_names() -> list[str]:
    return [p.voice_id_env for p in PERSONAS]
