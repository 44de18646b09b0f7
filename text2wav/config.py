"""
Config module for text2wav package.

Resolves provider settings once from an environment mapping into immutable
records that are handed to the synthesis clients.
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Union

from .errors import InvalidConfiguration, MissingCredential

# ----------------------------
# Defaults
# ----------------------------
OPENAI_DEFAULT_MODEL = "tts-1-hd"
OPENAI_DEFAULT_VOICE = "fable"
OPENAI_DEFAULT_SPEED = 1.0
OPENAI_DEFAULT_INSTRUCTIONS = "Calm, slightly dramatic storyteller."
OPENAI_SPEED_RANGE = (0.5, 2.0)

GEMINI_DEFAULT_MODEL = "gemini-2.5-flash-preview-tts"
GEMINI_DEFAULT_VOICE = "Iapetus"
GEMINI_DEFAULT_STYLE = (
    "Neutral storyteller with a mild British accent and a very slight dramatic tone"
)

# Models that take a fixed voice and a speed instead of free-text instructions.
FIXED_VOICE_MODELS = ["tts-1", "tts-1-hd"]


def _lookup(environ: Mapping[str, str], name: str, override: Optional[str], default: str) -> str:
    if override not in (None, ""):
        return override
    value = (environ.get(name) or "").strip()
    return value or default


def _require_key(environ: Mapping[str, str], name: str) -> str:
    key = (environ.get(name) or "").strip()
    if not key:
        raise MissingCredential(f"{name} missing (set it in your environment or .env)")
    return key


def parse_speed(raw) -> float:
    """Parse and range-check a speech speed value."""
    try:
        speed = float(raw)
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"Speed must be a number, got {raw!r}")
    low, high = OPENAI_SPEED_RANGE
    if not (low <= speed <= high):
        raise InvalidConfiguration(f"Speed must be between {low} and {high}, got {speed}")
    return speed


@dataclass(frozen=True)
class OpenAIConfig:
    api_key: str
    model: str = OPENAI_DEFAULT_MODEL
    voice: str = OPENAI_DEFAULT_VOICE
    speed: float = OPENAI_DEFAULT_SPEED
    instructions: str = OPENAI_DEFAULT_INSTRUCTIONS

    @property
    def uses_instructions(self) -> bool:
        return self.model not in FIXED_VOICE_MODELS

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str],
        model: Optional[str] = None,
        voice: Optional[str] = None,
        speed: Optional[Union[str, float]] = None,
        instructions: Optional[str] = None,
    ) -> "OpenAIConfig":
        """
        Build the OpenAI configuration.

        Explicit arguments win over OPENAI_API_KEY, TTS_MODEL, TTS_VOICE,
        TTS_SPEED and TTS_INSTR, which win over the module defaults.

        Raises:
            MissingCredential: OPENAI_API_KEY is unset or blank
            InvalidConfiguration: the speed is not a number in range
        """
        api_key = _require_key(environ, "OPENAI_API_KEY")
        if speed is None:
            speed = (environ.get("TTS_SPEED") or "").strip() or OPENAI_DEFAULT_SPEED
        return cls(
            api_key=api_key,
            model=_lookup(environ, "TTS_MODEL", model, OPENAI_DEFAULT_MODEL),
            voice=_lookup(environ, "TTS_VOICE", voice, OPENAI_DEFAULT_VOICE),
            speed=parse_speed(speed),
            instructions=_lookup(environ, "TTS_INSTR", instructions, OPENAI_DEFAULT_INSTRUCTIONS),
        )


@dataclass(frozen=True)
class GeminiConfig:
    api_key: str
    model: str = GEMINI_DEFAULT_MODEL
    voice: str = GEMINI_DEFAULT_VOICE
    style: str = GEMINI_DEFAULT_STYLE

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str],
        model: Optional[str] = None,
        voice: Optional[str] = None,
        style: Optional[str] = None,
    ) -> "GeminiConfig":
        """Build the Gemini configuration from GEMINI_* variables and overrides."""
        return cls(
            api_key=_require_key(environ, "GEMINI_API_KEY"),
            model=_lookup(environ, "GEMINI_TTS_MODEL", model, GEMINI_DEFAULT_MODEL),
            voice=_lookup(environ, "GEMINI_VOICE", voice, GEMINI_DEFAULT_VOICE),
            style=_lookup(environ, "GEMINI_STYLE", style, GEMINI_DEFAULT_STYLE),
        )
