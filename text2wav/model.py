"""
Model module for text2wav package.

Contains the provider synthesis clients (OpenAI speech, Gemini audio) and the
two synthesis flows that turn their responses into a WAV file.
"""

import base64
import binascii
from pathlib import Path
from typing import Optional, Tuple

import regex as re
from google import genai
from google.genai import types
from openai import OpenAI

from .config import GeminiConfig, OpenAIConfig
from .errors import NoAudioReturned, SynthesisRequestFailed
from .output import open_output, write_output
from .text import CHUNK_LEN, chunk_text
from .wav import HEADER_SIZE, PCM_24K_MONO_16, WavAssembler, WavFormat, pcm_to_wav

# ----------------------------
# Constants and catalogs
# ----------------------------
KNOWN_OPENAI_VOICES = [
    "alloy", "ash", "ballad", "coral", "echo", "fable",
    "nova", "onyx", "sage", "shimmer", "verse",
]

KNOWN_OPENAI_MODELS = ["tts-1", "tts-1-hd", "gpt-4o-mini-tts"]

KNOWN_GEMINI_VOICES = [
    "Achernar", "Achird", "Algenib", "Algieba", "Alnilam", "Aoede",
    "Autonoe", "Callirrhoe", "Charon", "Despina", "Enceladus", "Erinome",
    "Fenrir", "Gacrux", "Iapetus", "Kore", "Laomedeia", "Leda", "Orus",
    "Puck", "Pulcherrima", "Rasalgethi", "Sadachbia", "Sadaltager",
    "Schedar", "Sulafat", "Umbriel", "Vindemiatrix", "Zephyr", "Zubenelgenubi",
]

_RATE_PARAM = re.compile(r";\s*rate\s*=\s*(\d+)", re.IGNORECASE)


# ----------------------------
# OpenAI (chunked, one WAV per request)
# ----------------------------
class OpenAISynthesizer:
    """Requests one complete WAV container per text chunk."""

    def __init__(self, client: OpenAI, config: OpenAIConfig):
        self.client = client
        self.config = config

    def request_params(self, text: str) -> dict:
        params = {
            "model": self.config.model,
            "voice": self.config.voice,
            "input": text,
            "response_format": "wav",
        }
        # tts-1 / tts-1-hd take a speed; newer models take style instructions
        if self.config.uses_instructions:
            params["instructions"] = self.config.instructions
        else:
            params["speed"] = self.config.speed
        return params

    def synthesize(self, text: str) -> bytes:
        try:
            response = self.client.audio.speech.create(**self.request_params(text))
            return response.content
        except Exception as e:
            raise SynthesisRequestFailed(f"TTS generation failed: {e}") from e


# ----------------------------
# Gemini (single shot, inline raw PCM)
# ----------------------------
def rate_from_mime_type(mime_type: Optional[str], default: int = PCM_24K_MONO_16.sample_rate) -> int:
    """Read the sample rate from e.g. 'audio/L16;codec=pcm;rate=24000'."""
    match = _RATE_PARAM.search(mime_type or "")
    return int(match.group(1)) if match else default


def extract_inline_audio(response) -> Tuple[bytes, Optional[str]]:
    """
    Pull the first candidate's inline audio out of a generateContent reply.

    Returns:
        Tuple of (pcm_bytes, mime_type)

    Raises:
        NoAudioReturned: the reply has no candidate, part or audio payload
    """
    candidates = getattr(response, "candidates", None) or []
    content = getattr(candidates[0], "content", None) if candidates else None
    parts = getattr(content, "parts", None) or []
    inline = getattr(parts[0], "inline_data", None) if parts else None
    data = getattr(inline, "data", None)
    if not data:
        raise NoAudioReturned("no audio returned – check model & voice names")
    if isinstance(data, str):
        try:
            data = base64.b64decode(data, validate=True)
        except binascii.Error as e:
            raise NoAudioReturned(f"audio payload is not valid base64: {e}") from e
    return data, getattr(inline, "mime_type", None)


class GeminiSynthesizer:
    """Requests the whole narration as raw PCM in a single call."""

    def __init__(self, client: genai.Client, config: GeminiConfig):
        self.client = client
        self.config = config

    def prompt(self, text: str) -> str:
        # Style cue first so the model follows the requested tone.
        return f"{self.config.style}:\n{text}"

    def request_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            response_modalities=["AUDIO"],
            speech_config=types.SpeechConfig(
                voice_config=types.VoiceConfig(
                    prebuilt_voice_config=types.PrebuiltVoiceConfig(
                        voice_name=self.config.voice
                    )
                )
            ),
        )

    def synthesize(self, text: str) -> Tuple[bytes, WavFormat]:
        try:
            response = self.client.models.generate_content(
                model=self.config.model,
                contents=self.prompt(text),
                config=self.request_config(),
            )
        except Exception as e:
            raise SynthesisRequestFailed(f"Generation failed: {e}") from e

        pcm, mime_type = extract_inline_audio(response)
        fmt = WavFormat(
            sample_rate=rate_from_mime_type(mime_type),
            channels=PCM_24K_MONO_16.channels,
            bits_per_sample=PCM_24K_MONO_16.bits_per_sample,
        )
        return pcm, fmt


# ----------------------------
# Synthesis flows
# ----------------------------
def synthesize_chunked(
    synthesizer: OpenAISynthesizer,
    text: str,
    out_path: Path,
    chunk_size: int = CHUNK_LEN,
    header_size: int = HEADER_SIZE,
    progress=None,
) -> WavAssembler:
    """
    Synthesize `text` chunk by chunk, streaming each response to `out_path`.

    Chunk i is requested only after chunk i-1 has been written. Any failure
    aborts the run and removes the partial file.

    Returns:
        The assembler, holding the final format, payload size and chunk count
    """
    chunks = chunk_text(text, chunk_size)
    task = progress.add_task("Synthesizing audio...", total=len(chunks)) if progress else None

    with open_output(out_path) as out:
        assembler = WavAssembler(out, header_size=header_size)
        for i, chunk in enumerate(chunks, 1):
            if progress:
                progress.update(task, description=f"(TTS) chunk {i}/{len(chunks)}")
            else:
                print(f"(TTS) chunk {i}/{len(chunks)}")
            assembler.append(synthesizer.synthesize(chunk))
            if progress:
                progress.advance(task, 1)
        assembler.finalize()

    if progress:
        progress.stop_task(task)
    return assembler


def synthesize_single(synthesizer: GeminiSynthesizer, text: str, out_path: Path, progress=None) -> WavFormat:
    """Synthesize `text` in one call and write it as a WAV file."""
    task = progress.add_task("Generating TTS...", total=None) if progress else None
    pcm, fmt = synthesizer.synthesize(text)
    write_output(out_path, pcm_to_wav(pcm, fmt))
    if progress:
        progress.stop_task(task)
    return fmt
