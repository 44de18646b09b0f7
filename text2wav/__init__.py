"""
text2wav - Text to narrated WAV conversion using hosted TTS providers.

Two CLI programs share one pipeline: text2wav-openai synthesizes the text in
8000-character chunks with OpenAI TTS and joins the WAV responses into one
container; text2wav-gemini synthesizes it in a single Gemini call and wraps
the returned raw PCM in a WAV header.
"""

__version__ = "0.1.0"

from .config import GeminiConfig, OpenAIConfig
from .model import GeminiSynthesizer, OpenAISynthesizer, synthesize_chunked, synthesize_single
from .cli import main_gemini, main_openai

__all__ = [
    "OpenAIConfig",
    "GeminiConfig",
    "OpenAISynthesizer",
    "GeminiSynthesizer",
    "synthesize_chunked",
    "synthesize_single",
    "main_openai",
    "main_gemini",
]
