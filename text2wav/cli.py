"""
CLI module for text2wav package.

Contains command-line argument parsing and the main application logic of the
two programs: text2wav-openai (chunked OpenAI speech) and text2wav-gemini
(single-shot Gemini audio).
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Mapping, Optional, Sequence, Tuple

from dotenv import load_dotenv
from google import genai
from openai import OpenAI

from .config import GeminiConfig, OpenAIConfig
from .errors import MissingArguments, Text2WavError
from .model import (
    KNOWN_GEMINI_VOICES,
    KNOWN_OPENAI_MODELS,
    KNOWN_OPENAI_VOICES,
    GeminiSynthesizer,
    OpenAISynthesizer,
    synthesize_chunked,
    synthesize_single,
)
from .text import load_text
from .ui import print_error, print_saved, print_voices, progress_context


# ----------------------------
# CLI setup
# ----------------------------
def _add_paths(parser: argparse.ArgumentParser) -> None:
    # Optional at the argparse level so a missing path exits 1 like every other error.
    parser.add_argument("input", nargs="?", metavar="input.txt", help="UTF-8 text file to narrate.")
    parser.add_argument("output", nargs="?", metavar="output.wav", help="Destination WAV file.")
    parser.add_argument("--list-voices", action="store_true",
                        help="Print a curated list of common voice names and exit.")


def create_openai_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser for the OpenAI program."""
    parser = argparse.ArgumentParser(
        prog="text2wav-openai",
        description="Narrate a text file into a WAV file using OpenAI TTS.",
        epilog="Environment: OPENAI_API_KEY (required), TTS_MODEL, TTS_VOICE, TTS_SPEED, TTS_INSTR.",
    )
    _add_paths(parser)
    parser.add_argument("--model", help=f"TTS model (default: $TTS_MODEL or tts-1-hd; known: "
                                         f"{', '.join(KNOWN_OPENAI_MODELS)}).")
    parser.add_argument("--voice", help="Voice name (default: $TTS_VOICE or fable).")
    parser.add_argument("--speed",
                        help="Speech speed 0.5-2.0, tts-1 models only (default: $TTS_SPEED or 1.0).")
    parser.add_argument("--instructions",
                        help="Voice style instructions, instruction-driven models only (default: $TTS_INSTR).")
    return parser


def create_gemini_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser for the Gemini program."""
    parser = argparse.ArgumentParser(
        prog="text2wav-gemini",
        description="Narrate a text file into a WAV file using Gemini TTS.",
        epilog="Environment: GEMINI_API_KEY (required), GEMINI_TTS_MODEL, GEMINI_VOICE, GEMINI_STYLE.",
    )
    _add_paths(parser)
    parser.add_argument("--model", help="TTS model (default: $GEMINI_TTS_MODEL or gemini-2.5-flash-preview-tts).")
    parser.add_argument("--voice", help="Prebuilt voice name (default: $GEMINI_VOICE or Iapetus).")
    parser.add_argument("--style", help="Style cue prepended to the text (default: $GEMINI_STYLE).")
    return parser


def require_paths(parser: argparse.ArgumentParser, args) -> Tuple[Path, Path]:
    """Return the absolute input and output paths, or raise MissingArguments."""
    if not args.input or not args.output:
        raise MissingArguments(f"input.txt and output.wav are required\n{parser.format_usage().strip()}")
    return Path(args.input).resolve(), Path(args.output).resolve()


# ----------------------------
# Main application logic
# ----------------------------
def run_openai(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    client_factory=OpenAI,
) -> int:
    """Run the OpenAI program and return its exit code."""
    parser = create_openai_parser()
    args = parser.parse_args(argv)

    if args.list_voices:
        print_voices(KNOWN_OPENAI_VOICES)
        return 0

    try:
        config = OpenAIConfig.from_env(
            os.environ if environ is None else environ,
            model=args.model,
            voice=args.voice,
            speed=args.speed,
            instructions=args.instructions,
        )
        in_path, out_path = require_paths(parser, args)
        text = load_text(in_path)

        synthesizer = OpenAISynthesizer(client_factory(api_key=config.api_key), config)
        with progress_context() as progress:
            synthesize_chunked(synthesizer, text, out_path, progress=progress)
    except Text2WavError as e:
        print_error(str(e))
        return e.exit_code

    details = f"Model : {config.model}"
    if not config.uses_instructions:
        details += f" | voice: {config.voice} | speed: {config.speed}"
    print_saved(out_path, details)
    return 0


def run_gemini(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    client_factory=genai.Client,
) -> int:
    """Run the Gemini program and return its exit code."""
    parser = create_gemini_parser()
    args = parser.parse_args(argv)

    if args.list_voices:
        print_voices(KNOWN_GEMINI_VOICES)
        return 0

    try:
        config = GeminiConfig.from_env(
            os.environ if environ is None else environ,
            model=args.model,
            voice=args.voice,
            style=args.style,
        )
        in_path, out_path = require_paths(parser, args)
        text = load_text(in_path)

        print(f"Generating TTS…  model={config.model}  voice={config.voice}")
        synthesizer = GeminiSynthesizer(client_factory(api_key=config.api_key), config)
        with progress_context() as progress:
            fmt = synthesize_single(synthesizer, text, out_path, progress=progress)
    except Text2WavError as e:
        print_error(str(e))
        return e.exit_code

    print_saved(out_path, f"Model : {config.model} | voice: {config.voice} | {fmt.sample_rate} Hz")
    return 0


def main_openai():
    """Entry point for the text2wav-openai command."""
    load_dotenv()
    sys.exit(run_openai())


def main_gemini():
    """Entry point for the text2wav-gemini command."""
    load_dotenv()
    sys.exit(run_gemini())
