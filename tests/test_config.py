import os
import sys
import unittest


ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from text2wav.config import (  # noqa: E402
    GEMINI_DEFAULT_MODEL,
    GEMINI_DEFAULT_STYLE,
    GEMINI_DEFAULT_VOICE,
    OPENAI_DEFAULT_INSTRUCTIONS,
    GeminiConfig,
    OpenAIConfig,
)
from text2wav.errors import InvalidConfiguration, MissingCredential  # noqa: E402


class OpenAIConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        config = OpenAIConfig.from_env({"OPENAI_API_KEY": "sk-test"})
        self.assertEqual(config.api_key, "sk-test")
        self.assertEqual(config.model, "tts-1-hd")
        self.assertEqual(config.voice, "fable")
        self.assertEqual(config.speed, 1.0)
        self.assertEqual(config.instructions, OPENAI_DEFAULT_INSTRUCTIONS)
        self.assertFalse(config.uses_instructions)

    def test_environment_values(self) -> None:
        config = OpenAIConfig.from_env({
            "OPENAI_API_KEY": "sk-test",
            "TTS_MODEL": "gpt-4o-mini-tts",
            "TTS_VOICE": "nova",
            "TTS_SPEED": "0.9",
            "TTS_INSTR": "Whisper.",
        })
        self.assertEqual(config.model, "gpt-4o-mini-tts")
        self.assertEqual(config.voice, "nova")
        self.assertEqual(config.speed, 0.9)
        self.assertEqual(config.instructions, "Whisper.")
        self.assertTrue(config.uses_instructions)

    def test_overrides_win_over_environment(self) -> None:
        config = OpenAIConfig.from_env(
            {"OPENAI_API_KEY": "sk-test", "TTS_VOICE": "nova", "TTS_SPEED": "0.9"},
            voice="onyx",
            speed=1.5,
        )
        self.assertEqual(config.voice, "onyx")
        self.assertEqual(config.speed, 1.5)

    def test_blank_values_fall_back_to_defaults(self) -> None:
        config = OpenAIConfig.from_env({"OPENAI_API_KEY": "sk-test", "TTS_VOICE": "  ", "TTS_SPEED": ""})
        self.assertEqual(config.voice, "fable")
        self.assertEqual(config.speed, 1.0)

    def test_missing_key(self) -> None:
        for env in ({}, {"OPENAI_API_KEY": ""}, {"OPENAI_API_KEY": "   "}):
            with self.assertRaises(MissingCredential) as ctx:
                OpenAIConfig.from_env(env)
            self.assertIn("OPENAI_API_KEY", str(ctx.exception))

    def test_speed_out_of_range(self) -> None:
        for raw in ("0.4", "2.5", "fast"):
            with self.assertRaises(InvalidConfiguration):
                OpenAIConfig.from_env({"OPENAI_API_KEY": "sk-test", "TTS_SPEED": raw})

    def test_config_is_immutable(self) -> None:
        config = OpenAIConfig.from_env({"OPENAI_API_KEY": "sk-test"})
        with self.assertRaises(AttributeError):
            config.voice = "nova"  # type: ignore[misc]


class GeminiConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        config = GeminiConfig.from_env({"GEMINI_API_KEY": "g-test"})
        self.assertEqual(config.model, GEMINI_DEFAULT_MODEL)
        self.assertEqual(config.voice, GEMINI_DEFAULT_VOICE)
        self.assertEqual(config.style, GEMINI_DEFAULT_STYLE)

    def test_environment_and_overrides(self) -> None:
        config = GeminiConfig.from_env(
            {"GEMINI_API_KEY": "g-test", "GEMINI_VOICE": "Kore", "GEMINI_STYLE": "Cheerful"},
            voice="Puck",
        )
        self.assertEqual(config.voice, "Puck")
        self.assertEqual(config.style, "Cheerful")

    def test_missing_key(self) -> None:
        with self.assertRaises(MissingCredential) as ctx:
            GeminiConfig.from_env({"OPENAI_API_KEY": "sk-test"})
        self.assertIn("GEMINI_API_KEY", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
