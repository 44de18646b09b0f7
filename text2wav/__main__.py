"""
Entry point for the text2wav package when run as a module.

This runs the OpenAI program:
    python -m text2wav <input.txt> <output.wav>
"""

from .cli import main_openai

if __name__ == "__main__":
    main_openai()
