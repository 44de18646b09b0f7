"""
Errors module for text2wav package.

Every failure a run can hit has its own exception class. Components raise
them; the CLI turns them into a single stderr message and exit code 1.
"""


class Text2WavError(Exception):
    """Base class for all terminal text2wav failures."""

    kind = "error"
    exit_code = 1


class MissingCredential(Text2WavError):
    kind = "missing_credential"


class MissingArguments(Text2WavError):
    kind = "missing_arguments"


class InvalidConfiguration(Text2WavError):
    kind = "invalid_configuration"


class FileNotFound(Text2WavError):
    kind = "file_not_found"

    def __init__(self, path):
        super().__init__(f"input file not found → {path}")
        self.path = path


class InputReadFailed(Text2WavError):
    kind = "input_read_failed"

    def __init__(self, path, reason):
        super().__init__(f"cannot read input file → {path}: {reason}")
        self.path = path


class EmptyInput(Text2WavError):
    kind = "empty_input"

    def __init__(self, path):
        super().__init__(f"input file is empty → {path}")
        self.path = path


class SynthesisRequestFailed(Text2WavError):
    kind = "synthesis_request_failed"


class NoAudioReturned(Text2WavError):
    kind = "no_audio_returned"


class InvalidAudioContainer(Text2WavError):
    kind = "invalid_audio_container"


class OutputWriteFailed(Text2WavError):
    kind = "output_write_failed"
