"""
WAV module for text2wav package.

Builds and parses canonical 44-byte RIFF/WAVE headers and assembles several
synthesized WAV responses into a single container.
"""

import struct
from dataclasses import dataclass
from typing import BinaryIO

from .errors import InvalidAudioContainer

HEADER_SIZE = 44
PCM_FORMAT_TAG = 1

# RIFF id, RIFF size, WAVE, "fmt ", fmt size, format tag, channels, sample rate,
# byte rate, block align, bits per sample, "data", data size
_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")


@dataclass(frozen=True)
class WavFormat:
    sample_rate: int = 24000
    channels: int = 1
    bits_per_sample: int = 16

    @property
    def block_align(self) -> int:
        return self.channels * self.bits_per_sample // 8

    @property
    def byte_rate(self) -> int:
        return self.sample_rate * self.block_align


PCM_24K_MONO_16 = WavFormat()


def build_header(fmt: WavFormat, data_size: int) -> bytes:
    """Return the 44-byte header for `data_size` bytes of PCM in `fmt`."""
    return _HEADER.pack(
        b"RIFF",
        HEADER_SIZE - 8 + data_size,
        b"WAVE",
        b"fmt ",
        16,
        PCM_FORMAT_TAG,
        fmt.channels,
        fmt.sample_rate,
        fmt.byte_rate,
        fmt.block_align,
        fmt.bits_per_sample,
        b"data",
        data_size,
    )


def parse_header(data: bytes, header_size: int = HEADER_SIZE) -> WavFormat:
    """
    Validate the leading header of a WAV container and return its format.

    Only the sample layout is returned; the size fields of streamed responses
    are placeholders and are not checked.

    Raises:
        InvalidAudioContainer: data is too short or the markers are wrong
    """
    if header_size < HEADER_SIZE:
        raise ValueError(f"Header size must be at least {HEADER_SIZE}, got {header_size}")
    if len(data) < header_size:
        raise InvalidAudioContainer(
            f"audio response is {len(data)} bytes, shorter than a {header_size}-byte header"
        )
    (riff, _, wave, fmt_id, _, tag, channels, rate, _, _, bits, _, _) = _HEADER.unpack_from(data)
    if riff != b"RIFF" or wave != b"WAVE" or fmt_id != b"fmt ":
        raise InvalidAudioContainer("audio response is not a RIFF/WAVE container")
    if data[header_size - 8:header_size - 4] != b"data":
        raise InvalidAudioContainer(f"no data chunk at byte {header_size - 8} of audio response")
    if tag != PCM_FORMAT_TAG:
        raise InvalidAudioContainer(f"audio response is not linear PCM (format tag {tag})")
    return WavFormat(sample_rate=rate, channels=channels, bits_per_sample=bits)


def pcm_to_wav(pcm: bytes, fmt: WavFormat = PCM_24K_MONO_16) -> bytes:
    """Wrap a raw little-endian PCM payload in a WAV container."""
    return build_header(fmt, len(pcm)) + pcm


class WavAssembler:
    """
    Streams consecutive WAV responses into one container.

    The first response is written verbatim. Every later response must carry
    the same sample layout; its header is dropped and only the samples are
    appended. `finalize` rewrites the size fields to the real payload length.
    """

    def __init__(self, stream: BinaryIO, header_size: int = HEADER_SIZE):
        self.stream = stream
        self.header_size = header_size
        self.format = None
        self.data_size = 0
        self.count = 0

    def append(self, container: bytes) -> None:
        fmt = parse_header(container, self.header_size)
        if self.format is None:
            self.format = fmt
            self.stream.write(container)
        elif fmt != self.format:
            raise InvalidAudioContainer(
                f"audio response {self.count + 1} is {fmt}, expected {self.format}"
            )
        else:
            self.stream.write(container[self.header_size:])
        self.data_size += len(container) - self.header_size
        self.count += 1

    def finalize(self) -> None:
        if self.format is None:
            raise InvalidAudioContainer("no audio responses to assemble")
        self.stream.seek(4)
        self.stream.write(struct.pack("<I", self.header_size - 8 + self.data_size))
        self.stream.seek(self.header_size - 4)
        self.stream.write(struct.pack("<I", self.data_size))
        self.stream.seek(0, 2)
        self.stream.flush()
