"""Base64 conversion with a URL-safe variant.

This module provides standard (RFC 4648 Section 4) and URL-safe (RFC 4648
Section 5) base64 encoding/decoding over bytes and UTF-8 text. URL-safe output
omits padding, and decoding accepts either alphabet with or without padding.
"""

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass
from typing import Union

from base64_convert.exceptions import InvalidBase64Input
from base64_convert.interfaces.encoding import IBase64Converter

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]

PADDING = ord("=")

_TEXT_ENCODING = "utf-8"

# 256-entry lookup tables, exact inverses of each other
_ENCODING_REPLACEMENTS = bytes.maketrans(b"+/", b"-_")
_DECODING_REPLACEMENTS = bytes.maketrans(b"-_", b"+/")

# padding to append, keyed by input length % 4
_PADDING_OFFSETS = (0, 0, 2, 1)


def max_encoded_length(length: int) -> int:
    """Return the longest base64 output ``length`` input bytes can produce.

    Args:
        length: The number of bytes to encode.

    Returns:
        ``ceil(length / 3) * 4``.
    """
    return (length + 2) // 3 * 4


def max_decoded_length(length: int) -> int:
    """Return the longest output ``length`` padded base64 bytes can decode to.

    Args:
        length: The number of base64 bytes, padding included.

    Returns:
        ``length // 4 * 3``.
    """
    return length // 4 * 3


def _replace(buffer: bytearray, length: int, replacements: bytes) -> None:
    """Substitute characters in ``buffer[:length]`` in place using a lookup table."""
    buffer[:length] = buffer[:length].translate(replacements)


def _pad_end(buffer: bytearray, padding_length: int) -> None:
    for i in range(1, padding_length + 1):
        buffer[-i] = PADDING


def _trim_end_padding(buffer: bytes | bytearray, length: int) -> int:
    """Return ``length`` less any consecutive padding at the end of ``buffer[:length]``."""
    while length > 0 and buffer[length - 1] == PADDING:
        length -= 1
    return length


def _as_bytes_view(value: BytesLike) -> memoryview:
    """Return a flat one-byte-per-item view of ``value``, so ``len`` counts bytes."""
    return memoryview(value).cast("B")


def _decode(value: bytearray) -> bytes:
    """Run the strict standard base64 transform over ``value``.

    Raises:
        InvalidBase64Input: When ``value`` holds characters outside the standard
            alphabet or inconsistent padding.
    """
    try:
        return base64.b64decode(value, validate=True)
    except binascii.Error as e:
        logger.debug("rejected base64 input of length %d: %s", len(value), e)
        raise InvalidBase64Input(f"invalid base64 input: {e}") from e


class Base64Convert:
    """Base64 encoding utilities for standard and URL-safe base64 operations.

    This class provides static methods to encode bytes or text to base64 and
    decode base64 back. With ``url_safe`` set, encoding replaces + with - and
    / with _ and drops the trailing padding. Decoding handles both alphabets
    and restores missing padding itself.

    Example:
        >>> Base64Convert.encode_text("Hello World")
        'SGVsbG8gV29ybGQ='
        >>> Base64Convert.encode_text("Hello World", url_safe=True)
        'SGVsbG8gV29ybGQ'
        >>> Base64Convert.decode_text("SGVsbG8gV29ybGQ")
        'Hello World'
    """

    @staticmethod
    def encode_text(value: str, url_safe: bool = False) -> str:
        """Encode the UTF-8 bytes of a string to a base64 string.

        Args:
            value: The string to encode.
            url_safe: Whether the result uses the URL-safe alphabet without padding.

        Returns:
            A base64 representation of ``value``.
        """
        encoded, _ = Base64Convert.encode_text_with_count(value, url_safe)
        return encoded

    @staticmethod
    def encode_text_with_count(value: str, url_safe: bool = False) -> tuple[str, int]:
        """Encode a string to base64, also reporting the number of bytes written.

        Args:
            value: The string to encode.
            url_safe: Whether the result uses the URL-safe alphabet without padding.

        Returns:
            A tuple of the base64 string and its length in bytes.
        """
        encoded, bytes_written = Base64Convert.encode_bytes_with_count(
            value.encode(_TEXT_ENCODING), url_safe
        )
        return encoded.decode(_TEXT_ENCODING), bytes_written

    @staticmethod
    def encode_bytes(value: BytesLike, url_safe: bool = False) -> bytes:
        """Encode bytes to base64, returned as ASCII bytes.

        Args:
            value: The bytes to encode.
            url_safe: Whether the result uses the URL-safe alphabet without padding.

        Returns:
            A base64 representation of ``value``.
        """
        encoded, _ = Base64Convert.encode_bytes_with_count(value, url_safe)
        return encoded

    @staticmethod
    def encode_bytes_with_count(
        value: BytesLike, url_safe: bool = False
    ) -> tuple[bytes, int]:
        """Encode bytes to base64, also reporting the number of bytes written.

        The standard transform output, at most ``max_encoded_length`` bytes, is
        returned as is. In URL-safe mode it is substituted through the lookup
        table in one pass and its trailing padding trimmed.

        Args:
            value: The bytes to encode.
            url_safe: Whether the result uses the URL-safe alphabet without padding.

        Returns:
            A tuple of the encoded bytes and their length after trimming.

        Example:
            >>> Base64Convert.encode_bytes_with_count(b"Hello World", url_safe=True)
            (b'SGVsbG8gV29ybGQ', 15)
        """
        encoded = base64.b64encode(_as_bytes_view(value))
        bytes_written = len(encoded)

        if url_safe:
            encoded = encoded.translate(_ENCODING_REPLACEMENTS)
            bytes_written = _trim_end_padding(encoded, bytes_written)
            encoded = encoded[:bytes_written]

        return encoded, bytes_written

    @staticmethod
    def decode_text(value: str) -> str:
        """Decode a base64 string to plain text, using UTF-8.

        Accepts standard and URL-safe input, padded or not.

        Args:
            value: The base64 string to decode.

        Returns:
            The decoded text.

        Raises:
            InvalidBase64Input: When ``value`` is not valid base64.
            UnicodeDecodeError: If the decoded bytes are not valid UTF-8.
        """
        decoded = Base64Convert.decode_bytes(value.encode(_TEXT_ENCODING))
        return decoded.decode(_TEXT_ENCODING)

    @staticmethod
    def decode_bytes(value: BytesLike) -> bytes:
        """Decode base64 bytes, standard or URL-safe, padded or not.

        The input is copied into a scratch buffer with room for any missing
        padding, the URL-safe characters are mapped back to the standard
        alphabet, the padding is written, and the result is run through the
        strict standard transform.

        Args:
            value: The base64 data to decode.

        Returns:
            The decoded bytes.

        Raises:
            InvalidBase64Input: When ``value`` is not valid base64, including a
                length of one more than a multiple of four.
        """
        value = _as_bytes_view(value)
        length = len(value)
        if length % 4 == 1:
            logger.debug("rejected base64 input of length %d", length)
            raise InvalidBase64Input(
                f"invalid base64 length {length}: cannot be 1 more than a multiple of 4"
            )

        offset = _PADDING_OFFSETS[length % 4]

        encoded = bytearray(length + offset)
        encoded[:length] = value

        _replace(encoded, length, _DECODING_REPLACEMENTS)
        _pad_end(encoded, offset)

        return _decode(encoded)


@dataclass
class ConverterConfig:
    """Configuration for a Base64Converter.

    Attributes:
        url_safe: Encode with the URL-safe alphabet and without padding.
    """

    url_safe: bool = True


class Base64Converter(IBase64Converter):
    """Configured base64 converter implementing IBase64Converter.

    Wraps ``Base64Convert`` so encoders can be handed a converter instead of
    choosing an alphabet themselves.

    Attributes:
        config: The converter configuration.
    """

    def __init__(self, config: ConverterConfig | None = None) -> None:
        self.config = config if config is not None else ConverterConfig()

    def encode(self, data: bytes) -> str:
        return Base64Convert.encode_bytes(data, self.config.url_safe).decode(
            _TEXT_ENCODING
        )

    def decode(self, value: str) -> bytes:
        return Base64Convert.decode_bytes(value.encode(_TEXT_ENCODING))

    def encode_text(self, value: str) -> str:
        return Base64Convert.encode_text(value, self.config.url_safe)

    def decode_text(self, value: str) -> str:
        return Base64Convert.decode_text(value)
