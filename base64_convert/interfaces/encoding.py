"""Encoding interfaces for base64-convert.

This module defines protocols for Base64 conversion, token encoding/decoding,
hashing and nonce generation.
"""

from __future__ import annotations

from typing import Protocol


class IBase64Converter(Protocol):
    """Interface for Base64 conversion between bytes and text."""

    def encode(self, data: bytes) -> str:
        """Encode bytes to a Base64 string.

        Args:
            data: The bytes to encode.

        Returns:
            The Base64 encoded string.
        """
        ...

    def decode(self, value: str) -> bytes:
        """Decode a Base64 string to bytes.

        Args:
            value: The Base64 string to decode, standard or URL-safe.

        Returns:
            The decoded bytes.

        Raises:
            InvalidBase64Input: When the value is not valid Base64.
        """
        ...


class ITokenEncoder(Protocol):
    """Interface for token encoding and decoding operations."""

    async def encode(self, object: str) -> str:
        """Encode an object string into a token.

        Args:
            object: The object string to encode.

        Returns:
            The encoded token.
        """
        ...

    async def decode(self, raw_token: str) -> str:
        """Decode a raw token into an object string.

        Args:
            raw_token: The raw token to decode.

        Returns:
            The decoded object string.
        """
        ...


class IHasher(Protocol):
    """Interface for hashing messages into identifiers."""

    async def sum(self, message: str) -> str:
        """Compute the hash of a message.

        Args:
            message: The message to hash.

        Returns:
            The hash as a string.
        """
        ...


class INoncer(Protocol):
    """Interface for nonce generation."""

    async def generate128(self) -> str:
        """Generate a nonce with 128 bits of entropy.

        Returns:
            A nonce string with 128 bits of entropy.
        """
        ...


class IIdentifierGenerator(Protocol):
    """Interface for random identifier generation."""

    async def generate(self) -> str:
        """Generate a random identifier.

        Returns:
            A new identifier string.
        """
        ...
