"""URL-safe identifier generation.

This module provides nonce, random identifier and digest generators whose
output is unpadded base64url, safe to drop into URLs and file names.
"""

import secrets

import blake3

from base64_convert.convert import Base64Convert
from base64_convert.interfaces.encoding import IHasher, IIdentifierGenerator, INoncer


def _encode(data: bytes) -> str:
    return Base64Convert.encode_bytes(data, url_safe=True).decode("ascii")


async def _get_entropy(length: int) -> bytes:
    """Generate cryptographically secure random bytes.

    Args:
        length: The number of random bytes to generate.

    Returns:
        A bytes object containing the requested amount of random data.
    """
    return secrets.token_bytes(length)


class Noncer(INoncer):
    """Nonce generator that implements INoncer.

    Generates 128-bit nonces as 22 base64url characters.
    """

    async def generate128(self) -> str:
        entropy = await _get_entropy(16)  # 16 bytes = 128 bits
        return _encode(entropy)


class IdentifierGenerator(IIdentifierGenerator):
    """Random identifier generator.

    Attributes:
        length: Number of random bytes per identifier.
    """

    def __init__(self, length: int = 16) -> None:
        if length <= 0:
            raise ValueError(f"identifier length must be positive, got {length}")
        self.length = length

    async def generate(self) -> str:
        """Generate a random URL-safe identifier.

        Returns:
            ``length`` random bytes as unpadded base64url.
        """
        return _encode(await _get_entropy(self.length))


class Hasher(IHasher):
    """Hasher that uses Blake3 and implements IHasher.

    Produces 43-character base64url digests of Blake3-256 hashes.
    """

    async def sum(self, message: str) -> str:
        """Compute the hash of a message.

        The message is UTF-8 encoded, hashed with Blake3, and returned
        as unpadded base64url.

        Args:
            message: The message to hash.

        Returns:
            The base64url encoded digest.
        """
        hash_bytes = blake3.blake3(message.encode("utf-8")).digest()
        return _encode(hash_bytes)
