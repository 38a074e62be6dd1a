"""Encoding reference implementation package.

This package provides encoders built on the base64 converter, including
token compression/encoding and URL-safe identifier generation.
"""

from .identifier import Hasher, IdentifierGenerator, Noncer
from .token_encoder import TokenEncoder, TokenEncoderConfig

__all__ = [
    "Hasher",
    "IdentifierGenerator",
    "Noncer",
    "TokenEncoder",
    "TokenEncoderConfig",
]
