"""base64-convert interfaces package.

This package provides protocol definitions for Base64 conversion and the
encoders built on top of it.
"""

from .encoding import (
    IBase64Converter,
    IHasher,
    IIdentifierGenerator,
    INoncer,
    ITokenEncoder,
)

__all__ = [
    "IBase64Converter",
    "IHasher",
    "IIdentifierGenerator",
    "INoncer",
    "ITokenEncoder",
]
