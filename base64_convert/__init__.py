"""base64-convert Python implementation.

This package converts bytes and UTF-8 text to and from standard or URL-safe
base64 (RFC 4648), with URL-safe output left unpadded and decoding that
accepts either alphabet with or without padding.

Main Components:
    - Base64Convert: Static encode/decode API
    - Base64Converter: Configured converter for injection into encoders
    - Interfaces: Protocol definitions for converters and encoders
    - Implementation: Token encoder and identifier generators

Example:
    >>> from base64_convert import Base64Convert
    >>> Base64Convert.encode_text("Hello World", url_safe=True)
    'SGVsbG8gV29ybGQ'
"""

from base64_convert.convert import (
    Base64Convert,
    Base64Converter,
    ConverterConfig,
    max_decoded_length,
    max_encoded_length,
)
from base64_convert.exceptions import (
    Base64ConvertError,
    EncodingError,
    InvalidBase64Input,
    TokenDecodingError,
)
from base64_convert.interfaces import (
    IBase64Converter,
    IHasher,
    IIdentifierGenerator,
    INoncer,
    ITokenEncoder,
)

__version__ = "0.1.0"

__all__ = [
    # Conversion
    "Base64Convert",
    "Base64Converter",
    "ConverterConfig",
    "max_encoded_length",
    "max_decoded_length",
    # Interfaces
    "IBase64Converter",
    "IHasher",
    "IIdentifierGenerator",
    "INoncer",
    "ITokenEncoder",
    # Exceptions
    "Base64ConvertError",
    "EncodingError",
    "InvalidBase64Input",
    "TokenDecodingError",
]
