"""Exception classes for base64-convert.

This module defines custom exception types used throughout the base64-convert library.
"""


class Base64ConvertError(Exception):
    """Base exception class for all base64-convert errors."""

    pass


class EncodingError(Base64ConvertError):
    """Exception raised for encoding/decoding errors."""

    pass


class InvalidBase64Input(EncodingError):
    """Exception raised when decode input is not valid Base64.

    Raised for characters outside the alphabet, inconsistent padding, or a
    length that no Base64 encoding can produce.
    """

    pass


class TokenDecodingError(EncodingError):
    """Exception raised when a decoded token payload cannot be decompressed."""

    pass
