"""Token compression and encoding implementation.

This module provides token encoding/decoding with gzip compression and
unpadded base64url encoding.
"""

from __future__ import annotations

import gzip
import logging
import zlib
from dataclasses import dataclass

from base64_convert.convert import Base64Converter, ConverterConfig
from base64_convert.exceptions import TokenDecodingError
from base64_convert.interfaces.encoding import IBase64Converter, ITokenEncoder

logger = logging.getLogger(__name__)


@dataclass
class TokenEncoderConfig:
    """Configuration for token encoding.

    Attributes:
        compress_level: gzip compression level, 0 to 9.
        converter: Converter used for the base64 step. Defaults to a URL-safe
            Base64Converter.
    """

    compress_level: int = 9
    converter: IBase64Converter | None = None


class TokenEncoder(ITokenEncoder):
    """Token encoder that compresses and encodes tokens.

    This class implements token encoding by:
    1. Converting the input string to UTF-8 bytes
    2. Compressing with gzip
    3. Encoding with unpadded base64url

    Decoding reverses this process. The converter restores the padding, so
    tokens are accepted with or without it.
    """

    def __init__(self, config: TokenEncoderConfig | None = None) -> None:
        self.config = config if config is not None else TokenEncoderConfig()
        self.converter: IBase64Converter = (
            self.config.converter
            if self.config.converter is not None
            else Base64Converter(ConverterConfig(url_safe=True))
        )

    async def encode(self, object: str) -> str:
        """Encode an object string into a compressed and encoded token.

        Args:
            object: The object string to encode.

        Returns:
            The compressed and encoded token string.

        Example:
            >>> encoder = TokenEncoder()
            >>> token = await encoder.encode('{"user": "alice", "role": "admin"}')
            >>> "=" in token
            False
        """
        token_bytes = object.encode("utf-8")
        compressed_token = gzip.compress(
            token_bytes, compresslevel=self.config.compress_level
        )

        return self.converter.encode(compressed_token)

    async def decode(self, raw_token: str) -> str:
        """Decode a compressed and encoded token back to the original string.

        Args:
            raw_token: The raw token string to decode.

        Returns:
            The decoded and decompressed object string.

        Raises:
            InvalidBase64Input: If the token is not valid base64.
            TokenDecodingError: If the decoded token is not valid gzip data.
            UnicodeDecodeError: If the decompressed data is not valid UTF-8.
        """
        compressed_token = self.converter.decode(raw_token)

        try:
            object_bytes = gzip.decompress(compressed_token)
        except (OSError, EOFError, zlib.error) as e:
            logger.debug("token payload of %d bytes is not gzip: %s", len(compressed_token), e)
            raise TokenDecodingError("token payload is not valid gzip data") from e

        return object_bytes.decode("utf-8")
