"""HTTP header field name constants.

Names are spelled as they appear on the wire. Nothing here validates or
case-folds header values.
"""

from typing import Final

__all__ = ["BodyMeta", "ContentNegotiation"]


class BodyMeta:
    """Headers describing the body of a message."""

    CONTENT_TYPE: Final[str] = "Content-Type"  # media type before encoding
    CONTENT_LENGTH: Final[str] = "Content-Length"  # body size in bytes
    CONTENT_LANGUAGE: Final[str] = "Content-Language"
    CONTENT_DISPOSITION: Final[str] = "Content-Disposition"  # inline or attachment
    CONTENT_ENCODING: Final[str] = "Content-Encoding"


class ContentNegotiation:
    """Headers stating what representations the sender can handle."""

    ACCEPT: Final[str] = "Accept"
    ACCEPT_ENCODING: Final[str] = "Accept-Encoding"
    ACCEPT_CHARSET: Final[str] = "Accept-Charset"
    ACCEPT_LANGUAGE: Final[str] = "Accept-Language"
