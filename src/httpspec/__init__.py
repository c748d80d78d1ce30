"""HTTP protocol constants: status codes, request methods and header names."""

from .codes import HTTPStatus
from .headers import BodyMeta, ContentNegotiation
from .methods import HTTPMethod

__version__ = "0.1.0"
__author__ = "httpspec contributors"

__all__ = [
    "HTTPStatus",
    "HTTPMethod",
    "BodyMeta",
    "ContentNegotiation",
    "__version__",
    "__author__",
]
