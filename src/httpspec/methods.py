"""HTTP request methods."""

from enum import StrEnum

__all__ = ["HTTPMethod"]


class HTTPMethod(StrEnum):
    """HTTP methods and descriptions.

    Only HEAD, GET, POST, PUT, PATCH, DELETE and OPTIONS are defined.
    Parsing any other token, e.g. ``HTTPMethod("TRACE")``, raises
    ``ValueError``. Tokens are case sensitive.
    """

    def __new__(cls, value: str, description: str):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.description = description
        return obj

    def __repr__(self) -> str:
        return f"<HTTPMethod.{str(self)}>"

    def is_(self, other: "HTTPMethod") -> bool:
        """Check whether *other* is the same method."""
        return self is other

    HEAD = (
        "HEAD",
        "Asks for the headers a GET request would return, without the response body",
    )
    GET = "GET", "Requests a representation of the specified resource"
    POST = "POST", "Sends data to the server; the body type is given by Content-Type"
    PUT = (
        "PUT",
        "Creates or replaces a representation of the target resource with the request content",
    )
    PATCH = "PATCH", "Applies partial modifications to a resource"
    DELETE = "DELETE", "Deletes the specified resource"
    OPTIONS = "OPTIONS", "Describes the communication options for the target resource"

