"""The envelope every API reply is wrapped in."""

from __future__ import annotations

from dataclasses import asdict, dataclass, is_dataclass
from typing import Any


def _plain(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, BaseException):
        return str(value)
    return value


@dataclass
class Response:
    status_code: int
    message: str
    data: Any = None
    error: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Return the reply as plain JSON-ready values."""
        return {
            "status_code": self.status_code,
            "message": self.message,
            "data": _plain(self.data),
            "error": _plain(self.error),
        }


def client_response(status_code: int, message: str, data: Any, error: Any) -> Response:
    """Build the reply envelope sent to a client."""
    return Response(status_code=status_code, message=message, data=data, error=error)