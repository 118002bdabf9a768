"""A class that allows exactly one instance, reached through :func:`get_instance`."""

from __future__ import annotations

from typing import Any

_TOKEN = object()
_instance: Singleton | None = None


class Singleton:
    """The single shared instance holding the value it was first created with."""

    def __init__(self, data: Any, *, _token: object = None) -> None:
        if _token is not _TOKEN:
            raise TypeError("use get_instance() to obtain the Singleton")
        self.data = data

    def __str__(self) -> str:
        return f"value: {self.data}"


def get_instance(data: Any) -> Singleton:
    """Return the shared instance, creating it with ``data`` on the first call."""
    global _instance
    if _instance is None:
        _instance = Singleton(data, _token=_TOKEN)
    return _instance