"""
jsv/domain/pointer.py

JSON Pointer (RFC 6901) paths used for both instance and schema locations.
"""

from __future__ import annotations

from dataclasses import dataclass


def _escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _unescape(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


@dataclass(frozen=True)
class JSONPointer:
    """
    Immutable sequence of reference tokens. The empty pointer is the root.
    """

    tokens: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> JSONPointer:
        if text == "":
            return cls()
        if not text.startswith("/"):
            raise ValueError(f"JSON Pointer must start with '/': {text!r}")
        return cls(tuple(_unescape(token) for token in text[1:].split("/")))

    def join(self, *tokens: str | int) -> JSONPointer:
        return JSONPointer(self.tokens + tuple(str(token) for token in tokens))

    @property
    def parent(self) -> JSONPointer:
        return JSONPointer(self.tokens[:-1])

    @property
    def is_root(self) -> bool:
        return not self.tokens

    def __str__(self) -> str:
        return "".join(f"/{_escape(token)}" for token in self.tokens)


ROOT = JSONPointer()
