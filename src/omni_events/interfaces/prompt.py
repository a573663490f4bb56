"""Prompt protocol - line-oriented operator questions."""

from __future__ import annotations

from typing import Protocol


class Prompt(Protocol):
    def __call__(self, question: str) -> str:
        """Ask the operator ``question`` and return the raw answer."""
        ...
