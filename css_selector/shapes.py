"""Plain geometry records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Rectangle:
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


__all__ = ["Rectangle"]
