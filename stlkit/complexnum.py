"""A mutable complex number with operator support and textual I/O."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def format_number(value: float) -> str:
    """Format a number the way a default-precision stream prints a double."""
    return f"{value:g}"


@dataclass(eq=False)
class Complex:
    """Complex number with a real part and an imaginary part."""

    real: float = 0.0
    image: float = 0.0

    def add(self, other: Complex) -> Complex:
        """Return the sum of this number and ``other`` as a new number."""
        return Complex(self.real + other.real, self.image + other.image)

    def __add__(self, other: Any) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.add(other)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.real == other.real and self.image == other.image

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        real = format_number(self.real)
        if self.image > 0:
            if self.image == 1:
                return f"{real}+i"
            return f"{real}+{format_number(self.image)}i"
        if self.image < 0:
            if self.image == -1:
                return f"{real}-i"
            return f"{real}{format_number(self.image)}i"
        return real

    def increment(self) -> Complex:
        """Add one to both parts; return a copy of the updated value."""
        self.real += 1
        self.image += 1
        return Complex(self.real, self.image)

    def post_increment(self) -> Complex:
        """Add one to both parts; return a copy of the value before the change."""
        previous = Complex(self.real, self.image)
        self.real += 1
        self.image += 1
        return previous

    def assign(self, other: Complex) -> Complex:
        """Copy both parts of ``other`` into this number and return it."""
        self.real = other.real
        self.image = other.image
        return self

    @classmethod
    def parse(cls, text: str) -> Complex:
        """Read a number written as its real and imaginary parts separated by whitespace."""
        parts = text.split()
        if len(parts) != 2:
            raise ValueError(f"expected two numbers, got {len(parts)}: {text!r}")
        try:
            real, image = (float(part) for part in parts)
        except ValueError as exc:
            raise ValueError(f"not a pair of numbers: {text!r}") from exc
        return cls(real, image)