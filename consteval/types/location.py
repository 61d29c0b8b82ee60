from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """A span inside the full source text, used for diagnostics.

    Every token and node of one evaluation refers to the same `text` object;
    only `start` and `length` differ.
    """

    text: str
    start: int
    length: int

    def __post_init__(self):
        if self.start < 0 or self.length < 0 or self.start + self.length > len(self.text):
            raise ValueError(
                f"Span [{self.start}, {self.start + self.length}) is outside of a {len(self.text)} character text"
            )

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def fragment(self) -> str:
        return self.text[self.start:self.end]

    def __str__(self):
        return f"  {self.text}\n  {' ' * self.start}{'^' * self.length}"
