# link.py
# Successor tokens and their occurrence counts for a single context.

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from .errors import ContractViolationError


@dataclass(frozen=True)
class Token:
    """
    A successor in the chain: either a word or the end-of-sentence marker.
    Words compare by text, END compares equal only to itself.
    """
    text: Optional[str] = None

    @classmethod
    def word(cls, text: str) -> "Token":
        return cls(text)

    @property
    def is_end(self) -> bool:
        return self.text is None

    def __repr__(self) -> str:
        return "$" if self.is_end else repr(self.text)


END = Token()


@dataclass(eq=False)
class Link:
    """A successor token together with how often it followed its context."""
    token: Token
    count: int = 1

    def merge(self, other: "Link") -> None:
        if other.token != self.token:
            raise ContractViolationError(
                f"cannot merge link {other.token!r} into {self.token!r}"
            )
        self.count += other.count

    def __repr__(self) -> str:
        return f"({self.token!r} => {self.count})"


class LinkSet:
    """
    All successors seen after one context.

    Invariants kept after every insert:
      - links are ordered by count, highest first (ties keep insertion order)
      - no two links share a token
    """

    __slots__ = ("_links",)

    def __init__(self) -> None:
        self._links: List[Link] = []

    def get(self, token: Token) -> Optional[Link]:
        for link in self._links:
            if link.token == token:
                return link
        return None

    def insert(self, token: Token) -> None:
        """Record one more occurrence of `token` after this context."""
        existing = self.get(token)
        if existing is None:
            # a fresh count of 1 can never outrank anything already stored
            self._links.append(Link(token))
            return
        existing.merge(Link(token))
        self._links.sort(key=lambda l: l.count, reverse=True)

    def best(self) -> Link:
        if not self._links:
            raise ContractViolationError("best() called on an empty link set")
        return self._links[0]

    def counts(self) -> Dict[Token, int]:
        return {l.token: l.count for l in self._links}

    def __iter__(self) -> Iterator[Link]:
        return iter(self._links)

    def __len__(self) -> int:
        return len(self._links)

    def __getitem__(self, idx: int) -> Link:
        return self._links[idx]

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(l) for l in self._links) + "]"
