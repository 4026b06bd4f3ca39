# markov_generator/core/generator.py
"""
SentenceGenerator - samples new sentences from a trained MarkovChain.

Each step pools the successors of every trailing context width (1..depth),
scales each count by its width so longer matches weigh more, then picks one
token by exact integer weighted sampling. The sentence ends when END is drawn.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

from .chain import MarkovChain, Word
from .errors import NoCandidatesError, UnseededModelError
from .link import Link, Token
from .protocols import RandomSource


def weighted_selection(links: Iterable[Link], rng: RandomSource) -> Link:
    """
    Pick one link with probability count / total.
    Integer arithmetic only, so every link with count > 0 is reachable.
    """
    links = list(links)
    total = sum(l.count for l in links)
    if total <= 0:
        raise NoCandidatesError("weighted selection over an empty or zero-weight collection")

    r = rng.randrange(total)
    acc = 0
    for link in links:
        acc += link.count
        if acc > r:
            return link
    # unreachable: acc == total > r after the last link
    raise NoCandidatesError(f"draw {r} fell outside total weight {total}")


class SentenceGenerator:
    """
    Read-only view over a MarkovChain that produces sentences.

    max_words: optional cap on sentence length, None keeps sampling until END.
    logger: optional object with a warning(msg) method (e.g. utils.logger_utils.Log).
    """

    def __init__(self,
                 chain: MarkovChain,
                 max_words: Optional[int] = None,
                 logger: Optional[Any] = None) -> None:
        if max_words is not None and max_words < 1:
            raise ValueError("max_words must be positive or None")
        self.chain = chain
        self.max_words = max_words
        self.logger = logger

    def generate(self, rng: RandomSource) -> str:
        if not self.chain.entry_points:
            raise UnseededModelError("cannot generate before any sentence was trained")

        depth = self.chain.depth
        words: List[Word] = [rng.choice(self.chain.entry_points)]

        while True:
            if self.max_words is not None and len(words) >= self.max_words:
                if self.logger is not None:
                    self.logger.warning(f"sentence cut at max_words={self.max_words}")
                break
            token = self.next_word(words[-depth:], rng)
            if token.is_end:
                break
            words.append(token.text)

        return " ".join(words) + "."

    def next_word(self, context: Sequence[Word], rng: RandomSource) -> Token:
        return weighted_selection(self.pooled_links(context), rng).token

    def pooled_links(self, context: Sequence[Word]) -> List[Link]:
        """
        Merge the LinkSets of every trailing sub-context by token, with each
        count multiplied by the width of the context it came from.
        """
        context = tuple(context)
        depth = min(self.chain.depth, len(context))

        pooled: Dict[Token, Link] = {}
        for width in range(1, depth + 1):
            link_set = self.chain.get(context[len(context) - width:])
            if link_set is None:
                continue
            for link in link_set:
                weighted = Link(link.token, link.count * width)
                existing = pooled.get(link.token)
                if existing is None:
                    pooled[link.token] = weighted
                else:
                    existing.merge(weighted)

        if not pooled:
            raise NoCandidatesError(f"no successors recorded for context {list(context)!r}")
        return list(pooled.values())
