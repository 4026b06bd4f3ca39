# chain.py
# variable-order Markov chain over whitespace-tokenized sentences.

from __future__ import annotations
from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple

from markov_generator.context.tokenizer import (
    DEFAULT_DELIMITERS,
    SentenceEnd,
    split_sentences,
    split_words,
)
from .link import END, LinkSet, Token
from .protocols import ChainStats

Word = str
Context = Tuple[Word, ...]


class MarkovChain:
    """
    Maps contexts (1..depth consecutive words) to the LinkSet of tokens that
    followed them, and remembers which words opened a sentence.

    Training only ever adds counts; generation reads the chain without
    mutating it (see SentenceGenerator).
    """

    def __init__(self, depth: int = 4) -> None:
        if int(depth) < 1:
            raise ValueError(f"depth must be at least 1, got {depth}")
        self.depth = int(depth)
        self.table: Dict[Context, LinkSet] = {}
        self.entry_points: List[Word] = []
        self._entry_set: Set[Word] = set()

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def train_text(self, text: str, sentence_end: SentenceEnd = DEFAULT_DELIMITERS) -> None:
        for sentence in split_sentences(text, sentence_end):
            self.train_sentence(sentence)

    def train_sentence(self, sentence: str) -> None:
        """
        Record every (context -> next token) pair of one sentence for all
        widths 1..min(depth, n-1), plus an END link after each trailing context.
        A one-word sentence only registers its entry point.
        """
        words = split_words(sentence)
        if not words:
            return

        n = len(words)
        depth = min(self.depth, n - 1)

        if words[0] not in self._entry_set:
            self._entry_set.add(words[0])
            self.entry_points.append(words[0])

        for width in range(1, depth + 1):
            for i in range(n - width):
                self._train_link(tuple(words[i:i + width]), Token.word(words[i + width]))
            self._train_link(tuple(words[n - width:]), END)

    def train_many(self, sentences: Sequence[str]) -> None:
        for s in sentences:
            self.train_sentence(s)

    def _train_link(self, context: Context, token: Token) -> None:
        link_set = self.table.get(context)
        if link_set is None:
            link_set = self.table[context] = LinkSet()
        link_set.insert(token)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get(self, context: Sequence[Word]) -> Optional[LinkSet]:
        return self.table.get(tuple(context))

    @property
    def is_trained(self) -> bool:
        return bool(self.entry_points)

    def num_contexts_links(self) -> Tuple[int, int]:
        """(distinct contexts, distinct successor links summed over all contexts)"""
        return len(self.table), sum(len(ls) for ls in self.table.values())

    def stats(self) -> ChainStats:
        contexts, links = self.num_contexts_links()
        return ChainStats(
            contexts=contexts,
            links=links,
            entry_points=len(self.entry_points),
            depth=self.depth,
        )

    def triples(self) -> Iterator[Tuple[Context, Token, int]]:
        for context, link_set in self.table.items():
            for link in link_set:
                yield context, link.token, link.count

    def dump(self) -> str:
        lines = [f"Entry Points: {self.entry_points!r}", "Chain:"]
        for context, link_set in self.table.items():
            lines.append(f"  {list(context)!r}: {link_set!r}")
        return "\n".join(lines)

    def __contains__(self, context: object) -> bool:
        if not isinstance(context, (tuple, list)):
            return False
        return tuple(context) in self.table

    def __len__(self) -> int:
        return len(self.table)

    def __repr__(self) -> str:
        contexts, links = self.num_contexts_links()
        return f"MarkovChain(depth={self.depth}, contexts={contexts}, links={links})"
