# tests/test_generator.py
import random
from unittest.mock import MagicMock

import pytest

from markov_generator.core.chain import MarkovChain
from markov_generator.core.errors import NoCandidatesError, UnseededModelError
from markov_generator.core.generator import SentenceGenerator, weighted_selection
from markov_generator.core.link import END, Link, Token


class StubRandom:
    """Deterministic stand-in: choice() takes the first item, randrange() replays draws."""

    def __init__(self, draws=()):
        self.draws = list(draws)

    def choice(self, seq):
        return seq[0]

    def randrange(self, stop):
        r = self.draws.pop(0) if self.draws else 0
        assert 0 <= r < stop
        return r


@pytest.fixture
def pooled_chain():
    chain = MarkovChain(depth=2)
    chain.train_many(["a b", "c a d"])
    return chain


def test_weighted_selection_walks_cumulative_counts():
    links = [Link(Token.word("b"), 1), Link(Token.word("d"), 3)]
    picks = [weighted_selection(links, StubRandom([r])).token.text for r in range(4)]
    assert picks == ["b", "d", "d", "d"]


def test_weighted_selection_no_candidates():
    with pytest.raises(NoCandidatesError):
        weighted_selection([], StubRandom())
    with pytest.raises(NoCandidatesError):
        weighted_selection([Link(END, 0)], StubRandom())


def test_weighted_selection_fairness():
    rng = random.Random(1234)
    links = [Link(Token.word("one"), 1), Link(Token.word("three"), 3)]
    draws = 100_000
    hits = sum(weighted_selection(links, rng).token.text == "three" for _ in range(draws))
    assert abs(hits / draws - 0.75) < 0.01


def test_pooling_weights_longer_contexts(pooled_chain):
    gen = SentenceGenerator(pooled_chain)
    pooled = {l.token: l.count for l in gen.pooled_links(["c", "a"])}
    # width 1 ("a"): b=1, d=1; width 2 ("c", "a"): d=1 counted twice
    assert pooled == {Token.word("b"): 1, Token.word("d"): 3}


def test_next_word_uses_pool(pooled_chain):
    gen = SentenceGenerator(pooled_chain)
    assert gen.next_word(["c", "a"], StubRandom([0])) == Token.word("b")
    assert gen.next_word(["c", "a"], StubRandom([1])) == Token.word("d")


def test_pooling_does_not_mutate_chain(pooled_chain):
    before = {ctx: ls.counts() for ctx, ls in pooled_chain.table.items()}
    gen = SentenceGenerator(pooled_chain)
    for seed in range(20):
        gen.generate(random.Random(seed))
    assert {ctx: ls.counts() for ctx, ls in pooled_chain.table.items()} == before


def test_generate_single_path():
    chain = MarkovChain(depth=2)
    chain.train_sentence("a b c")
    gen = SentenceGenerator(chain)
    for seed in range(5):
        assert gen.generate(random.Random(seed)) == "a b c."


def test_generate_formatting():
    chain = MarkovChain(depth=3)
    chain.train_text(
        "The cat sat on the mat. The dog sat on the log! "
        "A cat and a dog ran home? The end of the day came."
    )
    gen = SentenceGenerator(chain)
    rng = random.Random(42)
    for _ in range(50):
        s = gen.generate(rng)
        assert s.endswith(".") and not s.endswith("..")
        assert s == s.strip()
        assert "  " not in s
        assert s.split()[0] in chain.entry_points


def test_generate_is_reproducible_with_seed():
    chain = MarkovChain(depth=2)
    chain.train_text("x y z. x z y. y x z. z z x y.")
    gen = SentenceGenerator(chain)
    first = [gen.generate(random.Random(9)) for _ in range(3)]
    assert len(set(first)) == 1


def test_generate_before_training():
    with pytest.raises(UnseededModelError):
        SentenceGenerator(MarkovChain()).generate(random.Random(0))


def test_entry_point_without_successors():
    chain = MarkovChain()
    chain.train_sentence("hello")
    with pytest.raises(NoCandidatesError):
        SentenceGenerator(chain).generate(random.Random(0))


def test_max_words_cuts_and_warns():
    chain = MarkovChain(depth=1)
    chain.train_sentence("x y z w")
    logger = MagicMock()
    gen = SentenceGenerator(chain, max_words=2, logger=logger)
    assert gen.generate(StubRandom()) == "x y."
    logger.warning.assert_called_once()


def test_max_words_must_be_positive():
    with pytest.raises(ValueError):
        SentenceGenerator(MarkovChain(), max_words=0)
