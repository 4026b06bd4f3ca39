# tests/test_link.py
import pytest

from markov_generator.core.errors import ContractViolationError
from markov_generator.core.link import END, Link, LinkSet, Token


def test_token_equality():
    assert Token.word("cat") == Token.word("cat")
    assert Token.word("cat") != Token.word("dog")
    assert Token.word("cat") != END
    assert END == Token()
    assert END.is_end and not Token.word("cat").is_end


def test_merge_sums_counts():
    a = Link(Token.word("x"), 2)
    a.merge(Link(Token.word("x"), 3))
    assert a.count == 5


def test_merge_rejects_other_token():
    a = Link(Token.word("x"))
    with pytest.raises(ContractViolationError):
        a.merge(Link(END))


def test_insert_keeps_descending_order_without_duplicates():
    ls = LinkSet()
    for w in ["a", "b", "c", "b", "c", "c", "a", "d"]:
        ls.insert(Token.word(w))

    counts = [l.count for l in ls]
    assert counts == sorted(counts, reverse=True)
    tokens = [l.token for l in ls]
    assert len(tokens) == len(set(tokens))
    assert ls.counts() == {
        Token.word("c"): 3,
        Token.word("a"): 2,
        Token.word("b"): 2,
        Token.word("d"): 1,
    }


def test_best_is_highest_count():
    ls = LinkSet()
    ls.insert(Token.word("rare"))
    ls.insert(END)
    ls.insert(END)
    assert ls.best().token == END
    assert ls.best().count == 2
    assert ls[0] is ls.best()


def test_best_on_empty_set():
    with pytest.raises(ContractViolationError):
        LinkSet().best()


def test_get_and_repr():
    ls = LinkSet()
    ls.insert(Token.word("hi"))
    ls.insert(END)
    assert ls.get(END).count == 1
    assert ls.get(Token.word("missing")) is None
    assert repr(ls) == "[('hi' => 1), ($ => 1)]"
    assert len(ls) == 2
