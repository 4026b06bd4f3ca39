# markov_generator/context/tokenizer.py
# sentence and word splitting for training text

from typing import Callable, Iterator, List, Union

SentenceEnd = Union[str, Callable[[str], bool]]

DEFAULT_DELIMITERS = ".?!"


def boundary_predicate(delimiters: str = DEFAULT_DELIMITERS) -> Callable[[str], bool]:
    """Return a predicate that is true for any character in `delimiters`."""
    chars = frozenset(delimiters)
    return lambda ch: ch in chars


def split_sentences(text: str, sentence_end: SentenceEnd = DEFAULT_DELIMITERS) -> Iterator[str]:
    """
    Yield the non-empty pieces of `text` between boundary characters, left to right.
    `sentence_end` is either a string of delimiter characters or a predicate.
    Pieces made only of whitespace are still yielded; they hold no words.
    """
    if isinstance(sentence_end, str):
        sentence_end = boundary_predicate(sentence_end)

    start = 0
    for i, ch in enumerate(text):
        if sentence_end(ch):
            if i > start:
                yield text[start:i]
            start = i + 1
    if start < len(text):
        yield text[start:]


def split_words(sentence: str) -> List[str]:
    """Whitespace tokenization only, punctuation stays attached to words."""
    if not sentence:
        return []
    return sentence.split()
