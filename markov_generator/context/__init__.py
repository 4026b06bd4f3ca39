# imports helpers for turning raw text into sentences and words

from .tokenizer import (
    DEFAULT_DELIMITERS,
    boundary_predicate,
    split_sentences,
    split_words,
)

__all__ = [
    "DEFAULT_DELIMITERS",
    "boundary_predicate",
    "split_sentences",
    "split_words",
]
