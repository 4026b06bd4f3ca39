"""
markov_generator.core

The chain engine behind the sentence generator.
Contains:
 - tokens, links and per-context link sets (Token, Link, LinkSet)
 - the variable-order chain and its training (MarkovChain)
 - pooled, width-weighted sentence sampling (SentenceGenerator)
 - the error hierarchy raised on contract violations
"""

from .link import END, Link, LinkSet, Token
from .chain import MarkovChain
from .generator import SentenceGenerator, weighted_selection
from .errors import (
    ContractViolationError,
    MarkovError,
    NoCandidatesError,
    UnseededModelError,
)
from .protocols import ChainStats, RandomSource

__all__ = [
    "END",
    "Link",
    "LinkSet",
    "Token",
    "MarkovChain",
    "SentenceGenerator",
    "weighted_selection",
    "MarkovError",
    "UnseededModelError",
    "ContractViolationError",
    "NoCandidatesError",
    "ChainStats",
    "RandomSource",
]
