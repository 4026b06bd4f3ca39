# errors.py - failure conditions raised by the chain engine

class MarkovError(Exception):
    """Base class for every error raised by markov_generator.core."""


class UnseededModelError(MarkovError):
    """Generation was requested before any sentence was trained."""


class ContractViolationError(MarkovError):
    """An internal invariant was broken (e.g. merging links with different tokens)."""


class NoCandidatesError(MarkovError):
    """Weighted selection had nothing to choose from."""
