"""markov_generator - train a variable-order Markov chain on text and sample new sentences."""

from markov_generator.core import MarkovChain, SentenceGenerator

__all__ = ["MarkovChain", "SentenceGenerator"]

__version__ = "0.1.0"
