"""
wordgraph.datasets — Sample corpora for examples and tests.
"""

from .corpus import sample_text, generate_sentence_corpus

__all__ = ["sample_text", "generate_sentence_corpus"]
