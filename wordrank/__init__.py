"""
wordrank: rank a word list by how much a guess is likely to reveal.

Subpackages:
  - engine   : constraint model, filtering, heuristic scoring, ranking
  - datasets : word-list loading, the frequency index, list diagnostics
  - harness  : self-play evaluation of the ranking against hidden answers
"""

__version__ = "1.0.0"
