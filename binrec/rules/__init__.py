"""
Rules package for binrec.

Re-exports the abstract rule interfaces and the concrete rules so downstream
code can import from `binrec.rules` directly.
"""

from binrec.rules.abstract import AbstractUpdateRule, UpdateRule
from binrec.rules.score_override import Predicate, ScoreOverrideRule

__all__ = [
    # Abstracts
    "AbstractUpdateRule",
    "UpdateRule",
    # Concrete rules
    "Predicate",
    "ScoreOverrideRule",
]
