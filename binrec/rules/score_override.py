"""
Score override rule: force the score of selected records to a fixed value.

By default a record is selected when its identifier equals a sentinel id
(2 unless configured otherwise) and its score becomes 100.0.
"""

from __future__ import annotations

from typing import Callable, Optional

from binrec.config import get_settings
from binrec.domain.models import Record, check_score
from binrec.rules.abstract import AbstractUpdateRule

Predicate = Callable[[Record], bool]


class ScoreOverrideRule(AbstractUpdateRule):
    """
    Replace the score of every matching record with `score`.

    A custom `predicate` takes precedence over the `target_id` comparison.
    """

    name: str = "score_override"
    description: str = "Set score to a fixed value for records with a given id."

    def __init__(
        self,
        target_id: int = 2,
        score: float = 100.0,
        predicate: Optional[Predicate] = None,
    ) -> None:
        self.target_id = target_id
        self.score = check_score(score)
        self._predicate = predicate

    @classmethod
    def from_settings(cls) -> "ScoreOverrideRule":
        settings = get_settings()
        return cls(target_id=settings.match_id, score=settings.override_score)

    def matches(self, record: Record) -> bool:
        if self._predicate is not None:
            return self._predicate(record)
        return record.id == self.target_id

    def apply(self, record: Record) -> Record:
        return record.with_score(self.score)

    def __repr__(self) -> str:
        if self._predicate is not None:
            return f"ScoreOverrideRule(predicate={self._predicate!r}, score={self.score})"
        return f"ScoreOverrideRule(target_id={self.target_id}, score={self.score})"


__all__ = ["ScoreOverrideRule", "Predicate"]
