"""
Abstract update-rule interfaces for binrec.

A rule decides which records it applies to and how it rewrites them. Rules
only ever touch the in-memory buffer; nothing a rule produces is written back
to disk.
"""

from __future__ import annotations

import abc
from typing import Protocol, runtime_checkable

from binrec.domain.models import Record


@runtime_checkable
class UpdateRule(Protocol):
    """
    Common interface all update rules must implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of the rule.
    """

    name: str
    description: str

    def matches(self, record: Record) -> bool:
        """Whether the rule applies to `record`."""
        ...

    def apply(self, record: Record) -> Record:
        """
        Return the updated version of a matching record.

        Parameters
        ----------
        record : Record
            A record for which `matches` returned True.

        Returns
        -------
        Record
            The replacement record. Records are immutable, so rules return a
            new instance rather than mutating the argument.
        """
        ...


class AbstractUpdateRule(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses should set `name` and `description` and implement `matches`
    and `apply`.
    """

    name: str
    description: str

    @abc.abstractmethod
    def matches(self, record: Record) -> bool:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def apply(self, record: Record) -> Record:  # pragma: no cover - interface only
        raise NotImplementedError


__all__ = [
    "AbstractUpdateRule",
    "UpdateRule",
]
