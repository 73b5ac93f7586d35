"""
Entry Predicates and Selection

Predicates are plain functions of one ``DocumentEntry``. Selection walks an
immutable sequence of entries and returns a new list, preserving order.

Relationship direction
----------------------
For a target entry ``T`` and a candidate ``E``:

- ``obsoleted_by(T)`` matches ``E`` when ``T`` is in ``E.obsoleted_by``
  (E is obsoleted by T)
- ``obsoleting(T)`` matches ``E`` when ``E`` is in ``T.obsoleted_by``
  (E obsoletes T)

The ``updated_by`` / ``updating`` pair follows the same shape.
"""

from __future__ import annotations

from typing import Callable, List, Sequence

from .models import DocumentEntry, GroupEntry, RFC

EntryPredicate = Callable[[DocumentEntry], bool]


def select(entries: Sequence[DocumentEntry], predicate: EntryPredicate) -> List[DocumentEntry]:
    return [entry for entry in entries if predicate(entry)]


def to_rfcs(entries: Sequence[DocumentEntry]) -> List[RFC]:
    return [entry.to_rfc() for entry in entries]


# ---------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------

def any_entry(entry: DocumentEntry) -> bool:
    return True


def not_obsolete(entry: DocumentEntry) -> bool:
    return not entry.is_obsolete()


def obsoleted_by(target: DocumentEntry) -> EntryPredicate:
    return lambda entry: entry.is_obsoleted_by(target)


def obsoleting(target: DocumentEntry) -> EntryPredicate:
    return lambda entry: target.is_obsoleted_by(entry)


def updated_by(target: DocumentEntry) -> EntryPredicate:
    return lambda entry: entry.is_updated_by(target)


def updating(target: DocumentEntry) -> EntryPredicate:
    return lambda entry: target.is_updated_by(entry)


def member_of(group: GroupEntry) -> EntryPredicate:
    return group.includes


def with_current_status(label: str) -> EntryPredicate:
    return lambda entry: entry.current_status == label


def in_stream(label: str) -> EntryPredicate:
    return lambda entry: entry.stream == label
