#!/usr/bin/env python3
"""
Result Messages Module
Error and warning ledger shared by circuits and raceways.

Each message has a stable numeric id:
- negative: error (configuration not valid)
- positive: warning (allowed but questionable practice)
- zero: status

Adding an id that is already present keeps the first text. Removing an
id that is not present does nothing.

Author: Circuit Topology Skill
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ResultMessage:
    number: int
    text: str

    @property
    def is_error(self) -> bool:
        return self.number < 0

    @property
    def is_warning(self) -> bool:
        return self.number > 0

    def to_dict(self) -> dict:
        return {"number": self.number, "text": self.text}


MessageRef = Union[ResultMessage, int]


def _number(ref: MessageRef) -> int:
    return ref.number if isinstance(ref, ResultMessage) else ref


class ResultMessages:
    """Ordered collection of result messages, unique by number."""

    def __init__(self):
        self._messages: dict[int, ResultMessage] = {}

    def add(self, message: ResultMessage) -> None:
        if message.number not in self._messages:
            self._messages[message.number] = message

    def add_message(self, number: int, text: str) -> None:
        self.add(ResultMessage(number, text))

    def remove(self, *refs: MessageRef) -> None:
        for ref in refs:
            self._messages.pop(_number(ref), None)

    def has(self, ref: MessageRef) -> bool:
        return _number(ref) in self._messages

    def get(self, number: int) -> str:
        """Text of the message with that number, or "" if absent."""
        message = self._messages.get(number)
        return message.text if message else ""

    def clear(self) -> None:
        self._messages.clear()

    def copy_from(self, other: "ResultMessages") -> None:
        """Add every message of another ledger (existing ids are kept)."""
        for message in other.messages:
            self.add(message)

    @property
    def messages(self) -> tuple:
        return tuple(self._messages.values())

    @property
    def errors(self) -> tuple:
        return tuple(m for m in self._messages.values() if m.is_error)

    @property
    def warnings(self) -> tuple:
        return tuple(m for m in self._messages.values() if m.is_warning)

    def has_messages(self) -> bool:
        return bool(self._messages)

    def has_errors(self) -> bool:
        return any(m.is_error for m in self._messages.values())

    def has_warnings(self) -> bool:
        return any(m.is_warning for m in self._messages.values())

    def error_count(self) -> int:
        return len(self.errors)

    def warning_count(self) -> int:
        return len(self.warnings)

    def to_list(self) -> list[dict]:
        return [m.to_dict() for m in self._messages.values()]

    def __len__(self) -> int:
        return len(self._messages)

    def __contains__(self, ref: MessageRef) -> bool:
        return self.has(ref)

    def __repr__(self) -> str:
        return f"ResultMessages({list(self._messages)})"
