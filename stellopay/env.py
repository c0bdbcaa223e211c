"""Execution environment for contracts: addresses, authorization, events, time and storage."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator

__all__ = ["Address", "AuthorizationError", "Event", "Env"]


@dataclass(frozen=True, order=True)
class Address:
    """An opaque account or contract identifier."""

    value: str

    _counter: ClassVar[Iterator[int]] = itertools.count(1)

    @classmethod
    def generate(cls) -> "Address":
        """Return a fresh address, distinct from every other generated one."""
        return cls(f"G{next(cls._counter):055d}")

    def __str__(self) -> str:
        return self.value


class AuthorizationError(PermissionError):
    """Raised when an address has not authorized the current invocation."""

    def __init__(self, address: Address) -> None:
        super().__init__(f"authorization required for {address}")
        self.address = address


@dataclass(frozen=True)
class Event:
    """A published contract event."""

    topics: tuple
    data: Any


@dataclass
class Env:
    """Ledger state seen by a contract: clock, storage, events and authorizations."""

    timestamp: int = 0
    storage: dict = field(default_factory=dict, repr=False)
    events: list = field(default_factory=list, repr=False)
    _authorized: set = field(default_factory=set, repr=False)
    _mock_all: bool = field(default=False, repr=False)

    def __post_init__(self) -> None:
        if self.timestamp < 0:
            raise ValueError("timestamp must not be negative")

    def mock_all_auths(self) -> None:
        """Treat every address as having authorized every call."""
        self._mock_all = True

    def authorize(self, address: Address) -> None:
        """Record that ``address`` has signed for subsequent calls."""
        self._authorized.add(address)

    def require_auth(self, address: Address) -> None:
        """Raise AuthorizationError unless ``address`` has authorized the call."""
        if not (self._mock_all or address in self._authorized):
            raise AuthorizationError(address)

    def publish_event(self, topics: tuple, data: Any) -> Event:
        """Append an event to the event log and return it."""
        event = Event(tuple(topics), data)
        self.events.append(event)
        return event

    def advance_time(self, seconds: int) -> int:
        """Move the ledger clock forward and return the new timestamp."""
        if seconds < 0:
            raise ValueError("time cannot move backwards")
        self.timestamp += seconds
        return self.timestamp