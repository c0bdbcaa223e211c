"""Payroll escrow contract with owner-controlled pausing."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import IntEnum

from .env import Address, Env

__all__ = [
    "ErrorCode",
    "PayrollError",
    "AlreadyInitializedError",
    "Payroll",
    "PayrollContract",
    "PAUSED_EVENT",
    "UNPAUSED_EVENT",
]

PAUSED_EVENT = "paused"
UNPAUSED_EVENT = "unpaused"

_PAUSE_KEY = "PAUSED"
_OWNER_KEY = "OWNER"

_I64_MIN, _I64_MAX = -(2**63), 2**63 - 1
_U64_MAX = 2**64 - 1


class ErrorCode(IntEnum):
    """Error codes reported by the payroll contract."""

    UNAUTHORIZED = 1
    INTERVAL_NOT_REACHED = 2
    INVALID_DATA = 3
    PAYROLL_NOT_FOUND = 4
    TRANSFER_FAILED = 5
    CONTRACT_PAUSED = 6


class PayrollError(Exception):
    """A contract error carrying an ErrorCode."""

    def __init__(self, code: ErrorCode) -> None:
        self.code = ErrorCode(code)
        super().__init__(f"Error(Contract, #{int(self.code)})")


class AlreadyInitializedError(RuntimeError):
    """Raised when initialize is called on a contract that already has an owner."""

    def __init__(self) -> None:
        super().__init__("Contract already initialized")


@dataclass(frozen=True)
class Payroll:
    """Stored payroll record for one employee."""

    employer: Address
    employee: Address
    amount: int
    interval: int
    last_payment_time: int


def _payroll_key(employee: Address) -> tuple:
    return ("PayrollKey", employee)


class PayrollContract:
    """Payroll escrow bound to an environment's storage."""

    def __init__(self, env: Env) -> None:
        self.env = env

    @property
    def _storage(self) -> dict:
        return self.env.storage

    def _require_owner(self, caller: Address) -> None:
        owner = self._storage.get(_OWNER_KEY)
        if owner is None or caller != owner:
            raise PayrollError(ErrorCode.UNAUTHORIZED)

    def _require_not_paused(self) -> None:
        if self.is_paused():
            raise PayrollError(ErrorCode.CONTRACT_PAUSED)

    def initialize(self, owner: Address) -> None:
        """Set the contract owner once; the contract starts unpaused."""
        self.env.require_auth(owner)
        if _OWNER_KEY in self._storage:
            raise AlreadyInitializedError()
        self._storage[_OWNER_KEY] = owner
        self._storage[_PAUSE_KEY] = False

    def pause(self, caller: Address) -> None:
        """Pause the contract; only the owner may do this."""
        self.env.require_auth(caller)
        self._require_owner(caller)
        self._storage[_PAUSE_KEY] = True
        self.env.publish_event((PAUSED_EVENT,), caller)

    def unpause(self, caller: Address) -> None:
        """Unpause the contract; only the owner may do this."""
        self.env.require_auth(caller)
        self._require_owner(caller)
        self._storage[_PAUSE_KEY] = False
        self.env.publish_event((UNPAUSED_EVENT,), caller)

    def is_paused(self) -> bool:
        return bool(self._storage.get(_PAUSE_KEY, False))

    def create_or_update_escrow(
        self, employer: Address, employee: Address, amount: int, interval: int
    ) -> Payroll:
        """Create a payroll record, or update amount and interval of an existing one."""
        if not _I64_MIN <= amount <= _I64_MAX:
            raise ValueError("amount out of range")
        if not 0 <= interval <= _U64_MAX:
            raise ValueError("interval out of range")
        self._require_not_paused()
        self.env.require_auth(employer)
        if interval == 0:
            raise PayrollError(ErrorCode.INVALID_DATA)

        key = _payroll_key(employee)
        existing = self._storage.get(key)
        if existing is not None:
            if existing.employer != employer:
                raise PayrollError(ErrorCode.UNAUTHORIZED)
            updated = dataclasses.replace(existing, amount=amount, interval=interval)
            self._storage[key] = updated
            return updated

        payroll = Payroll(
            employer=employer,
            employee=employee,
            amount=amount,
            interval=interval,
            last_payment_time=self.env.timestamp,
        )
        self._storage[key] = payroll
        return payroll

    def disburse_salary(self, caller: Address, employee: Address) -> None:
        """Record a payment if the caller is the employer and the interval has elapsed."""
        self._require_not_paused()
        key = _payroll_key(employee)
        payroll = self._storage.get(key)
        if payroll is None:
            raise PayrollError(ErrorCode.PAYROLL_NOT_FOUND)
        if caller != payroll.employer:
            raise PayrollError(ErrorCode.UNAUTHORIZED)
        now = self.env.timestamp
        if now < payroll.last_payment_time + payroll.interval:
            raise PayrollError(ErrorCode.INTERVAL_NOT_REACHED)
        self._storage[key] = dataclasses.replace(payroll, last_payment_time=now)

    def get_payroll(self, employee: Address) -> Payroll | None:
        """Return the employee's payroll record, or None; allowed while paused."""
        self.env.require_auth(employee)
        return self._storage.get(_payroll_key(employee))

    def employee_withdraw(self, employee: Address) -> None:
        """Let an employee trigger their own due payment."""
        self._require_not_paused()
        self.env.require_auth(employee)
        key = _payroll_key(employee)
        payroll = self._storage.get(key)
        if payroll is None:
            raise PayrollError(ErrorCode.PAYROLL_NOT_FOUND)
        now = self.env.timestamp
        if now - payroll.last_payment_time < payroll.interval:
            raise PayrollError(ErrorCode.INTERVAL_NOT_REACHED)
        self.disburse_salary(payroll.employer, employee)
        self._storage[key] = dataclasses.replace(payroll, last_payment_time=now)

    def get_owner(self) -> Address | None:
        return self._storage.get(_OWNER_KEY)

    def transfer_ownership(self, caller: Address, new_owner: Address) -> None:
        """Hand ownership to ``new_owner``; both parties must authorize."""
        self.env.require_auth(caller)
        self.env.require_auth(new_owner)
        self._require_owner(caller)
        self._storage[_OWNER_KEY] = new_owner