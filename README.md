# stellopay

`stellopay` keeps payroll escrow records. An employer sets up a salary for an employee. The salary has an amount and a payment interval in seconds. A payment can be disbursed once that interval has passed. An owner can pause the ledger and can hand ownership on to another address.

Everything runs in memory against an `Env` from `stellopay.env`. The `Env` holds:

- the current timestamp (`env.timestamp`)
- a storage dictionary (`env.storage`)
- the list of published events (`env.events`)
- the set of addresses that have authorized the current calls

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from stellopay.env import Address, Env
from stellopay.payroll import PayrollContract, PayrollError, ErrorCode

env = Env(timestamp=0)
env.mock_all_auths()          # treat every address as having signed

contract = PayrollContract(env)

owner = Address.generate()
employer = Address.generate()
employee = Address.generate()

contract.initialize(owner)

payroll = contract.create_or_update_escrow(employer, employee, 1000, 86400)
print(payroll.amount, payroll.interval, payroll.last_payment_time)

env.advance_time(86401)
contract.disburse_salary(employer, employee)

env.advance_time(86400)
contract.employee_withdraw(employee)

contract.pause(owner)
try:
    contract.employee_withdraw(employee)
except PayrollError as exc:
    assert exc.code is ErrorCode.CONTRACT_PAUSED

contract.unpause(owner)
```

### The environment

- `Address.generate()` returns a new address. No two generated addresses are the same.
- `Env(timestamp=...)` starts the clock at the given time. A negative timestamp raises `ValueError`.
- `env.advance_time(seconds)` moves the clock forward and returns the new timestamp. A negative value raises `ValueError`.
- `env.publish_event(topics, data)` appends an `Event(topics, data)` to `env.events` and returns it.

### Authorization

After `env.mock_all_auths()`, every `env.require_auth(address)` check passes. Without it, you must authorize each address before the call with `env.authorize(address)`. A call that needs a signature that was never given raises `AuthorizationError`. This class is a subclass of `PermissionError`, and its `address` attribute holds the address that did not sign.

### Errors

Contract failures raise `PayrollError`. Its `code` attribute holds an `ErrorCode`, and its message has the form `Error(Contract, #<n>)`. The codes are:

| Code | Value |
|------|-------|
| `UNAUTHORIZED` | 1 |
| `INTERVAL_NOT_REACHED` | 2 |
| `INVALID_DATA` | 3 |
| `PAYROLL_NOT_FOUND` | 4 |
| `TRANSFER_FAILED` | 5 |
| `CONTRACT_PAUSED` | 6 |

### Rules

- **Initialization**
  - `initialize` may run only once. A second call raises `AlreadyInitializedError`.
  - After `initialize`, the contract is unpaused.
- **Ownership**
  - Only the owner may `pause`, `unpause` or `transfer_ownership`. Before `initialize` there is no owner, so all three fail with `ErrorCode.UNAUTHORIZED`.
  - `transfer_ownership` needs authorization from both the current owner and the new owner.
- **Creating and updating records**
  - `create_or_update_escrow` returns the stored `Payroll`. A `Payroll` has the fields `employer`, `employee`, `amount`, `interval` and `last_payment_time`.
  - A new record starts with `last_payment_time` set to the current timestamp.
  - `amount` must fit in a signed 64-bit integer, and `interval` must fit in an unsigned 64-bit integer. Values outside those ranges raise `ValueError`.
  - The interval must be greater than zero. A zero interval fails with `ErrorCode.INVALID_DATA`.
  - Only the employer who created a record may update it. Any other employer fails with `ErrorCode.UNAUTHORIZED`.
  - An update changes `amount` and `interval` and keeps the record's `last_payment_time`.
- **Paying out**
  - `disburse_salary(caller, employee)` succeeds only if `caller` is the record's employer. Otherwise it fails with `ErrorCode.UNAUTHORIZED`.
  - A payment is allowed once `last_payment_time + interval` has been reached. Earlier attempts fail with `ErrorCode.INTERVAL_NOT_REACHED`.
  - A successful payment sets `last_payment_time` to the current timestamp.
  - `employee_withdraw(employee)` needs the employee's authorization. When the payment is due, it pays out on the employer's behalf.
  - If no record exists for the employee, `disburse_salary` and `employee_withdraw` fail with `ErrorCode.PAYROLL_NOT_FOUND`.
- **Reading records**
  - `get_payroll(employee)` needs the employee's authorization.
  - It returns the record, or `None` if there is none.
- **Pausing**
  - While the ledger is paused, `create_or_update_escrow`, `disburse_salary` and `employee_withdraw` fail with `ErrorCode.CONTRACT_PAUSED`.
  - `get_payroll`, `is_paused` and `get_owner` still work while paused.
  - `pause` publishes an event with topics `("paused",)` and the caller as its data. `unpause` publishes one with topics `("unpaused",)`. The names are also available as `PAUSED_EVENT` and `UNPAUSED_EVENT`.

## What it does not do

- **No money moves.** A disbursement only records the new payment time. It does not transfer any funds or tokens. `ErrorCode.TRANSFER_FAILED` is defined, but nothing raises it.
- **Nothing is saved.** All state lives in the `Env` object and is lost when the process ends.
- **There is no command-line tool.**