"""In-memory payroll escrow ledger with payment intervals, pausing and ownership control."""

__version__ = "0.1.0"
__all__ = ["env", "payroll"]