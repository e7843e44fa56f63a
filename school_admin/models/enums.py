"""
Enumerations stored on models and accepted by schemas.
"""

from enum import Enum


class AccountType(str, Enum):
    SAVINGS = "Savings"
    CURRENT = "Current"
    FIXED_DEPOSIT = "FixedDeposit"
    ASSETS = "Assets"
    LIABILITIES = "Liabilities"
    EQUITY = "Equity"
    REVENUE = "Revenue"
    EXPENSES = "Expenses"
    DEBITS = "Debits"
    CREDITS = "Credits"
    ACCOUNTS_PAYABLE = "AccountsPayable"
    ACCOUNTS_RECEIVABLE = "AccountsReceivable"
    CASH = "Cash"


class FeeCategory(str, Enum):
    APPLICATION = "APPLICATION"
    ACADEMIC = "ACADEMIC"
    MISCELLANEOUS = "MISCELLANEOUS"
    PREVIOUS = "PREVIOUS"


class TransportSchedule(str, Enum):
    PICKUP = "pickup"
    DROP = "drop"
    BOTH = "both"


class FeeStatus(str, Enum):
    """Transport ledger entry state: Upcoming -> Due -> Paid | Late."""

    UPCOMING = "Upcoming"
    DUE = "Due"
    PAID = "Paid"
    LATE = "Late"


class PaymentStatus(str, Enum):
    APPROVED = "APPROVED"
    REQUESTED = "REQUESTED"
    REJECTED = "REJECTED"
