"""Enumeration types for financial domain entities."""

from enum import Enum


class AccountType(str, Enum):
    CHECKING = "corrente"
    SAVINGS = "poupanca"
