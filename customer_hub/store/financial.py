"""Relationship indexes joining customers to their accounts and branch."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from customer_hub.models.financial import Account, Branch, CompositeCustomer, Customer
from customer_hub.normalizers.coercion import normalize_document

logger = logging.getLogger(__name__)


@dataclass
class CustomerDataStore:
    """In-memory indexes over one load's accounts and branches.

    Accounts are indexed by the digits of the owner's document so that
    ``123.456.789-00`` and ``12345678900`` land in the same bucket.
    Branches are indexed by code; the first branch seen for a code wins.
    """

    accounts: list[Account] = field(default_factory=list)
    branches: list[Branch] = field(default_factory=list)

    # Relationship indexes
    _document_accounts: dict[str, list[Account]] = field(default_factory=dict)
    _code_branches: dict[int, Branch] = field(default_factory=dict)

    def add_account(self, account: Account) -> None:
        """Add an account to the store."""
        self.accounts.append(account)
        document = normalize_document(account.owner_document)
        if document:
            self._document_accounts.setdefault(document, []).append(account)

    def add_branch(self, branch: Branch) -> None:
        """Add a branch to the store."""
        self.branches.append(branch)
        if branch.code in self._code_branches:
            logger.debug(
                "Duplicate branch code %s: keeping %s, ignoring %s",
                branch.code,
                self._code_branches[branch.code].branch_id,
                branch.branch_id,
            )
            return
        self._code_branches[branch.code] = branch

    def get_customer_accounts(self, customer: Customer) -> list[Account]:
        """Get accounts owned by a customer, in insertion order."""
        document = normalize_document(customer.document)
        if not document:
            return []
        return list(self._document_accounts.get(document, []))

    def get_customer_branch(self, customer: Customer) -> Branch | None:
        """Get the branch the customer belongs to, if any."""
        return self._code_branches.get(customer.branch_code)

    def compose(self, customer: Customer) -> CompositeCustomer:
        """Join a customer with its accounts and branch."""
        accounts = self.get_customer_accounts(customer)
        return CompositeCustomer(
            customer=customer,
            accounts=tuple(accounts) if accounts else None,
            branch=self.get_customer_branch(customer),
        )

    def get_stats(self) -> dict[str, int]:
        """Get entity counts."""
        return {
            "accounts": len(self.accounts),
            "branches": len(self.branches),
            "documents": len(self._document_accounts),
            "branch_codes": len(self._code_branches),
        }


def relate(
    customers: Iterable[Customer],
    accounts: Iterable[Account],
    branches: Iterable[Branch],
) -> list[CompositeCustomer]:
    """Join customers with their accounts and branch.

    Parameters
    ----------
    customers : Iterable[Customer]
        Customers, in display order. Duplicated documents are kept.
    accounts : Iterable[Account]
        Accounts; each customer receives them in this order.
    branches : Iterable[Branch]
        Branches; first match by code wins.

    Returns
    -------
    list[CompositeCustomer]
        One composite per customer, in input order.
    """
    store = CustomerDataStore()
    for account in accounts:
        store.add_account(account)
    for branch in branches:
        store.add_branch(branch)

    composites = [store.compose(customer) for customer in customers]
    logger.debug("Related %d customers using %s", len(composites), store.get_stats())
    return composites
