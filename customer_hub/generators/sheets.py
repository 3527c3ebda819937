"""Generate CSV exports shaped like the customer, account and branch sheets."""

from __future__ import annotations

import csv
import io
from typing import Any

from customer_hub.formatters import format_document
from customer_hub.generators.base import BaseGenerator
from customer_hub.generators.documents import generate_cnpj, generate_cpf
from customer_hub.models.base import EntityKind
from customer_hub.models.financial import AccountType

CUSTOMER_COLUMNS = [
    "id",
    "cpfCnpj",
    "rg",
    "dataNascimento",
    "nome",
    "nomeSocial",
    "email",
    "endereco",
    "rendaAnual",
    "patrimonio",
    "estadoCivil",
    "codigoAgencia",
]
ACCOUNT_COLUMNS = ["id", "cpfCnpjCliente", "tipo", "saldo", "limiteCredito", "creditoDisponivel"]
BRANCH_COLUMNS = ["id", "codigo", "nome", "endereco"]


class SampleSheetGenerator(BaseGenerator):
    """Generate realistic sheet exports as CSV text.

    Every customer points at one of the generated branches and owns
    zero to three accounts keyed by its formatted CPF/CNPJ.
    """

    MARITAL_STATUSES = ["solteiro", "casado", "divorciado", "viúvo"]
    MARITAL_WEIGHTS = [0.40, 0.45, 0.10, 0.05]

    ACCOUNTS_PER_CUSTOMER = [0, 1, 2, 3]
    ACCOUNTS_WEIGHTS = [0.10, 0.55, 0.30, 0.05]

    COMPANY_RATE = 0.10
    SOCIAL_NAME_RATE = 0.05

    def generate(self, num_customers: int = 20, num_branches: int = 3) -> dict[EntityKind, str]:
        """Generate the three sheets.

        Parameters
        ----------
        num_customers : int
            Number of customer rows.
        num_branches : int
            Number of branch rows (at least 1).

        Returns
        -------
        dict[EntityKind, str]
            CSV text per entity kind.
        """
        if num_branches < 1:
            raise ValueError("num_branches must be at least 1")

        branches = [self._branch_row(i) for i in range(1, num_branches + 1)]
        customers = [
            self._customer_row(i, branches) for i in range(1, num_customers + 1)
        ]

        accounts: list[dict[str, Any]] = []
        for customer in customers:
            count = self.rng.choices(self.ACCOUNTS_PER_CUSTOMER, weights=self.ACCOUNTS_WEIGHTS, k=1)[0]
            for _ in range(count):
                accounts.append(self._account_row(len(accounts) + 1, customer))

        return {
            EntityKind.CUSTOMERS: to_csv(CUSTOMER_COLUMNS, customers),
            EntityKind.ACCOUNTS: to_csv(ACCOUNT_COLUMNS, accounts),
            EntityKind.BRANCHES: to_csv(BRANCH_COLUMNS, branches),
        }

    def _branch_row(self, index: int) -> dict[str, Any]:
        return {
            "id": str(index),
            "codigo": 1000 + index,
            "nome": f"Agência {self.fake.city()}",
            "endereco": self._address(),
        }

    def _customer_row(self, index: int, branches: list[dict[str, Any]]) -> dict[str, Any]:
        is_company = self.rng.random() < self.COMPANY_RATE
        if is_company:
            document = format_document(generate_cnpj(self.rng))
            name = self.fake.company()
            national_id = ""
        else:
            document = format_document(generate_cpf(self.rng))
            name = self.fake.name()
            national_id = self.fake.rg()

        income = round(self.rng.lognormvariate(11.0, 0.7), 2)
        return {
            "id": str(index),
            "cpfCnpj": document,
            "rg": national_id,
            "dataNascimento": self.fake.date_of_birth(minimum_age=18, maximum_age=90).isoformat(),
            "nome": name,
            "nomeSocial": self.fake.first_name() if self.rng.random() < self.SOCIAL_NAME_RATE else "",
            "email": self.fake.email(),
            "endereco": self._address(),
            "rendaAnual": f"{income:.2f}",
            "patrimonio": f"{income * self.rng.uniform(0.5, 8.0):.2f}",
            "estadoCivil": self.rng.choices(self.MARITAL_STATUSES, weights=self.MARITAL_WEIGHTS, k=1)[0],
            "codigoAgencia": self.rng.choice(branches)["codigo"],
        }

    def _account_row(self, index: int, customer: dict[str, Any]) -> dict[str, Any]:
        account_type = self.rng.choice(list(AccountType))
        if account_type == AccountType.CHECKING:
            limit = self.rng.choice([0, 1000, 2500, 5000, 10000])
            available = round(limit * self.rng.uniform(0.2, 1.0), 2)
        else:
            limit = 0
            available = 0
        return {
            "id": str(index),
            "cpfCnpjCliente": customer["cpfCnpj"],
            "tipo": account_type.value,
            "saldo": f"{self.rng.uniform(0, 50000):.2f}",
            "limiteCredito": limit,
            "creditoDisponivel": available,
        }

    def _address(self) -> str:
        return f"{self.fake.street_address()}, {self.fake.bairro()}, {self.fake.city()} - {self.fake.estado_sigla()}"


def to_csv(columns: list[str], rows: list[dict[str, Any]]) -> str:
    """Render rows as CSV text with a header line."""
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=columns, lineterminator="\r\n")
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue()
