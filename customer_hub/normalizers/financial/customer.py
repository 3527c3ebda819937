"""Customer normalizer for financial domain."""

from __future__ import annotations

from customer_hub.models.base import RawRow
from customer_hub.models.financial import Customer
from customer_hub.normalizers.base import BaseNormalizer
from customer_hub.normalizers.coercion import (
    to_date,
    to_document,
    to_int,
    to_number,
    to_optional_text,
    to_text,
)

NAME_NOT_INFORMED = "Nome não informado"
MARITAL_STATUS_NOT_INFORMED = "Não informado"


class CustomerNormalizer(BaseNormalizer[Customer]):
    """Normalize rows of the ``clientes`` sheet.

    Columns: id, cpfCnpj, rg, dataNascimento, nome, nomeSocial, email,
    endereco, rendaAnual, patrimonio, estadoCivil, codigoAgencia.
    """

    identity_columns = ("id", "cpfCnpj")

    def build(self, row: RawRow) -> Customer:
        return Customer(
            customer_id=self.record_id(row),
            document=to_document(row.get("cpfCnpj")),
            national_id=to_optional_text(row.get("rg")),
            birth_date=to_date(row.get("dataNascimento")),
            name=to_text(row.get("nome"), NAME_NOT_INFORMED),
            social_name=to_optional_text(row.get("nomeSocial")),
            email=to_text(row.get("email")),
            address=to_text(row.get("endereco")),
            annual_income=to_number(row.get("rendaAnual"), 0),
            net_worth=to_number(row.get("patrimonio"), 0),
            marital_status=to_text(row.get("estadoCivil"), MARITAL_STATUS_NOT_INFORMED),
            branch_code=to_int(row.get("codigoAgencia"), 0),
        )
