"""Branch normalizer for financial domain."""

from __future__ import annotations

from customer_hub.models.base import RawRow
from customer_hub.models.financial import Branch
from customer_hub.normalizers.base import BaseNormalizer
from customer_hub.normalizers.coercion import to_int, to_text

BRANCH_WITHOUT_NAME = "Agência sem nome"


class BranchNormalizer(BaseNormalizer[Branch]):
    """Normalize rows of the ``agencias`` sheet (id, codigo, nome, endereco)."""

    identity_columns = ("id", "codigo")

    def build(self, row: RawRow) -> Branch:
        return Branch(
            branch_id=self.record_id(row),
            code=to_int(row.get("codigo"), 0),
            name=to_text(row.get("nome"), BRANCH_WITHOUT_NAME),
            address=to_text(row.get("endereco")),
        )
