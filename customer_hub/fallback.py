"""Built-in sample records used when the remote sheets cannot be loaded.

The records are kept as raw rows with the sheet's column names so they go
through the same normalization as remote data.
"""

from __future__ import annotations

import copy

from customer_hub.models.base import EntityKind, RawRow

BRANCH_ROWS: list[RawRow] = [
    {"id": "1", "codigo": 1001, "nome": "Agência Central", "endereco": "Av. Paulista, 1000, São Paulo - SP"},
    {"id": "2", "codigo": 1002, "nome": "Agência Norte", "endereco": "Rua das Flores, 123, Rio de Janeiro - RJ"},
    {"id": "3", "codigo": 1003, "nome": "Agência Sul", "endereco": "Av. Beira Mar, 500, Florianópolis - SC"},
]

ACCOUNT_ROWS: list[RawRow] = [
    {
        "id": "1",
        "cpfCnpjCliente": "123.456.789-00",
        "tipo": "corrente",
        "saldo": 5250.75,
        "limiteCredito": 10000,
        "creditoDisponivel": 8500,
    },
    {
        "id": "2",
        "cpfCnpjCliente": "123.456.789-00",
        "tipo": "poupanca",
        "saldo": 15000,
        "limiteCredito": 0,
        "creditoDisponivel": 0,
    },
    {
        "id": "3",
        "cpfCnpjCliente": "987.654.321-00",
        "tipo": "corrente",
        "saldo": 3200.5,
        "limiteCredito": 5000,
        "creditoDisponivel": 4000,
    },
    {
        "id": "4",
        "cpfCnpjCliente": "111.222.333-44",
        "tipo": "corrente",
        "saldo": 1800.25,
        "limiteCredito": 3000,
        "creditoDisponivel": 2500,
    },
]

CUSTOMER_ROWS: list[RawRow] = [
    {
        "id": "1",
        "cpfCnpj": "123.456.789-00",
        "rg": "12.345.678-9",
        "dataNascimento": "1980-05-15",
        "nome": "João Silva",
        "nomeSocial": None,
        "email": "joao.silva@email.com",
        "endereco": "Rua das Flores, 123, Jardim Primavera, São Paulo - SP",
        "rendaAnual": 120000,
        "patrimonio": 500000,
        "estadoCivil": "Casado",
        "codigoAgencia": 1001,
    },
    {
        "id": "2",
        "cpfCnpj": "987.654.321-00",
        "rg": "98.765.432-1",
        "dataNascimento": "1975-10-20",
        "nome": "Maria Oliveira",
        "nomeSocial": None,
        "email": "maria.oliveira@email.com",
        "endereco": "Av. Central, 456, Centro, Rio de Janeiro - RJ",
        "rendaAnual": 90000,
        "patrimonio": 350000,
        "estadoCivil": "Casado",
        "codigoAgencia": 1002,
    },
    {
        "id": "3",
        "cpfCnpj": "111.222.333-44",
        "rg": "11.222.333-4",
        "dataNascimento": "1990-03-25",
        "nome": "Ana Santos",
        "nomeSocial": None,
        "email": "ana.santos@email.com",
        "endereco": "Alameda dos Anjos, 50, Paraíso, São Paulo - SP",
        "rendaAnual": 75000,
        "patrimonio": 200000,
        "estadoCivil": "Solteiro",
        "codigoAgencia": 1001,
    },
    {
        "id": "4",
        "cpfCnpj": "444.555.666-77",
        "rg": "44.555.666-7",
        "dataNascimento": "1985-07-12",
        "nome": "Carlos Ferreira",
        "nomeSocial": None,
        "email": "carlos.ferreira@email.com",
        "endereco": "Rua das Montanhas, 321, Serra, Belo Horizonte - MG",
        "rendaAnual": 110000,
        "patrimonio": 450000,
        "estadoCivil": "Divorciado",
        "codigoAgencia": 1003,
    },
    {
        "id": "5",
        "cpfCnpj": "777.888.999-00",
        "rg": "77.888.999-0",
        "dataNascimento": "1982-12-05",
        "nome": "Fernanda Lima",
        "nomeSocial": None,
        "email": "fernanda.lima@email.com",
        "endereco": "Rua do Sol, 77, Boa Viagem, Recife - PE",
        "rendaAnual": 95000,
        "patrimonio": 320000,
        "estadoCivil": "Casado",
        "codigoAgencia": 1002,
    },
]


def fallback_rows() -> dict[EntityKind, list[RawRow]]:
    """Return fresh copies of the built-in rows, keyed by entity kind."""
    return {
        EntityKind.CUSTOMERS: copy.deepcopy(CUSTOMER_ROWS),
        EntityKind.ACCOUNTS: copy.deepcopy(ACCOUNT_ROWS),
        EntityKind.BRANCHES: copy.deepcopy(BRANCH_ROWS),
    }
