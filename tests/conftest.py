"""Pytest configuration and fixtures."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from customer_hub.config import DashboardConfig, SourceConfig
from customer_hub.ingest.fetcher import SheetFetcher

CUSTOMERS_URL = "https://sheets.test/clientes.csv"
ACCOUNTS_URL = "https://sheets.test/contas.csv"
BRANCHES_URL = "https://sheets.test/agencias.csv"

CUSTOMERS_CSV = (
    "id,cpfCnpj,rg,dataNascimento,nome,nomeSocial,email,endereco,rendaAnual,patrimonio,estadoCivil,codigoAgencia\r\n"
    'c1,123.456.789-00,12.345.678-9,1980-05-15,Ana Souza,,ana@email.com,"Rua A, 10",120000.50,"1.500,00",casado,2001\r\n'
)
ACCOUNTS_CSV = (
    "id,cpfCnpjCliente,tipo,saldo,limiteCredito,creditoDisponivel\r\n"
    "a1,12345678900,corrente,5250.75,10000,8500\r\n"
    "a2,123.456.789-00,poupanca,15000,0,0\r\n"
)
BRANCHES_CSV = "id,codigo,nome,endereco\r\nb1,2001,Agência Centro,\"Av. Brasil, 1\"\r\n"


def make_response(text: str = "", status_code: int = 200) -> MagicMock:
    """Build a fake ``requests.Response``."""
    response = MagicMock(spec=requests.Response)
    response.text = text
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.reason = "OK" if response.ok else "Error"
    response.headers = {"content-type": "text/csv; charset=utf-8"}
    return response


def make_session(responses: dict[str, MagicMock | Exception]) -> MagicMock:
    """Build a fake session answering GETs by URL."""
    session = MagicMock(spec=requests.Session)

    def get(url: str, **kwargs: object) -> MagicMock:
        outcome = responses[url]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    session.get.side_effect = get
    return session


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def config() -> DashboardConfig:
    """Config pointing at fake sheet URLs."""
    return DashboardConfig(
        sources=SourceConfig(
            customers_url=CUSTOMERS_URL,
            accounts_url=ACCOUNTS_URL,
            branches_url=BRANCHES_URL,
        )
    )


@pytest.fixture
def sheet_responses() -> dict[str, MagicMock | Exception]:
    """Successful responses for the three sheets."""
    return {
        CUSTOMERS_URL: make_response(CUSTOMERS_CSV),
        ACCOUNTS_URL: make_response(ACCOUNTS_CSV),
        BRANCHES_URL: make_response(BRANCHES_CSV),
    }


@pytest.fixture
def fetcher(config: DashboardConfig, sheet_responses: dict) -> SheetFetcher:
    """Fetcher backed by the fake sheet responses."""
    return SheetFetcher(config.http, session_factory=lambda: make_session(sheet_responses))
