"""Configuration management for customer-hub."""

from dataclasses import dataclass, field

from customer_hub.exceptions import ConfigurationError

SHEET_BASE_URL = (
    "https://docs.google.com/spreadsheets/d/1PBN_HQOi5ZpKDd63mouxttFvvCwtmY97Tb5if5_cdBA"
    "/gviz/tq?tqx=out:csv&sheet="
)


@dataclass
class SourceConfig:
    """Remote CSV exports for each entity kind."""

    customers_url: str = SHEET_BASE_URL + "clientes"
    accounts_url: str = SHEET_BASE_URL + "contas"
    branches_url: str = SHEET_BASE_URL + "agencias"

    def to_dict(self) -> dict[str, str]:
        """Map entity kind name to source URL."""
        return {
            "customers": self.customers_url,
            "accounts": self.accounts_url,
            "branches": self.branches_url,
        }


@dataclass
class HttpConfig:
    """HTTP client configuration."""

    timeout_seconds: float = 10.0
    user_agent: str = "customer-hub/0.1"

    def __post_init__(self) -> None:
        if self.timeout_seconds <= 0:
            raise ConfigurationError(f"timeout_seconds must be positive, got {self.timeout_seconds}")


@dataclass
class DisplayConfig:
    """Presentation defaults."""

    page_size: int = 10

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ConfigurationError(f"page_size must be at least 1, got {self.page_size}")


@dataclass
class DashboardConfig:
    """Main configuration for customer-hub."""

    sources: SourceConfig = field(default_factory=SourceConfig)
    http: HttpConfig = field(default_factory=HttpConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "DashboardConfig":
        """Create config from environment variables."""
        import os

        defaults = SourceConfig()
        sources = SourceConfig(
            customers_url=os.getenv("CUSTOMERS_CSV_URL", defaults.customers_url),
            accounts_url=os.getenv("ACCOUNTS_CSV_URL", defaults.accounts_url),
            branches_url=os.getenv("BRANCHES_CSV_URL", defaults.branches_url),
        )

        http = HttpConfig(
            timeout_seconds=_env_number("HTTP_TIMEOUT", "10", float),
            user_agent=os.getenv("HTTP_USER_AGENT", HttpConfig.user_agent),
        )

        display = DisplayConfig(page_size=_env_number("PAGE_SIZE", "10", int))

        return cls(
            sources=sources,
            http=http,
            display=display,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _env_number(name: str, default: str, cast: type) -> "int | float":
    import os

    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc
