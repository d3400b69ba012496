"""Configuration management for bank-analytics."""

import os
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from bank_analytics.clock import Clock, FixedClock, SystemClock
from bank_analytics.exceptions import ConfigurationError

SOURCES = ("csv", "json", "postgres")


@dataclass
class PostgresConfig:
    """PostgreSQL connection configuration."""

    host: str = "localhost"
    port: int = 5432
    database: str = "banking"
    user: str = "postgres"
    password: str = "postgres"
    schema: str = "bronze"
    customers_table: str = "customers"
    accounts_table: str = "accounts"
    transactions_table: str = "transactions"

    @property
    def connection_string(self) -> str:
        """Get connection string."""
        return f"postgresql://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"


@dataclass
class KafkaConfig:
    """Kafka producer configuration for publishing report rows."""

    bootstrap_servers: str = "localhost:9092"
    acks: str = "all"
    batch_size: int = 16384
    linger_ms: int = 5
    compression: str = "snappy"
    retries: int = 3
    topic_prefix: str = "banking.reports"

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "batch.size": self.batch_size,
            "linger.ms": self.linger_ms,
            "compression.type": self.compression,
            "retries": self.retries,
        }


@dataclass
class OutputConfig:
    """Output configuration."""

    output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class ReportConfig:
    """Default parameters for the named reports."""

    recent_account_days: int = 365
    top_customers: int = 5
    large_withdrawal_threshold: Decimal = Decimal("500")
    large_withdrawal_days: int = 30
    deposit_months: int = 6
    average_months: int = 12

    def validate(self) -> None:
        """Raise ConfigurationError if any default is out of range."""
        for name in (
            "recent_account_days",
            "large_withdrawal_days",
            "deposit_months",
            "average_months",
        ):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must be >= 0")
        if self.top_customers < 1:
            raise ConfigurationError("top_customers must be >= 1")
        if self.large_withdrawal_threshold < 0:
            raise ConfigurationError("large_withdrawal_threshold must be >= 0")


@dataclass
class AnalyticsConfig:
    """Main configuration for bank-analytics."""

    postgres: PostgresConfig = field(default_factory=PostgresConfig)
    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    reports: ReportConfig = field(default_factory=ReportConfig)
    source: str = "csv"
    source_path: Path = field(default_factory=lambda: Path("data"))
    as_of: date | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    def clock(self) -> Clock:
        """Clock for report windows: pinned to ``as_of`` when set."""
        if self.as_of is not None:
            return FixedClock(self.as_of)
        return SystemClock()

    @classmethod
    def from_env(cls) -> "AnalyticsConfig":
        """Create config from environment variables."""
        postgres = PostgresConfig(
            host=os.getenv("POSTGRES_HOST", "localhost"),
            port=_env_int("POSTGRES_PORT", 5432),
            database=os.getenv("POSTGRES_DB", "banking"),
            user=os.getenv("POSTGRES_USER", "postgres"),
            password=os.getenv("POSTGRES_PASSWORD", "postgres"),
            schema=os.getenv("POSTGRES_SCHEMA", "bronze"),
        )

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            acks=os.getenv("KAFKA_ACKS", "all"),
            topic_prefix=os.getenv("TOPIC_PREFIX", "banking.reports"),
        )

        output = OutputConfig(
            output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        reports = ReportConfig(
            recent_account_days=_env_int("REPORT_RECENT_ACCOUNT_DAYS", 365),
            top_customers=_env_int("REPORT_TOP_CUSTOMERS", 5),
            large_withdrawal_threshold=_env_decimal("REPORT_LARGE_WITHDRAWAL_THRESHOLD", "500"),
            large_withdrawal_days=_env_int("REPORT_LARGE_WITHDRAWAL_DAYS", 30),
            deposit_months=_env_int("REPORT_DEPOSIT_MONTHS", 6),
            average_months=_env_int("REPORT_AVERAGE_MONTHS", 12),
        )
        reports.validate()

        source = os.getenv("DATA_SOURCE", "csv").lower()
        if source not in SOURCES:
            raise ConfigurationError(f"DATA_SOURCE must be one of {SOURCES}, got {source!r}")

        as_of_str = os.getenv("REPORT_AS_OF")
        try:
            as_of = date.fromisoformat(as_of_str) if as_of_str else None
        except ValueError as e:
            raise ConfigurationError(f"REPORT_AS_OF is not an ISO date: {as_of_str!r}") from e

        return cls(
            postgres=postgres,
            kafka=kafka,
            output=output,
            reports=reports,
            source=source,
            source_path=Path(os.getenv("DATA_PATH", "data")),
            as_of=as_of,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def _env_decimal(name: str, default: str) -> Decimal:
    raw = os.getenv(name) or default
    try:
        return Decimal(raw)
    except InvalidOperation as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e
