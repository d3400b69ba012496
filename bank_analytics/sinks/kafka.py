"""Kafka sink for publishing report rows and audit findings."""

import json
import logging
import time
from dataclasses import dataclass
from typing import Any

from confluent_kafka import Producer

from bank_analytics.config import KafkaConfig
from bank_analytics.exceptions import SinkError
from bank_analytics.sinks.serialization import record_key, to_dict

logger = logging.getLogger(__name__)


@dataclass
class ProducerStats:
    """Track producer delivery statistics."""

    sent: int = 0
    delivered: int = 0
    failed: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def success_rate(self) -> float:
        """Calculate success rate."""
        total = self.delivered + self.failed
        return self.delivered / total if total > 0 else 0.0

    @property
    def throughput(self) -> float:
        """Calculate events per second achieved."""
        if self.start_time is None or self.end_time is None:
            return 0.0
        duration = self.end_time - self.start_time
        return self.sent / duration if duration > 0 else 0.0


class KafkaSink:
    """Publish each report row as a JSON message.

    Rows of report ``name`` go to topic ``<topic_prefix>.<name>``, keyed by
    the row's account, customer or transaction id so that all findings for
    one entity land on the same partition.
    """

    def __init__(self, config: KafkaConfig | str) -> None:
        """Initialize Kafka sink.

        Parameters
        ----------
        config : KafkaConfig | str
            Producer configuration or bootstrap servers string.
        """
        if isinstance(config, str):
            config = KafkaConfig(bootstrap_servers=config)

        self.config = config
        self.producer = Producer(config.to_dict())
        self.stats = ProducerStats()
        self._first_error: str | None = None

    def topic_for(self, name: str) -> str:
        """Topic that rows of report ``name`` are published to."""
        return f"{self.config.topic_prefix}.{name.replace('_', '-')}"

    def _delivery_callback(self, err: Any, msg: Any) -> None:
        """Handle delivery reports."""
        if err:
            self.stats.failed += 1
            if self._first_error is None:
                self._first_error = str(err)
            logger.error("Delivery failed: %s", err)
        else:
            self.stats.delivered += 1
            logger.debug("Delivered to %s[%d]@%d", msg.topic(), msg.partition(), msg.offset())

    def send(self, topic: str, record: Any, key: str | None = None) -> None:
        """Send a single row to a Kafka topic."""
        value = json.dumps(to_dict(record), ensure_ascii=False).encode("utf-8")

        if key is None:
            key = record_key(record)

        self.producer.produce(
            topic=topic,
            key=key.encode("utf-8") if key else None,
            value=value,
            callback=self._delivery_callback,
        )
        self.stats.sent += 1
        self.producer.poll(0)

    def write_batch(self, name: str, records: list[Any]) -> None:
        """Publish all rows of one report and wait for delivery."""
        topic = self.topic_for(name)
        logger.info("Publishing %d rows of %s to %s", len(records), name, topic)

        if self.stats.start_time is None:
            self.stats.start_time = time.time()
        for record in records:
            self.send(topic, record)

        self.flush()
        self.stats.end_time = time.time()
        self._log_stats(f"Report {name} published")

    def flush(self, timeout: float = 30.0) -> None:
        """Flush pending messages."""
        remaining = self.producer.flush(timeout)
        if remaining:
            logger.warning("%d messages still queued after %.1fs flush", remaining, timeout)

    def _log_stats(self, label: str) -> None:
        logger.info(
            "%s: sent=%d, delivered=%d, failed=%d (%.0f msg/s)",
            label,
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
            self.stats.throughput,
        )

    def close(self) -> None:
        """Flush the producer; raise SinkError if any delivery failed."""
        self.flush()
        self._log_stats("Kafka sink closed")
        if self.stats.failed:
            raise SinkError(
                f"{self.stats.failed} of {self.stats.sent} messages failed, "
                f"first: {self._first_error}"
            )
