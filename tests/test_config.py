"""Tests for settings and broker URI handling."""

from __future__ import annotations

import pytest

from mdtopics.config import Settings, parse_broker_url


@pytest.mark.parametrize(
    "url, expected",
    [
        ("tcp://localhost:1883", ("localhost", 1883, False)),
        ("tcp://broker.example", ("broker.example", 1883, False)),
        ("mqtts://broker.example", ("broker.example", 8883, True)),
        ("ssl://broker.example:8884", ("broker.example", 8884, True)),
    ],
)
def test_parse_broker_url(url: str, expected) -> None:
    assert parse_broker_url(url) == expected


def test_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("TOPIC_PREFIX", "docs")
    monkeypatch.setenv("BROKER_URL", "ssl://mq.example:9000")
    monkeypatch.setenv("COLLECT_DURATION", "2.5")
    monkeypatch.setenv("OUTPUT_PATH", "out/doc.md")
    configured = Settings()
    assert configured.topic_prefix == "docs"
    assert configured.broker_host == "mq.example"
    assert configured.broker_port == 9000
    assert configured.broker_uses_tls is True
    assert configured.collect_duration == 2.5
    assert configured.output_path == "out/doc.md"


def test_settings_defaults() -> None:
    configured = Settings(_env_file=None)
    assert configured.client_id == "md-tool"
    assert configured.mqtt_qos == 0
    assert configured.mqtt_retain is True
    assert configured.output_path is None
