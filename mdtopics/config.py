"""Application configuration loaded from environment variables."""

from typing import Optional, Tuple
from urllib.parse import urlparse

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PORTS = {"tcp": 1883, "mqtt": 1883, "ssl": 8883, "mqtts": 8883}
TLS_SCHEMES = {"ssl", "mqtts"}


def parse_broker_url(url: str) -> Tuple[str, int, bool]:
    """Split a broker URI such as ``tcp://host:1883`` into host, port and TLS flag."""
    parsed = urlparse(url)
    scheme = parsed.scheme or "tcp"
    port = parsed.port or DEFAULT_PORTS.get(scheme, 1883)
    return parsed.hostname or "localhost", port, scheme in TLS_SCHEMES


class Settings(BaseSettings):
    """Global application settings."""

    broker_url: str = Field(
        default="tcp://localhost:1883", description="MQTT broker URI."
    )
    client_id: str = "md-tool"
    topic_prefix: str = "markdown"
    mqtt_qos: int = Field(default=0, ge=0, le=2)
    mqtt_retain: bool = True
    mqtt_keepalive: int = 60

    collect_duration: float = Field(
        default=10, ge=0, description="Seconds to collect messages when reconstructing."
    )
    output_path: Optional[str] = None

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def broker_host(self) -> str:
        return parse_broker_url(self.broker_url)[0]

    @property
    def broker_port(self) -> int:
        return parse_broker_url(self.broker_url)[1]

    @property
    def broker_uses_tls(self) -> bool:
        return parse_broker_url(self.broker_url)[2]


settings = Settings()
