"""Thin wrapper around the paho-mqtt client."""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

import paho.mqtt.client as mqtt

from mdtopics.config import settings
from mdtopics.errors import TransportError
from mdtopics.transport.base import MessageHandler, topic_matches

logger = logging.getLogger(__name__)

CONNECT_TIMEOUT = 10.0
PUBLISH_TIMEOUT = 10.0


class MQTTTransport:
    """Connects on construction and runs the network loop in the background."""

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        client_id: Optional[str] = None,
        qos: Optional[int] = None,
        retain: Optional[bool] = None,
        use_tls: Optional[bool] = None,
    ) -> None:
        self.host = host or settings.broker_host
        self.port = port or settings.broker_port
        self.qos = settings.mqtt_qos if qos is None else qos
        self.retain = settings.mqtt_retain if retain is None else retain
        self.handlers: Dict[str, List[MessageHandler]] = {}
        self._handlers_lock = threading.Lock()
        self._connected = threading.Event()
        self._connect_failure: Optional[str] = None

        self.client = mqtt.Client(
            mqtt.CallbackAPIVersion.VERSION2,
            client_id=client_id or settings.client_id,
        )
        if use_tls is None:
            use_tls = settings.broker_uses_tls
        if use_tls:
            self.client.tls_set()
        self.client.on_connect = self._on_connect
        self.client.on_message = self._on_message
        self._connect()

    def _connect(self) -> None:
        try:
            self.client.connect(self.host, self.port, keepalive=settings.mqtt_keepalive)
        except OSError as exc:
            raise TransportError(f"MQTT connect error: {exc}") from exc
        self.client.loop_start()
        if not self._connected.wait(CONNECT_TIMEOUT):
            self.client.loop_stop()
            raise TransportError(
                f"MQTT connect error: no answer from {self.host}:{self.port} within {CONNECT_TIMEOUT}s"
            )
        if self._connect_failure:
            self.client.loop_stop()
            raise TransportError(f"MQTT connect error: {self._connect_failure}")
        logger.debug("Connected to MQTT broker %s:%s", self.host, self.port)

    def _on_connect(self, client, userdata, flags, reason_code, properties) -> None:
        if reason_code.is_failure:
            self._connect_failure = str(reason_code)
        self._connected.set()

    def _on_message(self, client, userdata, message) -> None:
        topic = message.topic
        payload = message.payload.decode("utf-8", errors="replace")
        with self._handlers_lock:
            targets = [
                handler
                for pattern, handlers in self.handlers.items()
                if topic_matches(pattern, topic)
                for handler in handlers
            ]
        for handler in targets:
            handler(topic, payload)

    def publish(self, key: str, value: str) -> None:
        info = self.client.publish(key, value, qos=self.qos, retain=self.retain)
        if info.rc != mqtt.MQTT_ERR_SUCCESS:
            raise TransportError(f"Publish to {key} failed: {mqtt.error_string(info.rc)}")
        try:
            info.wait_for_publish(PUBLISH_TIMEOUT)
        except (RuntimeError, ValueError) as exc:
            raise TransportError(f"Publish to {key} failed: {exc}") from exc
        if not info.is_published():
            raise TransportError(f"Publish to {key} not acknowledged within {PUBLISH_TIMEOUT}s")

    def subscribe(self, pattern: str, handler: MessageHandler) -> None:
        with self._handlers_lock:
            self.handlers.setdefault(pattern, []).append(handler)
        result, _ = self.client.subscribe(pattern, qos=self.qos)
        if result != mqtt.MQTT_ERR_SUCCESS:
            raise TransportError(f"Subscribe error for {pattern}: {mqtt.error_string(result)}")

    def unsubscribe(self, pattern: str) -> None:
        self.client.unsubscribe(pattern)
        with self._handlers_lock:
            self.handlers.pop(pattern, None)

    def close(self) -> None:
        self.client.disconnect()
        self.client.loop_stop()
