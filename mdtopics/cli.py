"""CLI entry point for publishing and reconstructing markdown over MQTT."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

from mdtopics import __version__
from mdtopics.config import parse_broker_url, settings
from mdtopics.errors import MDTopicsError
from mdtopics.ingestion.publish import publish_file
from mdtopics.reconstruction.collect import reconstruct
from mdtopics.transport.base import Transport

logger = logging.getLogger(__name__)

TransportFactory = Callable[[argparse.Namespace], Transport]


def open_mqtt(args: argparse.Namespace) -> Transport:
    from mdtopics.transport.mqtt_client import MQTTTransport

    host, port, use_tls = parse_broker_url(args.broker)
    return MQTTTransport(host=host, port=port, use_tls=use_tls)


def run_publish(args: argparse.Namespace, transport: Transport) -> int:
    publish_file(Path(args.markdown_file), transport, args.topic)
    return 0


def run_reconstruct(args: argparse.Namespace, transport: Transport) -> int:
    output = Path(args.output) if args.output else None
    markdown = reconstruct(transport, args.topic, args.duration, output)
    if output is None:
        sys.stdout.write(markdown)
    return 0


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--broker", default=settings.broker_url, help="MQTT broker URI")
    parser.add_argument(
        "--topic", default=settings.topic_prefix, help="Topic prefix for publishing/reconstructing"
    )
    parser.add_argument(
        "--log-level", default=settings.log_level, choices=["DEBUG", "INFO", "WARNING", "ERROR"]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdtopics",
        description="Publish markdown sections as MQTT topics and rebuild documents from them.",
    )
    parser.add_argument("--version", action="version", version=f"mdtopics {__version__}")
    subparsers = parser.add_subparsers(title="modes", dest="mode", metavar="<mode>")
    subparsers.required = True

    publish = subparsers.add_parser("publish", help="Publish every paragraph of a markdown file.")
    publish.add_argument("markdown_file", help="Path to the markdown file")
    _add_common(publish)
    publish.set_defaults(func=run_publish)

    rebuild = subparsers.add_parser("reconstruct", help="Collect records and rebuild the document.")
    rebuild.add_argument(
        "--duration", type=float, default=settings.collect_duration,
        help="Seconds to collect messages",
    )
    rebuild.add_argument(
        "--output", "-o", default=settings.output_path,
        help="Output file for reconstructed Markdown (stdout when omitted)",
    )
    _add_common(rebuild)
    rebuild.set_defaults(func=run_reconstruct)

    return parser


def main(argv: Optional[List[str]] = None, transport_factory: TransportFactory = open_mqtt) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        transport = transport_factory(args)
    except MDTopicsError:
        logger.exception("Could not reach the broker")
        return 1

    try:
        return args.func(args, transport)
    except (MDTopicsError, OSError):
        logger.exception("%s failed", args.mode)
        return 1
    finally:
        transport.close()


if __name__ == "__main__":
    sys.exit(main())
