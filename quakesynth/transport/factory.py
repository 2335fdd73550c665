"""Factory for creating synth transports."""

import logging
from typing import Literal

from .base import SendResult, Transport
from .message import encode_message
from .udp import UdpTransport
from ..mapping.sound_mapper import SynthParams

logger = logging.getLogger(__name__)

TransportType = Literal["udp", "none"]


class NullTransport(Transport):
    """A transport that encodes but sends nothing.

    Used when synth output is disabled but the interface is still needed.
    """

    def send(self, params: SynthParams) -> SendResult:
        line = encode_message(params)
        logger.debug(f"Output disabled, not sending: {line.rstrip()}")
        return SendResult(ok=True, message=line)


def create_transport(
    transport_type: TransportType = "udp",
    host: str = "127.0.0.1",
    port: int = 3000,
) -> Transport:
    """Create a synth transport.

    Args:
        transport_type: "udp" to send to ``host:port``, "none" to disable output
        host: Synth host
        port: Synth UDP port

    Returns:
        A Transport instance
    """
    if transport_type == "none":
        logger.info("Synth output disabled")
        return NullTransport()
    if transport_type == "udp":
        logger.info(f"Sending synth messages to udp://{host}:{port}")
        return UdpTransport(host=host, port=port)
    raise ValueError(f"Unknown transport type: {transport_type}")


def create_transport_from_settings() -> Transport:
    """Create a transport using the global settings."""
    from ..config import settings

    return create_transport(
        transport_type="udp" if settings.output_enabled else "none",
        host=settings.host,
        port=settings.port,
    )
