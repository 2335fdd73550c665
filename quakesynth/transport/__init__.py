"""Transport module - One-way messages to the external synth."""

from .base import Transport, SendResult
from .message import encode_message, parse_message
from .udp import UdpTransport
from .factory import NullTransport, create_transport, create_transport_from_settings

__all__ = [
    "Transport",
    "SendResult",
    "encode_message",
    "parse_message",
    "UdpTransport",
    "NullTransport",
    "create_transport",
    "create_transport_from_settings",
]
