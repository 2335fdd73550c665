"""UDP transport to a local synth process."""

import logging
import socket
from typing import Optional

from .base import SendResult, Transport
from .message import encode_message
from ..errors import TransportError
from ..mapping.sound_mapper import SynthParams

logger = logging.getLogger(__name__)


class UdpTransport(Transport):
    """Sends each trigger as a single UDP datagram.

    No acknowledgement and no retry; a failed send is logged and lost.
    """

    def __init__(self, host: str = "127.0.0.1", port: int = 3000):
        self.host = host
        self.port = int(port)
        self._sock: Optional[socket.socket] = None
        self.sent_count = 0
        self.error_count = 0

    def set_target(self, host: str, port: int) -> None:
        self.host = host
        self.port = int(port)
        logger.info(f"Synth target set to {self.host}:{self.port}")

    def _socket(self) -> socket.socket:
        if self._sock is None:
            try:
                self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            except OSError as e:
                raise TransportError(f"Could not open UDP socket: {e}") from e
        return self._sock

    def _send_line(self, line: str) -> None:
        try:
            self._socket().sendto(line.encode("ascii"), (self.host, self.port))
        except OSError as e:
            raise TransportError(f"Send to {self.host}:{self.port} failed: {e}") from e

    def send(self, params: SynthParams) -> SendResult:
        line = encode_message(params)
        try:
            self._send_line(line)
        except TransportError as e:
            self.error_count += 1
            logger.warning(f"Dropped synth message: {e}")
            return SendResult(ok=False, message=line, error=e)

        self.sent_count += 1
        logger.debug(f"Sent: {line.rstrip()}")
        return SendResult(ok=True, message=line)

    def close(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None
            logger.debug(f"Closed UDP socket ({self.sent_count} sent, {self.error_count} dropped)")
