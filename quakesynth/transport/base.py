"""Abstract interface for synth transports.

A transport carries encoded trigger messages one way to the external
synth. Sends are fire-and-forget: failures come back as a ``SendResult``
and are never raised to the caller.

Example usage:
    from quakesynth.transport import create_transport

    transport = create_transport("udp", host="127.0.0.1", port=3000)
    result = transport.send(params)
    if not result.ok:
        ...  # already logged; carry on
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..errors import TransportError
from ..mapping.sound_mapper import SynthParams


@dataclass(frozen=True)
class SendResult:
    """Outcome of one send.

    Attributes:
        ok: Whether the message left the process
        message: The encoded line that was (or would have been) sent
        error: The failure, when ``ok`` is False
    """

    ok: bool
    message: str
    error: Optional[TransportError] = None


class Transport(ABC):
    """Abstract base class for one-way synth transports."""

    @abstractmethod
    def send(self, params: SynthParams) -> SendResult:
        """Encode and send one trigger. Must not raise on channel failure."""

    def close(self) -> None:
        """Release any underlying resources."""

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
