"""quakesynth - earthquake dataset sonification over UDP."""

from .errors import QuakesynthError, LoadError, TransportError
from .session import Session

__version__ = "0.1.0"

__all__ = [
    "QuakesynthError",
    "LoadError",
    "TransportError",
    "Session",
    "__version__",
]
