"""Exception types for quakesynth."""


class QuakesynthError(Exception):
    """Base class for quakesynth errors."""


class LoadError(QuakesynthError):
    """The event dataset is missing, empty, or malformed.

    Fatal: the session cannot proceed without data.
    """


class TransportError(QuakesynthError):
    """The outbound synth channel is unavailable.

    Non-fatal: logged and reported as a failed send, never raised into
    the controllers.
    """
