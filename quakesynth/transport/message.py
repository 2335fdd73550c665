"""Outbound synth message encoding.

One trigger is one ASCII line of nine space-separated tokens, ending in
``;`` and a newline, as read by Pure Data's ``[netreceive -u]``::

    <amp> <pitch> <pan> <tsunami> <sig_norm> <magnitude> <depth> <duration_ms> 1;
"""

from ..mapping.sound_mapper import SynthParams

# Fixed trailing token that tells the synth to fire its envelope
TRIGGER_FLAG = "1"
TOKEN_COUNT = 9


def _fmt(value: float) -> str:
    return f"{value:.6f}"


def encode_message(params: SynthParams) -> str:
    """Encode synth parameters as a message line (including the newline)."""
    tokens = [
        _fmt(params.amplitude),
        _fmt(params.pitch),
        _fmt(params.pan),
        str(int(params.tsunami)),
        _fmt(params.significance_norm),
        _fmt(params.magnitude),
        _fmt(params.depth),
        _fmt(params.duration_ms),
        TRIGGER_FLAG,
    ]
    return " ".join(tokens) + ";\n"


def parse_message(line: str) -> SynthParams:
    """Parse a message line back into synth parameters.

    Raises:
        ValueError: If the line is not a well-formed trigger message.
    """
    body = line.strip()
    if not body.endswith(";"):
        raise ValueError(f"Message does not end with ';': {line!r}")

    tokens = body[:-1].split()
    if len(tokens) != TOKEN_COUNT:
        raise ValueError(f"Expected {TOKEN_COUNT} tokens, got {len(tokens)}: {line!r}")
    if tokens[-1] != TRIGGER_FLAG:
        raise ValueError(f"Bad trigger flag {tokens[-1]!r}")

    tsunami = int(tokens[3])
    if tsunami not in (0, 1):
        raise ValueError(f"Tsunami flag must be 0 or 1, got {tsunami}")

    return SynthParams(
        amplitude=float(tokens[0]),
        pitch=float(tokens[1]),
        pan=float(tokens[2]),
        tsunami=tsunami,
        significance_norm=float(tokens[4]),
        magnitude=float(tokens[5]),
        depth=float(tokens[6]),
        duration_ms=float(tokens[7]),
    )
