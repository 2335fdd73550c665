"""Command-line entry point: headless playback of an earthquake dataset."""

import argparse
import logging
import sys
import time
from typing import Callable, Optional

from .config import Settings, settings
from .errors import LoadError
from .playback.schema import PlaybackState
from .session import Session

logger = logging.getLogger(__name__)


def setup_logging(config: Settings = settings) -> None:
    """Configure logging with sensible defaults.

    Log levels can be configured via environment variables:
      QUAKESYNTH_LOG_LEVEL=INFO                # Root level (DEBUG, INFO, WARNING, ERROR)
      QUAKESYNTH_LOG_LEVEL_PLAYBACK=INFO       # Playback progress
      QUAKESYNTH_LOG_LEVEL_INTERACTION=INFO    # Selection and edits
      QUAKESYNTH_LOG_LEVEL_TRANSPORT=WARNING   # Outbound messages (one line each at DEBUG)
    """
    root_level = getattr(logging, config.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=root_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Module-specific levels from settings
    module_levels = {
        "quakesynth.playback": config.log_level_playback,
        "quakesynth.interaction": config.log_level_interaction,
        "quakesynth.transport": config.log_level_transport,
    }

    for module, level_str in module_levels.items():
        level = getattr(logging, level_str.upper(), logging.INFO)
        logging.getLogger(module).setLevel(level)


def run(
    session: Session,
    max_ticks: Optional[int] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Tick the session until playback leaves PLAYING.

    Args:
        session: A loaded session
        max_ticks: Stop after this many ticks even if still playing
        sleep: Frame pacing function (``time.sleep`` by default)

    Returns:
        Number of ticks run
    """
    frame_time = 1.0 / session.config.target_fps
    ticks = 0
    while session.state == PlaybackState.PLAYING:
        if max_ticks is not None and ticks >= max_ticks:
            logger.info(f"Stopped after {ticks} ticks")
            break
        session.tick()
        ticks += 1
        sleep(frame_time)

    status = session.get_status()
    logger.info(f"Played {status.index}/{status.total_events} events in {ticks} ticks")
    return ticks


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quakesynth",
        description="Play an earthquake dataset to a UDP synth in chronological order",
    )
    parser.add_argument("data", nargs="?", help=f"Dataset CSV (default: {settings.data_path})")
    parser.add_argument("--host", help=f"Synth host (default: {settings.host})")
    parser.add_argument("--port", type=int, help=f"Synth UDP port (default: {settings.port})")
    parser.add_argument("--frames-per-event", type=int, help="Ticks between events")
    parser.add_argument("--preset", help="Mapping preset (linear, rumble, soft)")
    parser.add_argument("--no-output", action="store_true", help="Do not send synth messages")
    parser.add_argument("--max-ticks", type=int, help="Stop after N ticks")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run quakesynth headless."""
    args = build_parser().parse_args(argv)

    overrides = {
        "data_path": args.data,
        "host": args.host,
        "port": args.port,
        "frames_per_event": args.frames_per_event,
        "mapping_preset": args.preset,
    }
    config = settings.model_copy(update={k: v for k, v in overrides.items() if v is not None})
    if args.no_output:
        config = config.model_copy(update={"output_enabled": False})

    setup_logging(config)

    with Session(config) as session:
        try:
            session.load(config.data_path)
        except LoadError as e:
            logger.error(f"Cannot start: {e}")
            return 1
        run(session, max_ticks=args.max_ticks)
    return 0


if __name__ == "__main__":
    sys.exit(main())
