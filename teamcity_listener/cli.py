"""CLI entry point replaying recorded test events as TeamCity messages."""

import argparse
import json
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from teamcity_listener.config import ListenerConfig
from teamcity_listener.listener import TeamCityStepListener
from teamcity_listener.replay import EventLogError, read_events, replay
from teamcity_listener.sinks.loading import SinkNotFoundError, build_sink

EXIT_OK = 0
EXIT_USAGE = 2


def run(
    event_lines: Iterable[str],
    sink_key: str = "stdout",
    sink_config_json: str = "{}",
    flow_id: str | None = None,
) -> int:
    """Replay events through a listener writing to the selected sink."""
    log = logging.getLogger("teamcity_listener")

    log.info("Loading sink: %s", sink_key)
    try:
        sink = build_sink(sink_key, json.loads(sink_config_json))
    except (SinkNotFoundError, json.JSONDecodeError, ValidationError) as e:
        log.error("Cannot configure sink %s: %s", sink_key, e)
        return EXIT_USAGE

    listener = TeamCityStepListener.from_config(sink, ListenerConfig(flow_id=flow_id))

    try:
        count = replay(read_events(event_lines), listener)
    except EventLogError as e:
        log.error("%s", e)
        return EXIT_USAGE

    log.info("Replayed %d event(s)", count)
    return EXIT_OK


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Replay recorded test events as TeamCity service messages"
    )
    parser.add_argument(
        "--events",
        required=True,
        help="Path to a JSON Lines event log, or '-' for stdin",
    )
    parser.add_argument(
        "--sink",
        default="stdout",
        help="Sink key (stdout, logger)",
    )
    parser.add_argument(
        "--sink-config",
        default="{}",
        help="JSON configuration for the sink",
    )
    parser.add_argument(
        "--flow-id",
        default=None,
        help="Flow id attached to every message (default: $TEAMCITY_FLOW_ID)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    flow_id = args.flow_id or ListenerConfig.from_env().flow_id

    if args.events == "-":
        exit_code = run(sys.stdin, args.sink, args.sink_config, flow_id)
    else:
        with Path(args.events).open(encoding="utf-8") as event_lines:
            exit_code = run(event_lines, args.sink, args.sink_config, flow_id)
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
