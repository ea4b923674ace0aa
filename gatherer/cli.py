from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from gatherer.config import load_config
from gatherer.logging import configure_logging
from gatherer.runtime import run_pass
from shared.schemas import FailureSentinel, artifact_payload
from shared.serialization import canonical_json_text

logger = logging.getLogger("event_listener_gatherer")


def cmd_collect(args: argparse.Namespace) -> int:
    config = load_config(Path(args.config).expanduser() if args.config else None)
    artifact = asyncio.run(run_pass(args.url, config))
    text = canonical_json_text(artifact_payload(artifact))
    if args.output:
        output = Path(args.output).expanduser()
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n", encoding="utf-8")
        logger.info("wrote artifact to %s", output)
    else:
        print(text)
    return 1 if isinstance(artifact, FailureSentinel) else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="event-listener-gatherer")
    parser.add_argument("--verbose", action="store_true")
    subparsers = parser.add_subparsers(dest="command", required=True)

    collect_parser = subparsers.add_parser("collect", help="load a page once and print its event listeners")
    collect_parser.add_argument("url")
    collect_parser.add_argument("--config", type=str, default=None)
    collect_parser.add_argument("--output", type=str, default=None)
    collect_parser.set_defaults(func=cmd_collect)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=bool(args.verbose))
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
