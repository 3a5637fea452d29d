import argparse
import logging
import os
import sys
from pathlib import Path

from PySide6.QtCore import QCoreApplication

ROOT = Path(__file__).resolve().parent
SRC_DIR = ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from catalog.actions import actions_for
from catalog.formatter import search_formatted
from catalog.search_client import SearchClient
from core.config import AppConfig
from core.errors import TrackSearchError
from core.state import AppState, Notify
from core.utils import collapse
from player.platform_dispatch import PlatformDispatcher
from player.playback import PlaybackController

logger = logging.getLogger("tracksearch")


def init_app_state(config: AppConfig | None = None) -> AppState:
    app_state = AppState()
    app_state.config = config or AppConfig.from_env()
    app_state.client = SearchClient.from_config(app_state.config)

    dispatcher = PlatformDispatcher(app_state.config, notify=app_state.notify)
    app_state.playback = PlaybackController(dispatcher)
    return app_state


def print_notification(n: Notify) -> None:
    print(f"[{n.notify_type}] {n.message}", file=sys.stderr)


def _choose(prompt: str, count: int, preset: int | None) -> int | None:
    """1-based choice from argv or stdin; None when out of range."""
    if preset is None:
        try:
            raw = input(prompt)
        except EOFError:
            return None
        try:
            preset = int(raw.strip())
        except ValueError:
            return None
    if 1 <= preset <= count:
        return preset - 1
    return None


def _print_numbered(labels: list[str]) -> None:
    for i, label in enumerate(labels, start=1):
        first, _, rest = label.partition("\n")
        print(f"{i:>2}. {first}")
        if rest:
            print(f"    {rest}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search the catalog and play a track or its album.")
    parser.add_argument("query", nargs="+", help="search terms")
    parser.add_argument("--pick", type=int, default=None, help="1-based result to select")
    parser.add_argument("--action", type=int, default=None, help="1-based action to run")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=os.getenv("TRACKSEARCH_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    qt_app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])

    app_state = init_app_state()
    app_state.connect_notifications(print_notification)

    term = collapse(" ".join(args.query))
    if len(term) < app_state.config.min_query_length:
        print(f"Query must be at least {app_state.config.min_query_length} characters.", file=sys.stderr)
        return 2

    try:
        candidates = search_formatted(term, app_state.client)
    except TrackSearchError as e:
        logger.error("Search failed: %s", e)
        print(f"Search failed: {e}", file=sys.stderr)
        return 1

    if not candidates:
        print("No tracks found.", file=sys.stderr)
        return 1

    _print_numbered([c.label for c in candidates])
    picked = _choose("Track #: ", len(candidates), args.pick)
    if picked is None:
        print("Invalid selection.", file=sys.stderr)
        return 2
    track = candidates[picked].track

    actions = actions_for(track, app_state.playback, show_metadata=print)
    _print_numbered([a.description for a in actions])
    chosen = _choose("Action #: ", len(actions), args.action)
    if chosen is None:
        print("Invalid selection.", file=sys.stderr)
        return 2

    actions[chosen](track)
    qt_app.processEvents()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
