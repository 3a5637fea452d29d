# catalog/actions.py
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from core.record import get_str

logger = logging.getLogger(__name__)

SHOW_METADATA = "Show Track Metadata"


@dataclass(frozen=True)
class Action:
    description: str
    handler: Callable[[Any], None]

    def __iter__(self) -> Iterator:
        return iter((self.description, self.handler))

    def __call__(self, track) -> None:
        self.handler(track)


def render_metadata(track) -> str:
    return json.dumps(track, indent=2, sort_keys=True, ensure_ascii=False, default=str)


def _log_metadata(text: str) -> None:
    logger.info("Track metadata:\n%s", text)


def actions_for(track, playback, show_metadata: Optional[Callable[[str], None]] = None) -> list[Action]:
    """
    Always three actions, in this order: play track, play album, show metadata.
    Names are concatenated as-is, never run through a formatter.
    """
    sink = show_metadata or _log_metadata

    def _show(t) -> None:
        sink(render_metadata(t))

    return [
        Action("Play Track - " + get_str(track, ["name"]), playback.play_track),
        Action("Play Album - " + get_str(track, ["album", "name"]), playback.play_album),
        Action(SHOW_METADATA, _show),
    ]
