# catalog/formatter.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from core.record import get_in, get_str
from core.utils import format_duration


@dataclass(frozen=True)
class Candidate:
    label: str
    track: dict

    # lets callers unpack `label, track = candidate`
    def __iter__(self) -> Iterator:
        return iter((self.label, self.track))


def _artist_names(track) -> str:
    artists = get_in(track, ["artists"])
    if not isinstance(artists, list):
        return ""
    return "/".join(get_str(a, ["name"]) for a in artists)


def format_track(track) -> str:
    """
    "<name> (<m>m<s>s)\\n<artist1>/<artist2> - <album>"
    Pure function of the record; absent fields render as "".
    """
    name = get_str(track, ["name"])
    duration = format_duration(get_in(track, ["duration_ms"]))
    album = get_str(track, ["album", "name"])
    return f"{name} ({duration})\n{_artist_names(track)} - {album}"


def search_formatted(term: str, client) -> list[Candidate]:
    return [Candidate(label=format_track(t), track=t) for t in client.search(term)]
