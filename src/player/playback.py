# player/playback.py
from __future__ import annotations

from core.record import get_in

TRACK_URI_PATH = ("uri",)
ALBUM_URI_PATH = ("album", "uri")


class PlaybackController:
    def __init__(self, dispatcher):
        self.dispatcher = dispatcher

    def play_track(self, track) -> None:
        self.dispatcher.play_href(get_in(track, TRACK_URI_PATH))

    def play_album(self, track) -> None:
        self.dispatcher.play_href(get_in(track, ALBUM_URI_PATH))
