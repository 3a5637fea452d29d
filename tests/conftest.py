import pytest
from PySide6.QtCore import QCoreApplication


BOWIE_TRACK = {
    "name": "Let's Dance",
    "duration_ms": 252000,
    "uri": "spotify:track:abc",
    "album": {"name": "Let's Dance", "uri": "spotify:album:def"},
    "artists": [{"name": "David Bowie"}],
}


@pytest.fixture(scope="session")
def qt_app():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def bowie_track():
    return {
        **BOWIE_TRACK,
        "album": dict(BOWIE_TRACK["album"]),
        "artists": [dict(a) for a in BOWIE_TRACK["artists"]],
    }


class RecordingDispatcher:
    """Stands in for PlatformDispatcher; remembers every href."""

    def __init__(self):
        self.hrefs = []

    def play_href(self, href):
        self.hrefs.append(href)


@pytest.fixture
def recording_dispatcher():
    return RecordingDispatcher()
