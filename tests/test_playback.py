from player.playback import PlaybackController


def test_play_track_forwards_track_uri(bowie_track, recording_dispatcher):
    PlaybackController(recording_dispatcher).play_track(bowie_track)
    assert recording_dispatcher.hrefs == ["spotify:track:abc"]


def test_play_album_forwards_album_uri(bowie_track, recording_dispatcher):
    PlaybackController(recording_dispatcher).play_album(bowie_track)
    assert recording_dispatcher.hrefs == ["spotify:album:def"]


def test_absent_uri_is_forwarded_as_is(recording_dispatcher):
    controller = PlaybackController(recording_dispatcher)
    controller.play_track({})
    controller.play_album({"album": None})
    assert recording_dispatcher.hrefs == [None, None]
