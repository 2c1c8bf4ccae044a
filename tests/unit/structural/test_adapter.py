"""Tests for the adapter pattern."""
import pytest

from gof_patterns.exceptions import UnsupportedMediaError, ValidationError
from gof_patterns.structural.adapter import AudioPlayer, MediaAdapter, demo


class TestAudioPlayer:
    def setup_method(self):
        self.player = AudioPlayer()

    def test_plays_mp3_natively(self):
        assert self.player.play("mp3", "song.mp3") == "Playing mp3 file. Name: song.mp3"

    @pytest.mark.parametrize("audio_type", ["vlc", "mp4", "MP4"])
    def test_adapted_formats(self, audio_type):
        result = self.player.play(audio_type, "clip")

        assert result == f"Playing {audio_type.lower()} file. Name: clip"

    def test_unsupported_format_message(self):
        assert self.player.play("avi", "mind me.avi") == "Invalid media. avi format not supported"


def test_adapter_rejects_unknown_format():
    with pytest.raises(UnsupportedMediaError) as exc_info:
        MediaAdapter("avi")

    assert exc_info.value.audio_type == "avi"
    assert isinstance(exc_info.value, ValidationError)


def test_adapter_translates_call():
    adapter = MediaAdapter("vlc")

    assert adapter.play("vlc", "far far away.vlc") == "Playing vlc file. Name: far far away.vlc"


def test_demo():
    assert demo()[-1] == "Invalid media. avi format not supported"
