"""Adapter - let an mp3 player drive the advanced vlc/mp4 players."""

from abc import ABC, abstractmethod

from gof_patterns.exceptions import UnsupportedMediaError


class MediaPlayer(ABC):
    @abstractmethod
    def play(self, audio_type: str, file_name: str) -> str:
        pass


class AdvancedMediaPlayer(ABC):
    @abstractmethod
    def play_vlc(self, file_name: str) -> str:
        pass

    @abstractmethod
    def play_mp4(self, file_name: str) -> str:
        pass


class VlcPlayer(AdvancedMediaPlayer):
    def play_vlc(self, file_name: str) -> str:
        return f"Playing vlc file. Name: {file_name}"

    def play_mp4(self, file_name: str) -> str:
        return ""


class Mp4Player(AdvancedMediaPlayer):
    def play_vlc(self, file_name: str) -> str:
        return ""

    def play_mp4(self, file_name: str) -> str:
        return f"Playing mp4 file. Name: {file_name}"


class MediaAdapter(MediaPlayer):
    """Translates MediaPlayer.play into the matching AdvancedMediaPlayer call."""

    def __init__(self, audio_type: str):
        audio_type = audio_type.lower()
        if audio_type == "vlc":
            self._advanced_player: AdvancedMediaPlayer = VlcPlayer()
        elif audio_type == "mp4":
            self._advanced_player = Mp4Player()
        else:
            raise UnsupportedMediaError(audio_type)
        self.audio_type = audio_type

    def play(self, audio_type: str, file_name: str) -> str:
        if audio_type.lower() == "vlc":
            return self._advanced_player.play_vlc(file_name)
        if audio_type.lower() == "mp4":
            return self._advanced_player.play_mp4(file_name)
        raise UnsupportedMediaError(audio_type)


class AudioPlayer(MediaPlayer):
    ADAPTED_TYPES = ("vlc", "mp4")

    def play(self, audio_type: str, file_name: str) -> str:
        kind = audio_type.lower()
        if kind == "mp3":
            return f"Playing mp3 file. Name: {file_name}"
        if kind in self.ADAPTED_TYPES:
            return MediaAdapter(kind).play(kind, file_name)
        return f"Invalid media. {audio_type} format not supported"


def demo():
    player = AudioPlayer()
    return [
        player.play("mp3", "beyond the horizon.mp3"),
        player.play("mp4", "alone.mp4"),
        player.play("vlc", "far far away.vlc"),
        player.play("avi", "mind me.avi"),
    ]
