"""Template Method - Game.play() fixes the order, subclasses fill in the steps."""

from abc import ABC, abstractmethod
from typing import List


class Game(ABC):
    @abstractmethod
    def initialize(self) -> str:
        pass

    @abstractmethod
    def start_play(self) -> str:
        pass

    @abstractmethod
    def end_play(self) -> str:
        pass

    def play(self) -> List[str]:
        """Template method: initialize, play, end. Not meant to be overridden."""
        return [self.initialize(), self.start_play(), self.end_play()]


class Cricket(Game):
    def initialize(self) -> str:
        return "Cricket Game Initialized! Start playing."

    def start_play(self) -> str:
        return "Cricket Game Started. Enjoy the game!"

    def end_play(self) -> str:
        return "Cricket Game Finished!"


class Football(Game):
    def initialize(self) -> str:
        return "Football Game Initialized! Start playing."

    def start_play(self) -> str:
        return "Football Game Started. Enjoy the game!"

    def end_play(self) -> str:
        return "Football Game Finished!"


def demo():
    return Cricket().play() + Football().play()
