"""Proxy - load an image from disk only when it is first displayed."""

from abc import ABC, abstractmethod
from typing import List, Optional

from gof_patterns.infrastructure.logging import get_logger

logger = get_logger(__name__)


class Image(ABC):
    @abstractmethod
    def display(self) -> str:
        pass


class RealImage(Image):
    """Loads its file on construction; ``load_log`` records each load."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        self.load_log: List[str] = []
        self._load_from_disk()

    def _load_from_disk(self) -> None:
        self.load_log.append(f"Loading {self.file_name}")
        logger.debug("Loading image from disk", file_name=self.file_name)

    def display(self) -> str:
        return f"Displaying {self.file_name}"


class ProxyImage(Image):
    def __init__(self, file_name: str):
        self.file_name = file_name
        self._real_image: Optional[RealImage] = None

    @property
    def is_loaded(self) -> bool:
        return self._real_image is not None

    @property
    def load_log(self) -> List[str]:
        return self._real_image.load_log if self._real_image else []

    def display(self) -> str:
        if self._real_image is None:
            self._real_image = RealImage(self.file_name)
        return self._real_image.display()


def demo():
    image = ProxyImage("test_10mb.jpg")
    lines = [f"Loaded before display: {image.is_loaded}"]
    first = image.display()
    lines.extend(image.load_log)
    lines.append(first)
    lines.append(image.display())
    lines.append(f"Disk loads: {len(image.load_log)}")
    return lines
