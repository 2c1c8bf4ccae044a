"""Iterator - walk a container without exposing its storage."""

from abc import ABC, abstractmethod
from typing import Iterable, List


class Iterator(ABC):
    @abstractmethod
    def has_next(self) -> bool:
        pass

    @abstractmethod
    def next(self):
        pass


class Container(ABC):
    @abstractmethod
    def get_iterator(self) -> Iterator:
        pass


class NameIterator(Iterator):
    """Explicit has_next()/next() cursor that also speaks the Python iterator protocol."""

    def __init__(self, names: List[str]):
        self._names = names
        self._index = 0

    def has_next(self) -> bool:
        return self._index < len(self._names)

    def next(self) -> str:
        if not self.has_next():
            raise StopIteration
        name = self._names[self._index]
        self._index += 1
        return name

    def __iter__(self) -> 'NameIterator':
        return self

    def __next__(self) -> str:
        return self.next()


class NameRepository(Container):
    def __init__(self, names: Iterable[str] = ("Robert", "John", "Julie", "Lora")):
        self._names = list(names)

    def get_iterator(self) -> NameIterator:
        return NameIterator(self._names)

    def __iter__(self) -> NameIterator:
        return self.get_iterator()


def demo():
    iterator = NameRepository().get_iterator()
    lines = []
    while iterator.has_next():
        lines.append(f"Name : {iterator.next()}")
    return lines
