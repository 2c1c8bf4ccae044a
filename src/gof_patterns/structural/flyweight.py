"""Flyweight - share one Circle per color and vary only the extrinsic state."""

import random
from typing import Dict, List, Optional

from gof_patterns.infrastructure.logging import get_logger

logger = get_logger(__name__)


class Circle:
    """Intrinsic state is the color; x, y and radius are set per use."""

    def __init__(self, color: str):
        self.color = color
        self.x = 0
        self.y = 0
        self.radius = 0

    def draw(self) -> str:
        return f"Circle: Draw() [Color : {self.color}, x : {self.x}, y :{self.y}, radius :{self.radius}]"


class ShapeFactory:
    """
    Unbounded memoization table keyed by color.

    No eviction and no capacity bound: every distinct color seen stays cached
    for the lifetime of the factory.
    """

    def __init__(self):
        self._circles: Dict[str, Circle] = {}

    def get_circle(self, color: str) -> Circle:
        circle = self._circles.get(color)
        if circle is None:
            circle = Circle(color)
            self._circles[color] = circle
            logger.debug("Creating circle of color", color=color)
        return circle

    def cache_size(self) -> int:
        return len(self._circles)


COLORS = ("Red", "Green", "Blue", "White", "Black")


def demo(seed: Optional[int] = 7, draws: int = 20) -> List[str]:
    rng = random.Random(seed)
    factory = ShapeFactory()
    lines = []
    for _ in range(draws):
        circle = factory.get_circle(rng.choice(COLORS))
        circle.x = rng.randint(0, 100)
        circle.y = rng.randint(0, 100)
        circle.radius = 100
        lines.append(circle.draw())
    lines.append(f"Circles created: {factory.cache_size()} for {draws} draws")
    return lines
