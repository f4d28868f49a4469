import math
from dataclasses import dataclass


@dataclass(slots=True)
class Rectangle:
    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height


@dataclass(slots=True)
class Circle:
    radius: float

    def get_area(self) -> float:
        return math.pi * self.radius**2
