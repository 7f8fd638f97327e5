from math import hypot

def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp value into [minimum, maximum]."""
    return max(minimum, min(maximum, value))

def lerp(start: float, stop: float, amount: float) -> float:
    """Linear interpolation between start and stop."""
    return start + (stop - start) * amount

def dist(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return hypot(x2 - x1, y2 - y1)
