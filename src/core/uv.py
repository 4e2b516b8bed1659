# core/uv.py
class UV:
    """
    Represents a 2D texture coordinate.
    """
    __slots__ = ("u", "v")

    def __init__(self, u: float, v: float):
        self.u = u
        self.v = v

    def clamp(self) -> "UV":
        """
        Clips both coordinates to [0,1]. Points exactly on a seam or face edge can
        drift slightly outside the unit square after floating-point arithmetic.
        """
        return UV(min(max(self.u, 0.0), 1.0), min(max(self.v, 0.0), 1.0))

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"
