import numpy as np


def grid_from_rows(rows):
    """Build a board from strings: ``b`` black, ``w`` white, ``.`` empty."""
    values = {"b": 1, "w": -1, ".": 0}
    return np.array([[values[ch] for ch in row] for row in rows], dtype=np.int8)


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds
