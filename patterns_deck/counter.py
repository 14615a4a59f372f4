class Counter:
    """A press counter shown as ``Press me - <count>``. Starts at zero, never resets."""

    def __init__(self):
        self.count = 0

    def press(self) -> int:
        self.count += 1
        return self.count

    @property
    def label(self) -> str:
        return f"Press me - {self.count}"
