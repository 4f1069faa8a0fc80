"""Test helpers shared across the simulation tests."""


class ScriptedRandom:
    """
    Stand-in for random.Random that hands out a fixed sequence.
    Once the script runs out it returns `default`, or fails if none was given.
    """

    def __init__(self, values=(), default=None):
        self.values = list(values)
        self.default = default
        self.calls = 0

    def random(self):
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        if self.default is None:
            raise AssertionError("ScriptedRandom ran out of values")
        return self.default

    def choice(self, seq):
        return seq[0]
