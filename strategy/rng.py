import numpy as np

class DRNG:
    """Deterministic random stream, seeded once from the game's random seed."""

    def __init__(self, seed: int):
        self.g = np.random.Generator(np.random.PCG64(seed))

    def next_bool(self) -> bool:
        """Return True or False with equal probability."""
        return bool(self.g.random() < 0.5)
