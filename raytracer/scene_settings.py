import numpy as np

from raytracer.utils.vector_operations import BLACK
from raytracer.world import MAX_RECURSIONS


class SceneSettings:
    def __init__(self, background_color: np.ndarray = BLACK, max_recursions: float = MAX_RECURSIONS) -> None:
        self.background_color: np.ndarray = np.asarray(background_color, dtype=float)
        self.max_recursions: int = int(max_recursions)
