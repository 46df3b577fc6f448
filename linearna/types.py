"""Define type aliases purely for documentation purposes."""
import numpy as np
from typing import Sequence

# Sequences of a certain length.
Sequence3 = Sequence

# Numpy arrays of a certain shape. float implied.
Vector1D = np.ndarray # (n,)
Vector3 = np.ndarray # (3,)
