"""Type aliases for pyiita."""

from typing import TypeAlias
import numpy as np
from numpy.typing import NDArray

# Matrix types
FloatArray: TypeAlias = NDArray[np.float64]
BoolArray: TypeAlias = NDArray[np.bool_]
CodeArray: TypeAlias = NDArray[np.int8]

# m x m prerequisite relation, entry (i, j) = 1 means i is a prerequisite of j
QuasiOrder: TypeAlias = NDArray[np.int8]
