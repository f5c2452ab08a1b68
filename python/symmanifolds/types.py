"""Type definitions for symmanifolds."""

from typing import Union
import numpy as np
from numpy.typing import NDArray

# Basic types
Scalar = Union[float, np.floating]
Array = NDArray[np.inexact]
Point = Array
TangentVector = Array
Coordinates = NDArray[np.floating]
