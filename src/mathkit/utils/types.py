"""Shared typing aliases for MathKit."""

from __future__ import annotations

from typing import Any, Sequence, TypeAlias

import numpy as np
from numpy.typing import NDArray

Scalar: TypeAlias = Any
Coefficients: TypeAlias = Sequence[Any]
Polynomial: TypeAlias = list

Array: TypeAlias = NDArray[np.floating]
IntArray: TypeAlias = NDArray[np.integer]
