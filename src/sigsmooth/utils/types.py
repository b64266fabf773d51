"""Shared typing aliases for sigsmooth."""

from __future__ import annotations

from typing import Sequence, TypeAlias

import numpy as np
from numpy.typing import NDArray

Array: TypeAlias = NDArray[np.floating]

ArrayLike1D: TypeAlias = Sequence[float] | NDArray[np.floating]
ArrayLike2D: TypeAlias = Sequence[Sequence[float]] | NDArray[np.floating]
