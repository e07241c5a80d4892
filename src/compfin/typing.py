from __future__ import annotations

from collections.abc import Callable

import numpy as np
from numpy.typing import NDArray

# typing only
type FloatArray = NDArray[np.floating]
type ArrayLike = float | list[float] | np.ndarray | np.floating
type Payoff = Callable[[FloatArray], FloatArray]
