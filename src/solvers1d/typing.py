from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

# typing only
ScalarFn: TypeAlias = Callable[[float], float]
Bracket: TypeAlias = tuple[float, float]
