from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .direction import Direction


@dataclass(frozen=True)
class ChangeDirection:
    direction: Direction


@dataclass(frozen=True)
class Suicide:
    pass


# None means the player did nothing this frame.
Input = Optional[Union[ChangeDirection, Suicide]]
