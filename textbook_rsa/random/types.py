"""Type definitions for the random source."""

from typing import NewType
from gmpy2 import random_state as _random_state

RandomState = NewType("RandomState", _random_state)
