from __future__ import annotations

from typing import Optional

HIGH_FREQUENCY_PIPS = 5


def pip_count(token_number: Optional[int]) -> int:
    if token_number is None:
        return 0
    return 6 - abs(7 - int(token_number))


def is_high_frequency(token_number: Optional[int]) -> bool:
    return pip_count(token_number) == HIGH_FREQUENCY_PIPS
