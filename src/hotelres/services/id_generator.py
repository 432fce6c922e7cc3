from __future__ import annotations

import time
from typing import Callable, Optional


def _now_millis() -> int:
    return int(time.time() * 1000)


class IdGenerator:
    """
    Önek + milisaniye zaman damgası şeklinde kimlik üretir ("RES1733011200000").
    Aynı milisaniyede ikinci çağrı yapılırsa değer bir artırılır; böylece
    üretilen kimlikler süreç içinde daima artan ve benzersizdir.
    """

    def __init__(self, prefix: str, clock: Optional[Callable[[], int]] = None):
        self.prefix = prefix
        self._clock = clock or _now_millis
        self._last = 0

    def next_id(self) -> str:
        value = max(self._clock(), self._last + 1)
        self._last = value
        return f"{self.prefix}{value}"
