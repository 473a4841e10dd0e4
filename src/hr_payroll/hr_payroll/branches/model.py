from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_DRIVER_RATE, DEFAULT_OT_RATE, SPECIAL_ESI_BRANCHES


@dataclass(frozen=True)
class Branch:
    """Domain entity: a branch with its own overtime configuration."""

    branch_id: Optional[int]
    name: str
    ot_rate: Optional[float] = None
    driver_rate: Optional[float] = None

    @property
    def effective_ot_rate(self) -> float:
        return DEFAULT_OT_RATE if self.ot_rate is None else self.ot_rate

    @property
    def effective_driver_rate(self) -> float:
        return DEFAULT_DRIVER_RATE if self.driver_rate is None else self.driver_rate

    @property
    def is_special_esi(self) -> bool:
        return self.name in SPECIAL_ESI_BRANCHES

    def ot_rate_for(self, *, is_driver: bool) -> float:
        return self.effective_driver_rate if is_driver else self.effective_ot_rate


DEFAULT_BRANCH = Branch(branch_id=None, name="Default")
