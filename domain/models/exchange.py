from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType


@dataclass(frozen=True)
class Result:
    """Rates returned by a single fixer.io call, relative to `base`."""
    base: str
    date: date
    rates: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        # Copy so later changes to the caller's dict don't leak in
        object.__setattr__(self, 'rates', MappingProxyType(dict(self.rates)))

    def get_rate(self, code: str) -> float | None:
        return self.rates.get(code)
