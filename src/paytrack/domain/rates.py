"""Pay rates and the manager that keeps the single live instance."""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from paytrack.domain.entries import coerce_number

if TYPE_CHECKING:
    from paytrack.infra.kv.payroll_storage import PayrollStorage

DEFAULT_HOURLY_RATE = 100.0
DEFAULT_OT_RATE = 150.0


def coerce_rate(value: Any) -> float:
    return max(coerce_number(value), 0.0)


def _persisted_rate(value: Any, fallback: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return fallback
    return coerce_rate(value)


@dataclass(frozen=True, slots=True)
class RateSettings:
    hourly_rate: float = DEFAULT_HOURLY_RATE
    ot_rate: float = DEFAULT_OT_RATE

    @classmethod
    def from_record(cls, record: dict[str, Any], defaults: "RateSettings | None" = None) -> "RateSettings":
        """Read the persisted ``{hourlyRate, otRate}`` shape.

        A key that is missing or not a JSON number takes its default.
        """
        defaults = defaults or cls()
        return cls(
            hourly_rate=_persisted_rate(record.get("hourlyRate"), defaults.hourly_rate),
            ot_rate=_persisted_rate(record.get("otRate"), defaults.ot_rate),
        )

    def to_record(self) -> dict[str, float]:
        return {"hourlyRate": self.hourly_rate, "otRate": self.ot_rate}


class RateSettingsManager:
    """Owns the live RateSettings and mirrors every change to storage.

    Pay figures are never snapshotted: whoever derives a view reads
    ``current`` at that moment, so a rate change re-prices past days too.
    """

    def __init__(self, storage: "PayrollStorage", defaults: RateSettings | None = None) -> None:
        self._storage = storage
        self._defaults = defaults or RateSettings()
        self._current = self._defaults

    @property
    def current(self) -> RateSettings:
        return self._current

    def load(self) -> RateSettings:
        self._current = self._storage.load_settings(self._defaults)
        return self._current

    def update(self, hourly_rate: Any, ot_rate: Any) -> RateSettings:
        """Replace both rates and persist; callers re-derive every view afterwards."""
        self._current = RateSettings(
            hourly_rate=coerce_rate(hourly_rate),
            ot_rate=coerce_rate(ot_rate),
        )
        self._storage.save_settings(self._current)
        return self._current
