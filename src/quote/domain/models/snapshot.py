"""Quote snapshot domain model"""

from dataclasses import dataclass, field


@dataclass
class Snapshot:
    """Market snapshot parsed from one chart response (domain model)

    ``timestamps`` is trailing-aligned with ``prices``: when shorter, it
    covers the most recent ``len(timestamps)`` prices.
    """

    symbol: str = ""
    name: str = ""
    currency: str = ""
    exchange_name: str = ""
    current_price: float = 0.0
    previous_close: float = 0.0
    day_high: float = 0.0
    day_low: float = 0.0
    fifty_two_week_high: float = 0.0
    fifty_two_week_low: float = 0.0
    volume: int = 0
    prices: list[float] = field(default_factory=list)
    timestamps: list[int] = field(default_factory=list)
    has_data: bool = False

    @property
    def change(self) -> float:
        """Absolute change against the previous close"""
        if not self.has_data or self.previous_close <= 0:
            return 0.0
        return self.current_price - self.previous_close

    @property
    def change_percent(self) -> float:
        """Percentage change against the previous close"""
        if not self.has_data or self.previous_close <= 0:
            return 0.0
        return self.change / self.previous_close * 100
