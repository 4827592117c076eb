"""Per-player aging curve."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class AgingCurve:
    """
    Parameters mapping a player's age to development and decline rates.

    A curve is derived once when a player is created and is replaced, never
    mutated, when it needs recalculating.
    """

    peak_age: int = 27
    decline_start_age: int = 30
    retirement_age: int = 38
    peak_multiplier: float = 1.2
    decline_rate: float = 0.02

    @classmethod
    def standard(cls) -> "AgingCurve":
        return cls()

    @classmethod
    def for_age(cls, age: int) -> "AgingCurve":
        """Generic curve for a player of the given age, ignoring role."""
        if age < 22:
            return cls(
                peak_age=28,
                decline_start_age=32,
                retirement_age=40,
                peak_multiplier=1.3,
                decline_rate=0.015,
            )
        if age > 30:
            return cls(
                peak_age=25,
                decline_start_age=28,
                retirement_age=35,
                peak_multiplier=1.1,
                decline_rate=0.03,
            )
        return cls.standard()

    def age_modifier(self, age: int) -> float:
        """
        Development-rate multiplier at a given age.

        Young players develop faster the further they are from peak; the
        modifier holds at the peak multiplier until decline starts, then
        falls linearly and bottoms out at 0.1 from retirement age on.
        """
        if age < self.peak_age:
            return max(1.0, min(2.0, 1.0 + (self.peak_age - age) * 0.05))
        if age < self.decline_start_age:
            return self.peak_multiplier
        if age < self.retirement_age:
            decline = (age - self.decline_start_age) * self.decline_rate
            return max(0.1, min(self.peak_multiplier, self.peak_multiplier - decline))
        return 0.1

    def degradation_rate(self, age: int) -> float:
        """Fraction of skill lost per season at a given age."""
        if age < self.decline_start_age:
            return 0.0
        if age < self.retirement_age:
            rate = (age - self.decline_start_age) * self.decline_rate * 0.5
            return max(0.0, min(0.1, rate))
        return 0.15

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "AgingCurve":
        defaults = cls()
        return cls(
            peak_age=int(data.get("peak_age", defaults.peak_age)),
            decline_start_age=int(data.get("decline_start_age", defaults.decline_start_age)),
            retirement_age=int(data.get("retirement_age", defaults.retirement_age)),
            peak_multiplier=float(data.get("peak_multiplier", defaults.peak_multiplier)),
            decline_rate=float(data.get("decline_rate", defaults.decline_rate)),
        )
