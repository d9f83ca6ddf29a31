"""Statistics value objects."""

from dataclasses import asdict, dataclass

NO_CITY = "N/A"


@dataclass(frozen=True)
class StatsSnapshot:
    """Point-in-time population summary. Computed on demand, never stored."""

    total: int
    today: int
    this_month: int
    last_7_days: int
    individuals: int
    organizations: int
    top_city: str = NO_CITY
    top_city_count: int = 0
    # No activity tracking exists yet: every customer counts as active
    active: int = 0
    inactive: int = 0
    # Not computed from birth_date yet
    mean_age: float = 0.0

    def as_dict(self) -> dict:
        return asdict(self)
