"""Customer statistics aggregation (read-only)."""

import logging
from datetime import date, datetime, time, timedelta
from typing import Callable

from django.conf import settings
from django.utils import timezone

from celidone.models import PersonType
from celidone.protocols import NO_CITY, CustomerRepository, StatsSnapshot

logger = logging.getLogger(__name__)


class StatisticsAggregator:
    """
    Computes a StatsSnapshot from repository queries.

    "Today" is the current date in the active Django time zone.
    """

    def __init__(self, repository: CustomerRepository, clock: Callable = timezone.now):
        self.repository = repository
        self.clock = clock

    def compute_snapshot(self) -> StatsSnapshot:
        logger.info("Computing customer statistics")

        today = self._today()
        start_of_today, end_of_today = self._start(today), self._end(today)
        first_of_month = self._start(today.replace(day=1))
        week_start = self._start(today - timedelta(days=7))

        total = self.repository.count()

        top_city = self.repository.top_city_by_count()
        if top_city:
            top_city_count = self.repository.count_by_city(top_city)
        else:
            top_city, top_city_count = NO_CITY, 0

        return StatsSnapshot(
            total=total,
            today=self.repository.count_by_registered_at_between(
                start_of_today, end_of_today
            ),
            this_month=self.repository.count_by_registered_at_between(
                first_of_month, end_of_today
            ),
            last_7_days=self.repository.count_by_registered_at_between(
                week_start, end_of_today
            ),
            individuals=self.repository.count_by_person_type(PersonType.INDIVIDUAL),
            organizations=self.repository.count_by_person_type(
                PersonType.ORGANIZATION
            ),
            top_city=top_city,
            top_city_count=top_city_count,
            active=total,
            inactive=0,
            mean_age=0.0,
        )

    def _today(self) -> date:
        now = self.clock()
        if timezone.is_aware(now):
            return timezone.localtime(now).date()
        return now.date()

    def _start(self, day: date) -> datetime:
        return self._aware(datetime.combine(day, time.min))

    def _end(self, day: date) -> datetime:
        return self._aware(datetime.combine(day, time.max))

    @staticmethod
    def _aware(value: datetime) -> datetime:
        if settings.USE_TZ:
            return timezone.make_aware(value)
        return value
