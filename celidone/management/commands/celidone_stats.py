"""Management command to print customer statistics."""

import json

from django.core.management.base import BaseCommand

from celidone.services import build_aggregator


class Command(BaseCommand):
    help = "Print a snapshot of customer statistics"

    def add_arguments(self, parser):
        parser.add_argument(
            "--json",
            action="store_true",
            default=False,
            help="Output the snapshot as JSON",
        )

    def handle(self, *args, **options):
        snapshot = build_aggregator().compute_snapshot()

        if options["json"]:
            self.stdout.write(json.dumps(snapshot.as_dict()))
            return

        self.stdout.write(f"Total: {snapshot.total}")
        self.stdout.write(f"Today: {snapshot.today}")
        self.stdout.write(f"This month: {snapshot.this_month}")
        self.stdout.write(f"Last 7 days: {snapshot.last_7_days}")
        self.stdout.write(f"Individuals: {snapshot.individuals}")
        self.stdout.write(f"Organizations: {snapshot.organizations}")
        self.stdout.write(
            self.style.SUCCESS(
                f"Top city: {snapshot.top_city} ({snapshot.top_city_count})"
            )
        )
