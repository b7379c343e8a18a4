"""Import stock lines from a CSV file."""

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from assets.client.api import AssetApiClient
from assets.records import to_record
from assets.services import store
from assets.services.importer import import_text


class Command(BaseCommand):
    help = (
        "Import stock lines from a CSV file, one create per row. "
        "Rows go to the local database unless --url is given."
    )

    def add_arguments(self, parser):
        parser.add_argument("path", help="CSV file to import")
        parser.add_argument(
            "--url",
            help="Asset endpoint to submit to, e.g. "
            "https://tracker.example.com/api/assets/",
        )
        parser.add_argument(
            "--delay",
            type=float,
            default=None,
            help="Seconds to wait between rows "
            "(default: ASSETS_IMPORT_DELAY)",
        )

    def handle(self, *args, **options):
        try:
            with open(options["path"], encoding="utf-8-sig") as fh:
                text = fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise CommandError(f"Cannot read {options['path']}: {exc}")

        delay = options["delay"]
        if delay is None:
            delay = settings.ASSETS_IMPORT_DELAY

        if options["url"]:
            submit = AssetApiClient(options["url"]).create_asset
        else:

            def submit(row):
                return to_record(store.create_asset(row))

        result = import_text(text, submit, delay=delay)

        for line_number, reason in result.skipped:
            self.stdout.write(f"Skipped line {line_number}: {reason}")
        for failure in result.failed:
            self.stderr.write(f"Failed: {failure}")
        summary = (
            f"Imported {result.imported}, skipped {len(result.skipped)}, "
            f"failed {len(result.failed)}"
        )
        if result.failed:
            self.stdout.write(self.style.WARNING(summary))
        else:
            self.stdout.write(self.style.SUCCESS(summary))
