"""
Seed sequence counters from existing SKU codes.

Run after importing products whose codes were issued elsewhere, so the
generator never hands out a code that already exists. Counters are only
ever raised.

Usage:
    python manage.py seed_sku_sequences codes.txt
    cat codes.txt | python manage.py seed_sku_sequences -
    python manage.py seed_sku_sequences codes.txt --dry-run

One code per line; blank lines and lines starting with '#' are ignored.
"""

import sys

from django.core.management.base import BaseCommand, CommandError

from skuman.exceptions import SkuError


class Command(BaseCommand):
    help = "Seeds SKU sequence counters from a list of existing codes"

    def add_arguments(self, parser):
        parser.add_argument(
            "source",
            help="File with one SKU per line, or '-' for stdin",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Report what would be seeded without touching the counters",
        )

    def handle(self, *args, **options):
        from skuman.service import sku

        codes = []
        skipped = 0
        for lineno, line in enumerate(self._read_lines(options["source"]), start=1):
            code = line.strip()
            if not code or code.startswith("#"):
                continue
            try:
                sku.decode(code)
            except SkuError as e:
                skipped += 1
                self.stderr.write(f"line {lineno}: skipped {code!r} ({e.code})")
                continue
            codes.append(code)

        if options["dry_run"]:
            combinations = {sku.decode(code).key for code in codes}
            self.stdout.write(
                f"Dry run: {len(codes)} code(s) across {len(combinations)} "
                f"combination(s), {skipped} skipped"
            )
            return

        seeded = sku.seed_from_codes(codes)
        for key, value in sorted(seeded.items()):
            self.stdout.write(f"   {key} → {value}")
        self.stdout.write(
            self.style.SUCCESS(
                f"✓ Seeded {len(seeded)} combination(s) from {len(codes)} code(s), "
                f"{skipped} skipped"
            )
        )

    def _read_lines(self, source):
        if source == "-":
            return sys.stdin.read().splitlines()
        try:
            with open(source, encoding="utf-8") as f:
                return f.read().splitlines()
        except OSError as e:
            raise CommandError(f"Cannot read {source}: {e}") from e
