"""
Load the default children's clothing catalog.

Creates the six classification catalogs:
- 5 product types
- 9 categories, with their subcategories
- 14 sizes (one-size, newborn → 15 years)
- 20 colors (11-15 are multicolor/patterns)
- 9 seasons

Existing codes are updated in place, so the command is safe to re-run.

Usage:
    python manage.py load_skuman_catalog
    python manage.py load_skuman_catalog --clear
"""

from django.core.management.base import BaseCommand
from django.db import transaction


PRODUCT_TYPES = [
    ("1", "Simple Product", "Single basic items without composition"),
    ("2", "Composite Product", "Items made of several components or materials"),
    ("3", "Set", "Products sold together as one unit"),
    ("4", "Promotional Product", "Special items for promotions and offers"),
    ("5", "Seasonal Product", "Items for specific seasons or events"),
]

CATEGORIES = [
    ("10", "Tops", "Upper body garments"),
    ("20", "Bottoms", "Lower body garments"),
    ("30", "Dresses and Rompers", "One-piece garments"),
    ("40", "Underwear and Pajamas", "Underwear and sleepwear"),
    ("50", "Footwear", "Shoes, sandals and footwear in general"),
    ("60", "Hair Accessories", "Headbands, bows, clips and hair accessories"),
    ("70", "Bags and Backpacks", "Bags, backpacks and purses"),
    ("80", "Kids Jewelry", "Child-safe necklaces, bracelets and earrings"),
    ("90", "Occasion Wear", "Party dresses, formal suits and costumes"),
]

SUBCATEGORIES = {
    "10": [
        ("1", "Basic T-shirts"),
        ("2", "Blouses"),
        ("3", "Sweaters"),
        ("4", "Light Jackets"),
        ("5", "Coats"),
        ("6", "Sports Tops"),
    ],
    "20": [
        ("1", "Trousers"),
        ("2", "Jeans"),
        ("3", "Shorts"),
        ("4", "Skirts"),
        ("5", "Leggings"),
    ],
    "30": [
        ("1", "Casual Dresses"),
        ("2", "Party Dresses"),
        ("3", "Rompers"),
        ("4", "Overalls"),
    ],
}
DEFAULT_SUBCATEGORY = ("1", "General")

# code, name, age group, min months, max months
SIZES = [
    ("00", "One Size", "Universal", None, None),
    ("01", "Newborn (0-3 months)", "Baby", 0, 3),
    ("02", "3-6 months", "Baby", 3, 6),
    ("03", "6-9 months", "Baby", 6, 9),
    ("04", "9-12 months", "Baby", 9, 12),
    ("05", "12-18 months", "Toddler", 12, 18),
    ("06", "18-24 months", "Toddler", 18, 24),
    ("07", "2-3 years", "Toddler", 24, 36),
    ("08", "4-5 years", "Kid", 48, 60),
    ("09", "6-7 years", "Kid", 72, 84),
    ("10", "8-9 years", "Big Kid", 96, 108),
    ("11", "10-11 years", "Big Kid", 120, 132),
    ("12", "12-13 years", "Teen", 144, 156),
    ("13", "14-15 years", "Teen", 168, 180),
]

# code, name, hex, family, type
COLORS = [
    ("01", "White", "#FFFFFF", "Neutrals", "solid"),
    ("02", "Black", "#000000", "Neutrals", "solid"),
    ("03", "Grey", "#808080", "Neutrals", "solid"),
    ("04", "Red", "#FF0000", "Reds", "solid"),
    ("05", "Blue", "#0000FF", "Blues", "solid"),
    ("06", "Green", "#00FF00", "Greens", "solid"),
    ("07", "Yellow", "#FFFF00", "Yellows", "solid"),
    ("08", "Pink", "#FFC0CB", "Pinks", "solid"),
    ("09", "Purple", "#800080", "Purples", "solid"),
    ("10", "Orange", "#FFA500", "Oranges", "solid"),
    ("11", "Multicolor", "", "", "multicolor"),
    ("12", "Stripes", "", "", "pattern"),
    ("13", "Polka Dots", "", "", "pattern"),
    ("14", "Floral", "", "", "pattern"),
    ("15", "Animals", "", "", "pattern"),
    ("16", "Beige", "#F5F5DC", "Neutrals", "solid"),
    ("17", "Navy", "#000080", "Blues", "solid"),
    ("18", "Turquoise", "#40E0D0", "Blues", "solid"),
    ("19", "Coral", "#FF7F50", "Oranges", "solid"),
    ("20", "Lavender", "#E6E6FA", "Purples", "solid"),
]

# code, name, type, start month, end month
SEASONS = [
    ("1", "Spring-Summer", "regular", 3, 8),
    ("2", "Autumn-Winter", "regular", 9, 2),
    ("3", "Christmas", "regular", 11, 12),
    ("4", "All Year", "year_round", None, None),
    ("5", "Back to School", "regular", 1, 2),
    ("6", "High Summer", "special", None, None),
    ("7", "Easter", "regular", 3, 4),
    ("8", "Halloween", "event", None, None),
    ("9", "Valentine's Day", "event", None, None),
]


class Command(BaseCommand):
    help = "Loads the default children's clothing classification catalog"

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete existing catalog entries before loading",
        )

    def handle(self, *args, **options):
        from skuman.models import (
            Category,
            Color,
            ProductType,
            Season,
            Size,
            Subcategory,
        )

        self.stdout.write("=" * 60)
        self.stdout.write("Loading skuman default catalog...")
        self.stdout.write("=" * 60)

        with transaction.atomic():
            if options["clear"]:
                self.stdout.write("\nClearing existing catalog...")
                Subcategory.objects.all().delete()
                for model in (ProductType, Category, Size, Color, Season):
                    model.objects.all().delete()
                self.stdout.write(self.style.SUCCESS("   ✓ Catalog cleared"))

            self._load(
                ProductType,
                [
                    (code, {"name": name, "description": desc})
                    for code, name, desc in PRODUCT_TYPES
                ],
            )
            categories = self._load(
                Category,
                [
                    (code, {"name": name, "description": desc})
                    for code, name, desc in CATEGORIES
                ],
            )
            self._load_subcategories(Subcategory, categories)
            self._load(
                Size,
                [
                    (
                        code,
                        {
                            "name": name,
                            "age_group": group,
                            "min_age_months": min_months,
                            "max_age_months": max_months,
                        },
                    )
                    for code, name, group, min_months, max_months in SIZES
                ],
            )
            self._load(
                Color,
                [
                    (
                        code,
                        {
                            "name": name,
                            "hex_code": hex_code,
                            "color_family": family,
                            "color_type": color_type,
                        },
                    )
                    for code, name, hex_code, family, color_type in COLORS
                ],
            )
            self._load(
                Season,
                [
                    (
                        code,
                        {
                            "name": name,
                            "season_type": season_type,
                            "start_month": start,
                            "end_month": end,
                        },
                    )
                    for code, name, season_type, start, end in SEASONS
                ],
            )

        self.stdout.write(self.style.SUCCESS("\n✓ Catalog loaded"))

    def _load(self, model, rows):
        """update_or_create each (code, fields) row; returns {code: instance}."""
        loaded = {}
        for order, (code, fields) in enumerate(rows, start=1):
            obj, _ = model.objects.update_or_create(
                code=code, defaults={**fields, "display_order": order}
            )
            loaded[code] = obj
        self.stdout.write(f"   ✓ {model._meta.verbose_name_plural}: {len(loaded)}")
        return loaded

    def _load_subcategories(self, model, categories):
        count = 0
        for category_code, category in categories.items():
            rows = SUBCATEGORIES.get(category_code, [DEFAULT_SUBCATEGORY])
            for order, (code, name) in enumerate(rows, start=1):
                model.objects.update_or_create(
                    category=category,
                    code=code,
                    defaults={"name": name, "display_order": order},
                )
                count += 1
        self.stdout.write(f"   ✓ {model._meta.verbose_name_plural}: {count}")
