"""
Initial migration for Skuman.

- Classification catalogs: ProductType, Category, Subcategory, Size, Color, Season
- History tracking for the catalogs
- SkuSequence: per-combination sequence counter
"""

import django.core.validators
import django.db.models.deletion
import simple_history.models
from django.conf import settings
from django.db import migrations, models

import skuman.validators


def _entry_fields():
    """Fields shared by every classification catalog."""
    return [
        (
            "name",
            models.CharField(
                max_length=100,
                validators=[django.core.validators.MinLengthValidator(3)],
                verbose_name="Name",
            ),
        ),
        ("description", models.TextField(blank=True, verbose_name="Description")),
        (
            "display_order",
            models.PositiveSmallIntegerField(default=1, verbose_name="Display order"),
        ),
        ("is_active", models.BooleanField(default=True, verbose_name="Active")),
    ]


def _timestamps(historical=False):
    if historical:
        return [
            (
                "created_at",
                models.DateTimeField(blank=True, editable=False, verbose_name="created at"),
            ),
            (
                "updated_at",
                models.DateTimeField(blank=True, editable=False, verbose_name="updated at"),
            ),
        ]
    return [
        ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
        ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
    ]


def _code(dimension, max_length, historical=False, unique=True):
    kwargs = {}
    if unique:
        # Historical tables keep many rows per code: index only.
        kwargs = {"db_index": True} if historical else {"unique": True}
    return (
        "code",
        models.CharField(
            max_length=max_length,
            validators=[skuman.validators.SegmentCodeValidator(dimension)],
            verbose_name="Code",
            **kwargs,
        ),
    )


def _id():
    return (
        "id",
        models.BigAutoField(
            auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
        ),
    )


def _history_fields():
    return [
        ("history_id", models.AutoField(primary_key=True, serialize=False)),
        ("history_date", models.DateTimeField(db_index=True)),
        ("history_change_reason", models.CharField(max_length=100, null=True)),
        (
            "history_type",
            models.CharField(
                choices=[("+", "Created"), ("~", "Changed"), ("-", "Deleted")],
                max_length=1,
            ),
        ),
        (
            "history_user",
            models.ForeignKey(
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name="+",
                to=settings.AUTH_USER_MODEL,
            ),
        ),
    ]


def _clone(fields):
    return [(name, field.clone()) for name, field in fields]


def _historical(name, verbose_name, verbose_name_plural, fields):
    return migrations.CreateModel(
        name=name,
        fields=[
            (
                "id",
                models.BigIntegerField(
                    auto_created=True, blank=True, db_index=True, verbose_name="ID"
                ),
            ),
            *fields,
            *_history_fields(),
        ],
        options={
            "verbose_name": f"historical {verbose_name}",
            "verbose_name_plural": f"historical {verbose_name_plural}",
            "ordering": ("-history_date", "-history_id"),
            "get_latest_by": ("history_date", "history_id"),
        },
        bases=(simple_history.models.HistoricalChanges, models.Model),
    )


# Per-model extra fields (same for live and historical tables)

PRODUCT_TYPE_FIELDS = [
    (
        "allows_composition",
        models.BooleanField(default=True, verbose_name="Allows composition"),
    ),
]

CATEGORY_FIELDS = [
    (
        "allows_subcategories",
        models.BooleanField(default=True, verbose_name="Allows subcategories"),
    ),
]

SUBCATEGORY_FIELDS = [
    (
        "available_for_new_products",
        models.BooleanField(default=True, verbose_name="Available for new products"),
    ),
    (
        "keywords",
        models.CharField(
            blank=True,
            help_text="Comma-separated search terms",
            max_length=255,
            verbose_name="Keywords",
        ),
    ),
]

SIZE_FIELDS = [
    ("age_group", models.CharField(blank=True, max_length=50, verbose_name="Age group")),
    (
        "min_age_months",
        models.PositiveSmallIntegerField(
            blank=True, null=True, verbose_name="Minimum age (months)"
        ),
    ),
    (
        "max_age_months",
        models.PositiveSmallIntegerField(
            blank=True, null=True, verbose_name="Maximum age (months)"
        ),
    ),
]

COLOR_FIELDS = [
    (
        "hex_code",
        models.CharField(
            blank=True,
            max_length=7,
            validators=[django.core.validators.RegexValidator("^#[0-9A-Fa-f]{6}$")],
            verbose_name="Hex code",
        ),
    ),
    (
        "color_family",
        models.CharField(blank=True, max_length=50, verbose_name="Color family"),
    ),
    (
        "color_type",
        models.CharField(
            choices=[
                ("solid", "Solid"),
                ("pattern", "Pattern"),
                ("multicolor", "Multicolor"),
                ("gradient", "Gradient"),
            ],
            default="solid",
            max_length=20,
            verbose_name="Color type",
        ),
    ),
]

SEASON_FIELDS = [
    (
        "season_type",
        models.CharField(
            choices=[
                ("regular", "Regular"),
                ("special", "Special"),
                ("year_round", "Year round"),
                ("event", "Event"),
            ],
            default="regular",
            max_length=20,
            verbose_name="Season type",
        ),
    ),
    (
        "start_month",
        models.PositiveSmallIntegerField(
            blank=True,
            null=True,
            validators=[
                django.core.validators.MinValueValidator(1),
                django.core.validators.MaxValueValidator(12),
            ],
            verbose_name="Start month",
        ),
    ),
    (
        "end_month",
        models.PositiveSmallIntegerField(
            blank=True,
            null=True,
            validators=[
                django.core.validators.MinValueValidator(1),
                django.core.validators.MaxValueValidator(12),
            ],
            verbose_name="End month",
        ),
    ),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        # ══════════════════════════════════════════════════════════════
        # CATALOGS
        # ══════════════════════════════════════════════════════════════
        migrations.CreateModel(
            name="ProductType",
            fields=[
                _id(),
                *_entry_fields(),
                *_timestamps(),
                _code("product_type", 1),
                *_clone(PRODUCT_TYPE_FIELDS),
            ],
            options={
                "verbose_name": "Product Type",
                "verbose_name_plural": "Product Types",
                "db_table": "skuman_product_type",
                "ordering": ["display_order", "code"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Category",
            fields=[
                _id(),
                *_entry_fields(),
                *_timestamps(),
                _code("category", 2),
                *_clone(CATEGORY_FIELDS),
            ],
            options={
                "verbose_name": "Category",
                "verbose_name_plural": "Categories",
                "db_table": "skuman_category",
                "ordering": ["display_order", "code"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Subcategory",
            fields=[
                _id(),
                *_entry_fields(),
                *_timestamps(),
                _code("subcategory", 1, unique=False),
                *_clone(SUBCATEGORY_FIELDS),
                (
                    "category",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="subcategories",
                        to="skuman.category",
                        verbose_name="Category",
                    ),
                ),
            ],
            options={
                "verbose_name": "Subcategory",
                "verbose_name_plural": "Subcategories",
                "db_table": "skuman_subcategory",
                "ordering": ["category__code", "display_order", "code"],
                "abstract": False,
            },
        ),
        migrations.AddConstraint(
            model_name="subcategory",
            constraint=models.UniqueConstraint(
                fields=("category", "code"),
                name="skuman_subcategory_unique_code_per_category",
            ),
        ),
        migrations.CreateModel(
            name="Size",
            fields=[
                _id(),
                *_entry_fields(),
                *_timestamps(),
                _code("size", 2),
                *_clone(SIZE_FIELDS),
            ],
            options={
                "verbose_name": "Size",
                "verbose_name_plural": "Sizes",
                "db_table": "skuman_size",
                "ordering": ["display_order", "code"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Color",
            fields=[
                _id(),
                *_entry_fields(),
                *_timestamps(),
                _code("color", 2),
                *_clone(COLOR_FIELDS),
            ],
            options={
                "verbose_name": "Color",
                "verbose_name_plural": "Colors",
                "db_table": "skuman_color",
                "ordering": ["display_order", "code"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="Season",
            fields=[
                _id(),
                *_entry_fields(),
                *_timestamps(),
                _code("season", 1),
                *_clone(SEASON_FIELDS),
            ],
            options={
                "verbose_name": "Season",
                "verbose_name_plural": "Seasons",
                "db_table": "skuman_season",
                "ordering": ["display_order", "code"],
                "abstract": False,
            },
        ),
        # ══════════════════════════════════════════════════════════════
        # HISTORICAL RECORDS
        # ══════════════════════════════════════════════════════════════
        _historical(
            "HistoricalProductType",
            "Product Type",
            "Product Types",
            [
                *_entry_fields(),
                *_timestamps(historical=True),
                _code("product_type", 1, historical=True),
                *_clone(PRODUCT_TYPE_FIELDS),
            ],
        ),
        _historical(
            "HistoricalCategory",
            "Category",
            "Categories",
            [
                *_entry_fields(),
                *_timestamps(historical=True),
                _code("category", 2, historical=True),
                *_clone(CATEGORY_FIELDS),
            ],
        ),
        _historical(
            "HistoricalSubcategory",
            "Subcategory",
            "Subcategories",
            [
                *_entry_fields(),
                *_timestamps(historical=True),
                _code("subcategory", 1, historical=True, unique=False),
                *_clone(SUBCATEGORY_FIELDS),
                (
                    "category",
                    models.ForeignKey(
                        blank=True,
                        db_constraint=False,
                        null=True,
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        related_name="+",
                        to="skuman.category",
                        verbose_name="Category",
                    ),
                ),
            ],
        ),
        _historical(
            "HistoricalSize",
            "Size",
            "Sizes",
            [
                *_entry_fields(),
                *_timestamps(historical=True),
                _code("size", 2, historical=True),
                *_clone(SIZE_FIELDS),
            ],
        ),
        _historical(
            "HistoricalColor",
            "Color",
            "Colors",
            [
                *_entry_fields(),
                *_timestamps(historical=True),
                _code("color", 2, historical=True),
                *_clone(COLOR_FIELDS),
            ],
        ),
        _historical(
            "HistoricalSeason",
            "Season",
            "Seasons",
            [
                *_entry_fields(),
                *_timestamps(historical=True),
                _code("season", 1, historical=True),
                *_clone(SEASON_FIELDS),
            ],
        ),
        # ══════════════════════════════════════════════════════════════
        # SEQUENCES
        # ══════════════════════════════════════════════════════════════
        migrations.CreateModel(
            name="SkuSequence",
            fields=[
                _id(),
                (
                    "key",
                    models.CharField(
                        max_length=20,
                        unique=True,
                        verbose_name="Combination key",
                    ),
                ),
                (
                    "last_value",
                    models.PositiveIntegerField(
                        default=0,
                        verbose_name="Last value",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(auto_now=True, verbose_name="updated at"),
                ),
            ],
            options={
                "verbose_name": "SKU Sequence",
                "verbose_name_plural": "SKU Sequences",
                "db_table": "skuman_sku_sequence",
                "ordering": ["key"],
            },
        ),
    ]
