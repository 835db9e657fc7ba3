"""
Classification catalog models.

Six independent catalogs, one per SKU segment:
ProductType, Category, Subcategory (scoped to a Category), Size, Color, Season.

Display metadata (color type, season type, age ranges...) lives here only;
SKU generation sees plain codes and active flags through
skuman.adapters.catalog.ModelCatalogBackend.
"""

from django.core.exceptions import ValidationError
from django.core.validators import (
    MaxValueValidator,
    MinLengthValidator,
    MinValueValidator,
    RegexValidator,
)
from django.db import models
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords

from skuman.protocols.catalog import CatalogEntry
from skuman.validators import SegmentCodeValidator


class ClassificationEntry(models.Model):
    """
    Fields shared by every classification catalog.

    Subclasses set DIMENSION and declare their own `code` field.
    """

    DIMENSION = ""

    name = models.CharField(
        max_length=100,
        validators=[MinLengthValidator(3)],
        verbose_name=_("Name"),
    )
    description = models.TextField(
        blank=True,
        verbose_name=_("Description"),
    )
    display_order = models.PositiveSmallIntegerField(
        default=1,
        verbose_name=_("Display order"),
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name=_("Active"),
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    # History
    history = HistoricalRecords(inherit=True)

    class Meta:
        abstract = True
        ordering = ["display_order", "code"]

    def __str__(self) -> str:
        return f"{self.code} - {self.name}"

    def as_entry(self) -> CatalogEntry:
        return CatalogEntry(
            dimension=self.DIMENSION, code=self.code, is_active=self.is_active
        )


class ProductType(ClassificationEntry):
    """
    Product type (SKU digit 1).

    Examples: 1 Simple, 2 Composite, 3 Set, 4 Promotional, 5 Seasonal.
    """

    DIMENSION = "product_type"

    code = models.CharField(
        max_length=1,
        unique=True,
        validators=[SegmentCodeValidator("product_type")],
        verbose_name=_("Code"),
    )
    allows_composition = models.BooleanField(
        default=True,
        verbose_name=_("Allows composition"),
    )

    class Meta(ClassificationEntry.Meta):
        db_table = "skuman_product_type"
        verbose_name = _("Product Type")
        verbose_name_plural = _("Product Types")


class Category(ClassificationEntry):
    """Category (SKU digits 2-3). Owns its subcategories."""

    DIMENSION = "category"

    code = models.CharField(
        max_length=2,
        unique=True,
        validators=[SegmentCodeValidator("category")],
        verbose_name=_("Code"),
    )
    allows_subcategories = models.BooleanField(
        default=True,
        verbose_name=_("Allows subcategories"),
    )

    class Meta(ClassificationEntry.Meta):
        db_table = "skuman_category"
        verbose_name = _("Category")
        verbose_name_plural = _("Categories")


class Subcategory(ClassificationEntry):
    """
    Subcategory (SKU digit 4).

    Codes are unique within the owning category only: "1" under category
    10 and "1" under category 20 are different subcategories.
    """

    DIMENSION = "subcategory"

    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        related_name="subcategories",
        verbose_name=_("Category"),
    )
    code = models.CharField(
        max_length=1,
        validators=[SegmentCodeValidator("subcategory")],
        verbose_name=_("Code"),
    )
    available_for_new_products = models.BooleanField(
        default=True,
        verbose_name=_("Available for new products"),
    )
    keywords = models.CharField(
        max_length=255,
        blank=True,
        verbose_name=_("Keywords"),
        help_text=_("Comma-separated search terms"),
    )

    class Meta(ClassificationEntry.Meta):
        db_table = "skuman_subcategory"
        verbose_name = _("Subcategory")
        verbose_name_plural = _("Subcategories")
        ordering = ["category__code", "display_order", "code"]
        constraints = [
            models.UniqueConstraint(
                fields=["category", "code"],
                name="skuman_subcategory_unique_code_per_category",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.full_code} - {self.name}"

    @property
    def full_code(self) -> str:
        """Category code + subcategory code, e.g. '101'."""
        return f"{self.category.code}{self.code}"

    @property
    def is_usable(self) -> bool:
        """Active, open for new products, and owned by an active category."""
        return (
            self.is_active
            and self.available_for_new_products
            and self.category.is_active
        )

    def clean(self):
        super().clean()
        if self.category_id and not self.category.allows_subcategories:
            raise ValidationError(
                {"category": _("This category does not allow subcategories.")}
            )


class Size(ClassificationEntry):
    """
    Size (SKU digits 5-6).

    "00" is one-size; 01-13 cover newborn through 15 years.
    """

    DIMENSION = "size"

    code = models.CharField(
        max_length=2,
        unique=True,
        validators=[SegmentCodeValidator("size")],
        verbose_name=_("Code"),
    )
    age_group = models.CharField(
        max_length=50,
        blank=True,
        verbose_name=_("Age group"),
    )
    min_age_months = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        verbose_name=_("Minimum age (months)"),
    )
    max_age_months = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        verbose_name=_("Maximum age (months)"),
    )

    class Meta(ClassificationEntry.Meta):
        db_table = "skuman_size"
        verbose_name = _("Size")
        verbose_name_plural = _("Sizes")

    @property
    def is_one_size(self) -> bool:
        return self.code == "00"

    def fits_age(self, age_months: int) -> bool:
        if self.min_age_months is not None and age_months < self.min_age_months:
            return False
        if self.max_age_months is not None and age_months > self.max_age_months:
            return False
        return True

    def clean(self):
        super().clean()
        if (
            self.min_age_months is not None
            and self.max_age_months is not None
            and self.min_age_months > self.max_age_months
        ):
            raise ValidationError(
                {"max_age_months": _("Maximum age must not be lower than minimum age.")}
            )


class ColorType(models.TextChoices):
    """How a color entry is printed."""

    SOLID = "solid", _("Solid")
    PATTERN = "pattern", _("Pattern")
    MULTICOLOR = "multicolor", _("Multicolor")
    GRADIENT = "gradient", _("Gradient")


class Color(ClassificationEntry):
    """
    Color (SKU digits 7-8).

    11-15 are reserved for multicolor and printed patterns.
    """

    DIMENSION = "color"

    code = models.CharField(
        max_length=2,
        unique=True,
        validators=[SegmentCodeValidator("color")],
        verbose_name=_("Code"),
    )
    hex_code = models.CharField(
        max_length=7,
        blank=True,
        validators=[RegexValidator(r"^#[0-9A-Fa-f]{6}$")],
        verbose_name=_("Hex code"),
    )
    color_family = models.CharField(
        max_length=50,
        blank=True,
        verbose_name=_("Color family"),
    )
    color_type = models.CharField(
        max_length=20,
        choices=ColorType.choices,
        default=ColorType.SOLID,
        verbose_name=_("Color type"),
    )

    class Meta(ClassificationEntry.Meta):
        db_table = "skuman_color"
        verbose_name = _("Color")
        verbose_name_plural = _("Colors")

    @property
    def is_pattern(self) -> bool:
        return "11" <= self.code <= "15"


class SeasonType(models.TextChoices):
    """Season kind."""

    REGULAR = "regular", _("Regular")
    SPECIAL = "special", _("Special")
    YEAR_ROUND = "year_round", _("Year round")
    EVENT = "event", _("Event")


class Season(ClassificationEntry):
    """
    Season (SKU digit 9).

    Month ranges may wrap the year end (e.g. autumn-winter: 9 → 2).
    """

    DIMENSION = "season"

    code = models.CharField(
        max_length=1,
        unique=True,
        validators=[SegmentCodeValidator("season")],
        verbose_name=_("Code"),
    )
    season_type = models.CharField(
        max_length=20,
        choices=SeasonType.choices,
        default=SeasonType.REGULAR,
        verbose_name=_("Season type"),
    )
    start_month = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(12)],
        verbose_name=_("Start month"),
    )
    end_month = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(12)],
        verbose_name=_("End month"),
    )

    class Meta(ClassificationEntry.Meta):
        db_table = "skuman_season"
        verbose_name = _("Season")
        verbose_name_plural = _("Seasons")

    def covers_month(self, month: int) -> bool:
        if self.season_type == SeasonType.YEAR_ROUND:
            return True
        if self.start_month is None or self.end_month is None:
            return False
        if self.start_month <= self.end_month:
            return self.start_month <= month <= self.end_month
        return month >= self.start_month or month <= self.end_month


CATALOG_MODELS = {
    model.DIMENSION: model
    for model in (ProductType, Category, Subcategory, Size, Color, Season)
}
