"""
Skuman Admin — catalog administration and a read-only view of sequence counters.

Catalog code fields validate through SegmentCodeValidator, the same format
check SKU generation uses.
"""

from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from skuman.models import (
    Category,
    Color,
    ProductType,
    Season,
    Size,
    SkuSequence,
    Subcategory,
)


class ClassificationAdmin(SimpleHistoryAdmin):
    """Common admin for classification catalogs."""

    list_display = ("code", "name", "display_order", "is_active")
    list_filter = ("is_active",)
    search_fields = ("code", "name")
    readonly_fields = ("created_at", "updated_at")


@admin.register(ProductType)
class ProductTypeAdmin(ClassificationAdmin):
    list_display = ClassificationAdmin.list_display + ("allows_composition",)


class SubcategoryInline(admin.TabularInline):
    """Inline for category subcategories."""

    model = Subcategory
    extra = 1
    fields = ("code", "name", "display_order", "available_for_new_products", "is_active")


@admin.register(Category)
class CategoryAdmin(ClassificationAdmin):
    list_display = ClassificationAdmin.list_display + ("allows_subcategories",)
    inlines = [SubcategoryInline]


@admin.register(Subcategory)
class SubcategoryAdmin(ClassificationAdmin):
    list_display = ("full_code", "name", "category", "available_for_new_products", "is_active")
    list_filter = ("is_active", "available_for_new_products", "category")
    list_select_related = ("category",)


@admin.register(Size)
class SizeAdmin(ClassificationAdmin):
    list_display = ClassificationAdmin.list_display + ("age_group",)


@admin.register(Color)
class ColorAdmin(ClassificationAdmin):
    list_display = ClassificationAdmin.list_display + ("color_type", "hex_code")
    list_filter = ("is_active", "color_type")


@admin.register(Season)
class SeasonAdmin(ClassificationAdmin):
    list_display = ClassificationAdmin.list_display + ("season_type",)
    list_filter = ("is_active", "season_type")


@admin.register(SkuSequence)
class SkuSequenceAdmin(admin.ModelAdmin):
    """Counters are mutated only through allocation and seeding."""

    list_display = ("key", "last_value", "updated_at")
    search_fields = ("key",)
    readonly_fields = ("key", "last_value", "updated_at")

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
