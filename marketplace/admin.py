from django.contrib import admin

from .models import Category, Product, ProductCategory, ProductTag, ProductVariant, Store, Tag


class ProductVariantInline(admin.TabularInline):
    model = ProductVariant
    extra = 0
    fields = ('sku', 'name', 'color', 'size', 'price', 'quantity')
    readonly_fields = ('sku',)


class ProductCategoryInline(admin.TabularInline):
    model = ProductCategory
    extra = 0


class ProductTagInline(admin.TabularInline):
    model = ProductTag
    extra = 0


@admin.register(Store)
class StoreAdmin(admin.ModelAdmin):
    list_display = ('store_name', 'seller', 'is_active', 'product_count', 'created_at')
    list_filter = ('is_active', 'created_at')
    search_fields = ('store_name', 'slug', 'seller__business_name')
    readonly_fields = ('id', 'slug', 'created_at', 'updated_at')

    fieldsets = (
        (None, {
            'fields': ('id', 'seller', 'store_name', 'slug', 'store_description')
        }),
        ('Branding', {
            'fields': ('logo_image', 'cover_image'),
            'classes': ('collapse',)
        }),
        ('Status', {
            'fields': ('is_active',)
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        })
    )

    actions = ['activate_stores', 'deactivate_stores']

    def product_count(self, obj):
        return obj.products.count()
    product_count.short_description = "Products"

    def activate_stores(self, request, queryset):
        count = queryset.update(is_active=True)
        self.message_user(request, f"{count} stores activated.")
    activate_stores.short_description = "Activate selected stores"

    def deactivate_stores(self, request, queryset):
        count = queryset.update(is_active=False)
        self.message_user(request, f"{count} stores deactivated.")
    deactivate_stores.short_description = "Deactivate selected stores"


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ('name', 'store', 'status', 'variant_count', 'created_at')
    list_filter = ('status', 'created_at')
    search_fields = ('name', 'description', 'store__store_name')
    readonly_fields = ('id', 'created_at', 'updated_at')

    inlines = [ProductVariantInline, ProductCategoryInline, ProductTagInline]

    fieldsets = (
        ('Basic Information', {
            'fields': ('id', 'store', 'name', 'description')
        }),
        ('Status & Visibility', {
            'fields': ('status',)
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        })
    )

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('store')

    def variant_count(self, obj):
        return obj.variants.count()
    variant_count.short_description = "Variants"


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ('name', 'slug', 'parent', 'created_at')
    search_fields = ('name', 'slug')
    readonly_fields = ('created_at', 'updated_at')


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ('name', 'description', 'created_at')
    search_fields = ('name', 'description')
    readonly_fields = ('created_at', 'updated_at')
