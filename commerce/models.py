from decimal import Decimal

from django.conf import settings
from django.db import models
from django.utils.text import slugify


class ProductTag(models.Model):
    name = models.CharField(max_length=100, unique=True)
    slug = models.SlugField(max_length=120, unique=True, blank=True, allow_unicode=True)

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = self.unique_slug(self.name)
        super().save(*args, **kwargs)

    @classmethod
    def unique_slug(cls, name):
        """Slug of ``name``, suffixed with -2, -3... while another tag holds it"""
        base = slugify(name, allow_unicode=True)[:110] or 'tag'
        slug, suffix = base, 2
        while cls.objects.filter(slug=slug).exists():
            slug = f'{base}-{suffix}'
            suffix += 1
        return slug

    def __str__(self):
        return self.name

    class Meta:
        ordering = ['name']


class ProductQuerySet(models.QuerySet):

    def visible(self):
        """Products a shop, category or tag listing may show"""
        return self.filter(
            status=Product.STATUS_PUBLISH,
            is_food_product=False,
        ).exclude(catalog_visibility=Product.VISIBILITY_HIDDEN)

    def food_mirrors(self):
        return self.filter(is_food_product=True)


class Product(models.Model):
    STATUS_PUBLISH = 'publish'
    STATUS_PRIVATE = 'private'
    STATUS_DRAFT = 'draft'
    STATUS_CHOICES = [
        (STATUS_PUBLISH, "Published"),
        (STATUS_PRIVATE, "Private"),
        (STATUS_DRAFT, "Draft"),
    ]

    VISIBILITY_VISIBLE = 'visible'
    VISIBILITY_HIDDEN = 'hidden'
    VISIBILITY_CHOICES = [
        (VISIBILITY_VISIBLE, "Shop and search results"),
        ('catalog', "Shop only"),
        ('search', "Search results only"),
        (VISIBILITY_HIDDEN, "Hidden"),
    ]

    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, blank=True)
    content = models.TextField(blank=True)
    excerpt = models.TextField(blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PUBLISH)
    product_type = models.CharField(max_length=20, default='simple')
    author = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True,
                               related_name='commerce_products')
    menu_order = models.IntegerField(default=0)

    sku = models.CharField(max_length=100, unique=True, null=True, blank=True)
    price = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    regular_price = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    sale_price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    virtual = models.BooleanField(default=False)
    manage_stock = models.BooleanField(default=False)
    stock_status = models.CharField(max_length=20, default='instock')
    catalog_visibility = models.CharField(max_length=20, choices=VISIBILITY_CHOICES, default=VISIBILITY_VISIBLE)
    tax_status = models.CharField(max_length=20, default='taxable')
    image = models.CharField(max_length=500, blank=True)
    tags = models.ManyToManyField(ProductTag, blank=True, related_name='products')

    # Bookkeeping for products owned by the takeaway system
    is_food_product = models.BooleanField(default=False)
    food_id = models.PositiveIntegerField(null=True, blank=True, db_index=True)
    is_virtual_master = models.BooleanField(default=False)
    is_virtual_proxy = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ProductQuerySet.as_manager()

    @property
    def is_visible(self):
        if self.is_food_product:
            return False
        return self.status == self.STATUS_PUBLISH and self.catalog_visibility != self.VISIBILITY_HIDDEN

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.title)
        super().save(*args, **kwargs)

    def __str__(self):
        return self.title

    class Meta:
        ordering = ['menu_order', 'title']


class Cart(models.Model):
    session_key = models.CharField(max_length=64, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def contents_count(self):
        return sum(item.quantity for item in self.items.all())

    def total(self):
        return sum((item.line_total() for item in self.items.all()), Decimal('0.00'))

    def __str__(self):
        return f"Cart {self.session_key}"


class CartItem(models.Model):
    cart = models.ForeignKey(Cart, related_name='items', on_delete=models.CASCADE)
    product = models.ForeignKey(Product, related_name='cart_items', on_delete=models.CASCADE)
    quantity = models.PositiveIntegerField(default=1)
    line_key = models.CharField(max_length=64)
    # Line specific data, food lines carry the yoco_food_* keys
    data = models.JSONField(default=dict, blank=True)
    added_at = models.DateTimeField(auto_now_add=True)

    @property
    def is_food_line(self):
        return bool(self.data.get('yoco_food_product'))

    def unit_price(self):
        """Food lines are priced from the line data, the proxy product costs nothing"""
        if self.is_food_line:
            return Decimal(str(self.data['yoco_food_price']))
        return self.product.price

    def line_total(self):
        return self.unit_price() * self.quantity

    def display_name(self):
        if self.is_food_line:
            return self.data['yoco_food_title']
        return self.product.title

    def item_data(self):
        """Extra rows shown under the line name"""
        if not self.is_food_line:
            return []
        return [
            {'name': 'Food product', 'value': self.data['yoco_food_title']},
            {'name': 'Product ID', 'value': f"#{self.data['yoco_food_id']}"},
        ]

    def __str__(self):
        return f"{self.quantity} x {self.display_name()}"

    class Meta:
        ordering = ['id']
        unique_together = ['cart', 'line_key']
