from decimal import Decimal

from django.conf import settings
from django.db import models
from django.utils.text import slugify

from .constants import SPICY_CHOICES, SPICY_LABELS, DIET_LABELS


class FoodCategory(models.Model):
    name = models.CharField(max_length=100)
    slug = models.SlugField(max_length=120, unique=True, blank=True)
    parent = models.ForeignKey('self', on_delete=models.SET_NULL, null=True, blank=True, related_name='children')
    description = models.TextField(blank=True)
    # Position of the category section on the menu
    order = models.IntegerField(default=10)
    date_added = models.DateField(auto_now_add=True)

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)

    def __str__(self):
        return str(self.name)

    class Meta:
        ordering = ['order', 'name']
        verbose_name_plural = "Food Categories"


class FoodTag(models.Model):
    name = models.CharField(max_length=100)
    slug = models.SlugField(max_length=120, unique=True, blank=True)

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)

    def __str__(self):
        return str(self.name)

    class Meta:
        ordering = ['name']


class FoodProductQuerySet(models.QuerySet):

    def published(self):
        return self.filter(status=FoodProduct.STATUS_PUBLISH)

    def with_price(self):
        return self.filter(price__gt=0)


class FoodProduct(models.Model):
    STATUS_PUBLISH = 'publish'
    STATUS_DRAFT = 'draft'
    STATUS_PRIVATE = 'private'
    STATUS_CHOICES = [
        (STATUS_PUBLISH, "Published"),
        (STATUS_DRAFT, "Draft"),
        (STATUS_PRIVATE, "Private"),
    ]

    title = models.CharField(max_length=255)
    content = models.TextField(blank=True)
    excerpt = models.TextField(blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_PUBLISH)
    menu_order = models.IntegerField(default=0)
    image = models.FileField(upload_to='foodimage', null=True, blank=True)
    author = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True,
                               related_name='food_products')

    price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    halal = models.BooleanField(default=False)
    vegetarian = models.BooleanField(default=False)
    vegan = models.BooleanField(default=False)
    is_menu = models.BooleanField(default=False)
    spicy = models.PositiveSmallIntegerField(choices=SPICY_CHOICES, default=0)
    allergens = models.JSONField(default=list, blank=True)

    categories = models.ManyToManyField(FoodCategory, blank=True, related_name='foods')
    tags = models.ManyToManyField(FoodTag, blank=True, related_name='foods')

    # Id of the commerce product mirroring this food item
    commerce_product_id = models.PositiveIntegerField(null=True, blank=True, editable=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = FoodProductQuerySet.as_manager()

    @property
    def has_valid_price(self):
        return self.price is not None and Decimal(self.price) > 0

    @property
    def image_url(self):
        return self.image.url if self.image else ''

    def get_food_meta(self):
        """Menu attributes of the food item as a plain dict"""
        return {
            'price': self.price,
            'halal': self.halal,
            'vegetarian': self.vegetarian,
            'vegan': self.vegan,
            'spicy': self.spicy,
            'is_menu': self.is_menu,
            'allergens': list(self.allergens or []),
        }

    def diet_labels(self):
        """Labels of the diet badges shown on the menu, spicy level last"""
        labels = [str(DIET_LABELS[key]) for key in ('halal', 'vegetarian', 'vegan') if getattr(self, key)]
        if self.spicy > 0:
            labels.append(str(SPICY_LABELS[self.spicy]))
        return labels

    def __str__(self):
        return self.title

    class Meta:
        ordering = ['menu_order', 'title']
