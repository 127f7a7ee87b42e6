"""
Mirror food products into commerce products.

Every food item with a price gets one hidden, virtual commerce product so the
cart can hold it. The food row keeps the mirror id in ``commerce_product_id``
and the mirror keeps the food id in ``food_id``.
"""
import logging

from django.db import transaction

from core.options import DEFAULT_IMAGE, get_option, is_commerce_active
from foods.models import FoodProduct

from .models import Product, ProductTag

logger = logging.getLogger(__name__)


class FoodProductSync:
    """Create, update and delete the commerce mirrors of food products."""

    def __init__(self, product_model=Product, food_model=FoodProduct):
        self.product_model = product_model
        self.food_model = food_model

    def sync_food(self, food_id):
        """Create or update the mirror of a food item.

        Returns the mirror id, or ``None`` when nothing was synced.
        """
        if not is_commerce_active():
            return None

        food = self.food_model.objects.filter(pk=food_id).first()
        if food is None:
            return None

        product = self._linked_product(food)
        if product is not None:
            return self._update_product(food, product)
        return self._create_product(food)

    def get_product_id(self, food_id):
        food = self.food_model.objects.filter(pk=food_id).first()
        if food is None:
            return None
        product = self._linked_product(food)
        return product.pk if product else None

    def delete_mirror(self, food):
        """Remove the mirror of ``food``. Returns whether a product was deleted."""
        product = self._linked_product(food)
        if product is None:
            return False

        product_id = product.pk
        product.delete()
        self.food_model.objects.filter(pk=food.pk).update(commerce_product_id=None)
        food.commerce_product_id = None
        logger.info(f"Deleted commerce product #{product_id} for food #{food.pk}")
        return True

    def bulk_sync(self):
        """Sync every published food item, skipping those without a price."""
        results = {'success': 0, 'errors': 0, 'skipped': 0}

        for food in self.food_model.objects.published():
            if not food.has_valid_price:
                results['skipped'] += 1
                continue

            if self.sync_food(food.pk):
                results['success'] += 1
            else:
                results['errors'] += 1

        logger.info(
            f"Bulk sync finished: {results['success']} synced, "
            f"{results['errors']} failed, {results['skipped']} skipped"
        )
        return results

    def cleanup_orphaned(self):
        """Delete mirrors whose food item no longer exists."""
        existing = set(self.food_model.objects.values_list('pk', flat=True))
        cleaned_up = 0

        for product in self.product_model.objects.food_mirrors():
            if product.food_id and product.food_id in existing:
                continue
            logger.info(f"Removing orphaned commerce product #{product.pk} (food #{product.food_id})")
            product.delete()
            cleaned_up += 1

        return cleaned_up

    def _linked_product(self, food):
        product = None
        if food.commerce_product_id:
            product = self.product_model.objects.filter(pk=food.commerce_product_id).first()
        if product is None:
            product = self.product_model.objects.food_mirrors().filter(food_id=food.pk).first()
        return product

    def _image_for(self, food):
        return food.image_url or get_option(DEFAULT_IMAGE, '') or ''

    @transaction.atomic
    def _create_product(self, food):
        if not food.has_valid_price:
            return None

        product = self.product_model.objects.create(
            title=food.title,
            content=food.content,
            excerpt=food.excerpt,
            status=self.product_model.STATUS_PUBLISH,
            product_type='simple',
            author=food.author,
            menu_order=food.menu_order,
            sku=f'yoco-food-{food.pk}',
            price=food.price,
            regular_price=food.price,
            sale_price=None,
            virtual=True,
            manage_stock=False,
            stock_status='instock',
            catalog_visibility=self.product_model.VISIBILITY_HIDDEN,
            tax_status='taxable',
            image=self._image_for(food),
            is_food_product=True,
            food_id=food.pk,
        )
        self._sync_tags(food, product)

        # queryset update keeps the food save signals from firing again
        self.food_model.objects.filter(pk=food.pk).update(commerce_product_id=product.pk)
        food.commerce_product_id = product.pk

        logger.info(f"Created commerce product #{product.pk} for food #{food.pk}")
        return product.pk

    @transaction.atomic
    def _update_product(self, food, product):
        product.title = food.title
        product.content = food.content
        product.excerpt = food.excerpt
        product.status = self.product_model.STATUS_PUBLISH
        product.menu_order = food.menu_order

        # A cleared food price leaves the last known price on the mirror
        if food.has_valid_price:
            product.price = food.price
            product.regular_price = food.price

        product.image = self._image_for(food)
        product.save()
        self._sync_tags(food, product)

        logger.info(f"Updated commerce product #{product.pk} for food #{food.pk}")
        return product.pk

    def _sync_tags(self, food, product):
        names = list(food.tags.values_list('name', flat=True))
        if not names:
            return
        tags = [ProductTag.objects.get_or_create(name=name)[0] for name in names]
        product.tags.set(tags)


food_sync = FoodProductSync()
