# Keep the commerce mirror of a food product in step with the food item
import logging

from django.db import DatabaseError
from django.db.models.signals import m2m_changed, post_save, pre_delete
from django.dispatch import receiver

from core.options import is_commerce_active
from .models import FoodProduct

logger = logging.getLogger(__name__)


def _food_sync():
    from commerce.sync import food_sync
    return food_sync


def _remember_mirror(instance, product_id):
    # the sync works on a fresh copy of the row, keep the caller's instance current
    if product_id:
        instance.commerce_product_id = product_id


@receiver(post_save, sender=FoodProduct)
def sync_food_product_on_save(sender, instance, raw=False, **kwargs):
    """Create or update the mirror after a food item is saved"""
    if raw or not is_commerce_active():
        return
    try:
        _remember_mirror(instance, _food_sync().sync_food(instance.pk))
    except DatabaseError:
        logger.exception(f"Sync of food #{instance.pk} failed, skipped")


@receiver(m2m_changed, sender=FoodProduct.tags.through)
def sync_food_product_on_tags_change(sender, instance, action, reverse=False, **kwargs):
    """Tags are set after the food row is saved, re-sync so the mirror gets them"""
    if reverse or action not in ['post_add', 'post_remove', 'post_clear']:
        return
    if not is_commerce_active():
        return
    try:
        _remember_mirror(instance, _food_sync().sync_food(instance.pk))
    except DatabaseError:
        logger.exception(f"Tag sync of food #{instance.pk} failed, skipped")


@receiver(pre_delete, sender=FoodProduct)
def delete_food_product_mirror(sender, instance, **kwargs):
    """Remove the mirror while the food row still knows its id"""
    if not is_commerce_active():
        return
    try:
        _food_sync().delete_mirror(instance)
    except DatabaseError:
        logger.exception(f"Removing the mirror of food #{instance.pk} failed, skipped")
