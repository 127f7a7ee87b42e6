"""Shared proxy products that carry food lines in the cart."""
import logging

from django.db import IntegrityError, transaction
from django.utils import timezone

from core.options import (
    PLACEHOLDER_PRODUCT_ID, VIRTUAL_PRODUCT_ID, get_option, is_commerce_active,
    takeaway_setting, update_option,
)

from .models import Product

logger = logging.getLogger(__name__)

VIRTUAL_PRODUCT_SLUG = 'yoco-virtual-container-v1'


def ensure_virtual_product():
    """Return the id of the virtual cart product, creating it when missing or invalid."""
    virtual_product_id = get_option(VIRTUAL_PRODUCT_ID)

    if virtual_product_id:
        product = Product.objects.filter(pk=virtual_product_id).first()
        if product is not None and product.is_virtual_master:
            return product.pk

    return create_virtual_product()


def create_virtual_product():
    if not is_commerce_active():
        return None

    fields = dict(
        title='Takeaway Virtual Product',
        content='Virtual product for the takeaway system. Do not delete.',
        status=Product.STATUS_PUBLISH,
        slug=VIRTUAL_PRODUCT_SLUG,
        product_type='simple',
        virtual=True,
        price=0,
        regular_price=0,
        manage_stock=False,
        stock_status='instock',
        catalog_visibility=Product.VISIBILITY_HIDDEN,
        is_virtual_master=True,
    )

    # Prefer a fixed, high id so the product survives reinstalls at the same address
    desired_id = takeaway_setting('VIRTUAL_PRODUCT_ID')
    product = None
    if desired_id and not Product.objects.filter(pk=desired_id).exists():
        try:
            with transaction.atomic():
                product = Product.objects.create(pk=desired_id, **fields)
        except IntegrityError:
            logger.warning(f"Could not claim id #{desired_id} for the virtual product")
            product = None

    if product is None:
        try:
            product = Product.objects.create(**fields)
        except IntegrityError:
            logger.exception("Failed to create virtual product")
            return None

    update_option(VIRTUAL_PRODUCT_ID, product.pk)
    logger.info(f"Created virtual product #{product.pk} at {timezone.now():%Y-%m-%d %H:%M:%S}")
    return product.pk


def create_placeholder_product():
    """Private placeholder product created when the system is activated."""
    if not is_commerce_active():
        return None

    placeholder_id = get_option(PLACEHOLDER_PRODUCT_ID)
    if placeholder_id and Product.objects.filter(pk=placeholder_id).exists():
        return placeholder_id

    product = Product.objects.create(
        title='Takeaway Food Product Placeholder',
        content='This is a placeholder product for the takeaway system. Do not delete.',
        status=Product.STATUS_PRIVATE,
        virtual=True,
        price=0,
        regular_price=0,
        manage_stock=False,
        is_virtual_proxy=True,
    )
    update_option(PLACEHOLDER_PRODUCT_ID, product.pk)
    logger.info(f"Created placeholder product #{product.pk}")
    return product.pk
