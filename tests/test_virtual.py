import pytest

from commerce.models import Product
from commerce.virtual import create_placeholder_product, ensure_virtual_product
from core.options import PLACEHOLDER_PRODUCT_ID, VIRTUAL_PRODUCT_ID, get_option, update_option

pytestmark = pytest.mark.django_db


def test_virtual_product_prefers_the_fixed_id():
    product_id = ensure_virtual_product()

    assert product_id == 999999
    product = Product.objects.get(pk=product_id)
    assert product.is_virtual_master
    assert product.catalog_visibility == Product.VISIBILITY_HIDDEN
    assert product.slug == 'yoco-virtual-container-v1'
    assert get_option(VIRTUAL_PRODUCT_ID) == product_id


def test_virtual_product_is_reused():
    first = ensure_virtual_product()
    second = ensure_virtual_product()

    assert first == second
    assert Product.objects.filter(is_virtual_master=True).count() == 1


def test_deleted_virtual_product_is_recreated():
    Product.objects.filter(pk=ensure_virtual_product()).delete()

    product_id = ensure_virtual_product()

    assert Product.objects.filter(pk=product_id, is_virtual_master=True).exists()


def test_stored_id_of_an_ordinary_product_is_not_trusted():
    ordinary = Product.objects.create(title='T-shirt')
    update_option(VIRTUAL_PRODUCT_ID, ordinary.pk)

    product_id = ensure_virtual_product()

    assert product_id != ordinary.pk
    assert Product.objects.get(pk=product_id).is_virtual_master


def test_taken_fixed_id_falls_back_to_a_new_id():
    Product.objects.create(pk=999999, title='Something else')

    product_id = ensure_virtual_product()

    assert product_id != 999999
    assert Product.objects.get(pk=product_id).is_virtual_master


def test_no_virtual_product_while_commerce_is_inactive(disable_commerce):
    assert ensure_virtual_product() is None
    assert not Product.objects.exists()


def test_placeholder_product_is_created_once():
    first = create_placeholder_product()
    second = create_placeholder_product()

    assert first == second
    product = Product.objects.get(pk=first)
    assert product.status == Product.STATUS_PRIVATE
    assert product.is_virtual_proxy
    assert get_option(PLACEHOLDER_PRODUCT_ID) == first
