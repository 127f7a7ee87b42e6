import pytest
from django.urls import reverse

from commerce.models import Product, ProductTag

pytestmark = pytest.mark.django_db


def test_shop_listing_leaves_out_food_mirrors(api_client, make_food):
    make_food('Margherita')
    Product.objects.create(title='Gift card', price='25.00')
    Product.objects.create(title='Hidden', catalog_visibility=Product.VISIBILITY_HIDDEN)
    Product.objects.create(title='Draft', status=Product.STATUS_DRAFT)

    response = api_client.get(reverse('commerce:product-list'))

    assert response.status_code == 200
    assert [row['title'] for row in response.data] == ['Gift card']


def test_tag_listing_leaves_out_food_mirrors(api_client, make_food, make_tag):
    make_food('Margherita', tags=[make_tag('Vegan')])
    shirt = Product.objects.create(title='Vegan T-shirt')
    shirt.tags.set([ProductTag.objects.get(name='Vegan')])

    response = api_client.get(reverse('commerce:product-list'), {'tag': 'vegan'})

    assert [row['title'] for row in response.data] == ['Vegan T-shirt']


def test_food_mirror_page_redirects_to_the_shop(api_client, make_food):
    make_food()
    mirror = Product.objects.food_mirrors().get()

    response = api_client.get(reverse('commerce:product-detail', args=[mirror.pk]))

    assert response.status_code == 302
    assert response['Location'] == reverse('commerce:product-list')


def test_ordinary_product_page(api_client):
    product = Product.objects.create(title='Gift card', price='25.00')

    response = api_client.get(reverse('commerce:product-detail', args=[product.pk]))

    assert response.status_code == 200
    assert response.data['slug'] == 'gift-card'


def test_visibility_flag():
    assert Product(title='Shirt').is_visible
    assert not Product(title='Food', is_food_product=True).is_visible
    assert not Product(title='Hidden', catalog_visibility=Product.VISIBILITY_HIDDEN).is_visible


def test_empty_cart(client):
    data = client.get(reverse('commerce:cart-detail')).json()

    assert data == {'items': [], 'cart_count': 0, 'cart_total': '€0.00'}
