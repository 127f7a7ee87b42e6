import time
from unittest.mock import patch

import pytest
from django.test import Client
from django.urls import reverse

from commerce.models import Cart, CartItem, Product

pytestmark = pytest.mark.django_db

ADD_URL = '/menu/add-to-cart/'


@pytest.fixture
def nonce(client):
    return client.get(reverse('storefront:menu-items')).json()['nonce']


def add(client, nonce, **data):
    return client.post(reverse('storefront:add-to-cart'), {'nonce': nonce, **data})


def test_url_is_stable():
    assert reverse('storefront:add-to-cart') == ADD_URL


def test_add_food_to_cart(client, nonce, make_food):
    food = make_food('Margherita', '9.50', excerpt='Classic')

    response = add(client, nonce, food_id=food.pk, quantity=2)

    assert response.status_code == 200
    assert response.json() == {
        'success': True,
        'data': {'message': 'Product added to cart', 'cart_count': 2, 'cart_total': '€19.00'},
    }

    line = CartItem.objects.get()
    assert line.product.is_virtual_master
    assert line.data['yoco_food_id'] == food.pk
    assert line.data['yoco_food_title'] == 'Margherita'
    assert line.data['yoco_food_price'] == '9.50'
    assert line.data['yoco_is_virtual'] is True
    assert line.display_name() == 'Margherita'


def test_each_add_is_its_own_line(client, nonce, make_food):
    pizza = make_food('Margherita', '9.50')
    dessert = make_food('Tiramisu', '5.00')

    add(client, nonce, food_id=pizza.pk, quantity=1)
    add(client, nonce, food_id=pizza.pk, quantity=1)
    response = add(client, nonce, food_id=dessert.pk, quantity=3)

    assert response.json()['data']['cart_count'] == 5
    assert response.json()['data']['cart_total'] == '€34.00'
    assert Cart.objects.count() == 1
    assert CartItem.objects.count() == 3
    assert Product.objects.filter(is_virtual_master=True).count() == 1


def test_cart_endpoint_lists_food_lines(client, nonce, make_food):
    food = make_food('Margherita', '9.50')
    add(client, nonce, food_id=food.pk, quantity=2)

    data = client.get(reverse('commerce:cart-detail')).json()

    assert data['cart_count'] == 2
    assert data['cart_total'] == '€19.00'
    assert data['items'][0]['name'] == 'Margherita'
    assert data['items'][0]['unit_price'] == '€9.50'
    assert data['items'][0]['item_data'][1] == {'name': 'Product ID', 'value': f'#{food.pk}'}


def test_invalid_nonce_is_rejected(client, make_food):
    food = make_food()
    client.get(reverse('storefront:menu-items'))

    response = add(client, 'forged', food_id=food.pk, quantity=1)

    assert response.status_code == 403
    assert response.json() == {'success': False, 'data': 'Security check failed'}
    assert not CartItem.objects.exists()


def test_nonce_is_bound_to_the_session(nonce, make_food):
    food = make_food()
    response = add(Client(), nonce, food_id=food.pk, quantity=1)

    assert response.status_code == 403


def test_nonce_is_bound_to_the_action(client, make_food):
    from storefront.nonce import create_nonce

    food = make_food()
    client.get(reverse('storefront:menu-items'))
    request = type('Request', (), {'session': client.session})()
    other_nonce = create_nonce(request, 'some_other_action')

    response = add(client, other_nonce, food_id=food.pk, quantity=1)

    assert response.status_code == 403


def test_get_is_not_allowed(client):
    assert client.get(reverse('storefront:add-to-cart')).status_code == 405


def test_commerce_inactive(client, nonce, make_food, disable_commerce):
    food = make_food()

    response = add(client, nonce, food_id=food.pk, quantity=1)

    assert response.json() == {'success': False, 'data': 'Commerce integration is not active'}


@pytest.mark.parametrize('data', [
    {},
    {'food_id': 'abc', 'quantity': 1},
    {'food_id': 1, 'quantity': 0},
    {'food_id': 1, 'quantity': 10 ** 20},
    {'food_id': 0, 'quantity': 1},
])
def test_invalid_data(client, nonce, data):
    response = add(client, nonce, **data)

    assert response.json() == {'success': False, 'data': 'Invalid data'}


def test_unknown_food(client, nonce):
    response = add(client, nonce, food_id=424242, quantity=1)

    assert response.json() == {'success': False, 'data': 'Product not found'}


def test_food_without_price(client, nonce, make_food):
    food = make_food(price=None)

    response = add(client, nonce, food_id=food.pk, quantity=1)

    assert response.json() == {'success': False, 'data': 'Product has no valid price'}


def test_virtual_product_failure(client, nonce, make_food):
    food = make_food()

    with patch('storefront.views.ensure_virtual_product', return_value=None):
        response = add(client, nonce, food_id=food.pk, quantity=1)

    assert response.json() == {'success': False, 'data': 'Could not create virtual product'}


def test_cart_refusal(client, nonce, make_food):
    food = make_food()

    with patch('storefront.views.add_line_to_cart', return_value=None):
        response = add(client, nonce, food_id=food.pk, quantity=1)

    assert response.json() == {'success': False, 'data': 'Could not add product to cart'}


def test_browser_post_without_csrf_token_gets_json(make_food):
    food = make_food()
    browser = Client(enforce_csrf_checks=True)
    browser.get(reverse('storefront:menu'))
    nonce = browser.get(reverse('storefront:menu-items')).json()['nonce']

    response = add(browser, nonce, food_id=food.pk, quantity=1)

    assert response.status_code == 200
    assert response['Content-Type'] == 'application/json'
    assert response.json()['success'] is True


def test_expired_nonce_is_rejected(client, nonce, make_food):
    food = make_food()
    a_day_later = time.time() + 60 * 60 * 24 + 60

    with patch('django.core.signing.time.time', return_value=a_day_later):
        response = add(client, nonce, food_id=food.pk, quantity=1)

    assert response.status_code == 403
    assert response.json() == {'success': False, 'data': 'Security check failed'}
    assert not CartItem.objects.exists()


def test_nonce_is_accepted_within_a_day(client, nonce, make_food):
    food = make_food()
    almost_a_day_later = time.time() + 60 * 60 * 23

    with patch('django.core.signing.time.time', return_value=almost_a_day_later):
        response = add(client, nonce, food_id=food.pk, quantity=1)

    assert response.json()['success'] is True
