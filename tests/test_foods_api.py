from decimal import Decimal

import pytest
from django.contrib.auth.models import Permission
from django.urls import reverse

from commerce.models import Product
from core.options import ICONS, get_option, update_option
from foods.models import FoodCategory, FoodProduct

pytestmark = pytest.mark.django_db


def test_anonymous_users_are_refused(api_client):
    response = api_client.get(reverse('foods:food-list-create'))

    assert response.status_code in (401, 403)
    assert response.data['error'] is True


def test_customers_can_read_but_not_write(api_client, customer_user, make_food):
    make_food()
    api_client.force_authenticate(customer_user)

    assert api_client.get(reverse('foods:food-list-create')).status_code == 200

    response = api_client.post(reverse('foods:food-list-create'), {'title': 'Sneaky'}, format='json')
    assert response.status_code == 403
    assert response.data['message'] == 'Permission denied'


def test_change_permission_makes_an_editor(api_client, customer_user):
    customer_user.user_permissions.add(Permission.objects.get(codename='change_foodproduct'))
    api_client.force_authenticate(customer_user)

    response = api_client.post(reverse('foods:food-list-create'), {'title': 'Lasagne'}, format='json')

    assert response.status_code == 201


def test_create_food_syncs_mirror_with_tags(staff_client, staff_user, make_category, make_tag):
    pizza = make_category('Pizza')
    vegan = make_tag('Vegan')

    response = staff_client.post(reverse('foods:food-list-create'), {
        'title': 'Marinara',
        'excerpt': 'Tomato, garlic, oregano',
        'price': '8,50',
        'vegan': True,
        'spicy': 1,
        'allergens': ['sesame', 'gluten', 'gluten'],
        'categories': [pizza.pk],
        'tags': [vegan.pk],
    }, format='json')

    assert response.status_code == 201
    assert response.data['price'] == '8.50'
    assert response.data['allergens'] == ['gluten', 'sesame']

    food = FoodProduct.objects.get(pk=response.data['id'])
    assert food.author == staff_user
    product = Product.objects.food_mirrors().get()
    assert response.data['commerce_product_id'] == product.pk
    assert product.price == Decimal('8.50')
    assert list(product.tags.values_list('name', flat=True)) == ['Vegan']


def test_unknown_allergen_is_rejected(staff_client):
    response = staff_client.post(reverse('foods:food-list-create'), {
        'title': 'Mystery',
        'allergens': ['kryptonite'],
    }, format='json')

    assert response.status_code == 400
    assert 'allergens' in response.data['details']


@pytest.mark.parametrize('price', ['abc', '-1', '1e30', '123456789012.00', '1.005'])
def test_invalid_price_is_rejected(staff_client, price):
    response = staff_client.post(reverse('foods:food-list-create'), {'title': 'X', 'price': price}, format='json')

    assert response.status_code == 400


def test_update_and_delete_food(staff_client, make_food):
    food = make_food('Calzone', '10.00')
    url = reverse('foods:food-detail', args=[food.pk])

    response = staff_client.patch(url, {'price': '10.90'}, format='json')
    assert response.status_code == 200
    assert Product.objects.food_mirrors().get().price == Decimal('10.90')

    assert staff_client.delete(url).status_code == 204
    assert not Product.objects.food_mirrors().exists()


def test_list_filters(staff_client, make_category, make_food):
    pizza = make_category('Pizza')
    make_food('Margherita', categories=[pizza], vegetarian=True)
    make_food('Diavola', categories=[pizza], spicy=3)
    make_food('Salad')

    response = staff_client.get(reverse('foods:food-list-create'), {'categories__slug': 'pizza', 'spicy__gte': 1})

    assert [row['title'] for row in response.data] == ['Diavola']
    assert response.data[0]['spicy_label'] == 'Extra spicy'


def test_category_cannot_be_its_own_parent(staff_client):
    category = FoodCategory.objects.create(name='Pizza')

    response = staff_client.patch(
        reverse('foods:category-detail', args=[category.pk]), {'parent': category.pk}, format='json'
    )

    assert response.status_code == 400


def test_category_order_and_items_count(staff_client, make_category, make_food):
    pizza = make_category('Pizza')
    make_food(categories=[pizza])
    make_food('Draft', categories=[pizza], status=FoodProduct.STATUS_DRAFT)

    response = staff_client.patch(reverse('foods:category-detail', args=[pizza.pk]), {'order': 3}, format='json')

    assert response.data['order'] == 3
    assert response.data['items_count'] == 1


def test_settings_roundtrip(staff_client):
    update_option(ICONS, {'halal': '/icons/halal.svg'})

    response = staff_client.put(reverse('foods:settings'), {
        'icons': {'vegan': '/icons/vegan.svg'},
        'order_button_text': 'Add',
        'default_image': '/media/default.jpg',
    }, format='json')

    assert response.status_code == 200
    assert response.data['icons'] == {
        'halal': '/icons/halal.svg', 'vegetarian': '', 'vegan': '/icons/vegan.svg', 'spicy': '',
    }
    assert response.data['order_button_text'] == 'Add'
    assert get_option(ICONS)['vegan'] == '/icons/vegan.svg'


def test_settings_reject_unknown_icons(staff_client):
    response = staff_client.put(reverse('foods:settings'), {'icons': {'kosher': 'x'}}, format='json')

    assert response.status_code == 400


def test_settings_need_an_editor(api_client, customer_user):
    api_client.force_authenticate(customer_user)

    assert api_client.get(reverse('foods:settings')).status_code == 403


def test_system_status(staff_client, make_food):
    make_food()
    make_food('Draft', status=FoodProduct.STATUS_DRAFT)

    response = staff_client.get(reverse('foods:status'))

    assert response.data['commerce_active'] is True
    assert response.data['food_counts'] == {'publish': 1, 'draft': 1, 'private': 0}
    assert response.data['published_with_price'] == 1
    assert response.data['virtual_product'] == {'id': None, 'valid': False}


def test_bulk_sync_endpoint(staff_client, make_food):
    make_food()
    make_food('Unpriced', price=None)

    response = staff_client.post(reverse('foods:bulk-sync'))

    assert response.status_code == 200
    assert response.data == {'success': 1, 'errors': 0, 'skipped': 1}


def test_cleanup_endpoint(staff_client):
    Product.objects.create(title='Orphan', is_food_product=True, food_id=31337)

    response = staff_client.post(reverse('foods:cleanup-orphans'))

    assert response.data == {'cleaned_up': 1}


def test_maintenance_needs_commerce(staff_client, disable_commerce):
    response = staff_client.post(reverse('foods:bulk-sync'))

    assert response.status_code == 503
    assert response.data['message'] == 'Commerce integration is not active'
