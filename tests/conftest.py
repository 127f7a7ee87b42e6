"""
Pytest configuration and fixtures.
"""
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from foods.models import FoodCategory, FoodProduct, FoodTag


@pytest.fixture(autouse=True)
def commerce_enabled(settings):
    """Every test starts with the commerce integration switched on."""
    settings.TAKEAWAY = {**settings.TAKEAWAY, 'COMMERCE_ENABLED': True, 'CURRENCY_SYMBOL': '€'}
    return settings


@pytest.fixture
def disable_commerce(settings):
    settings.TAKEAWAY = {**settings.TAKEAWAY, 'COMMERCE_ENABLED': False}


@pytest.fixture
def staff_user(db):
    return get_user_model().objects.create_user(username='chef', password='secret', is_staff=True)


@pytest.fixture
def customer_user(db):
    return get_user_model().objects.create_user(username='guest', password='secret')


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def staff_client(api_client, staff_user):
    api_client.force_authenticate(staff_user)
    return api_client


@pytest.fixture
def make_category(db):
    def factory(name, **kwargs):
        return FoodCategory.objects.create(name=name, **kwargs)
    return factory


@pytest.fixture
def make_tag(db):
    def factory(name):
        return FoodTag.objects.create(name=name)
    return factory


@pytest.fixture
def make_food(db):
    """Food item factory. ``categories`` and ``tags`` are set after the row is saved."""
    def factory(title='Margherita', price='9.50', categories=(), tags=(), **kwargs):
        food = FoodProduct.objects.create(
            title=title,
            price=Decimal(price) if price is not None else None,
            **kwargs
        )
        if categories:
            food.categories.set(categories)
        if tags:
            food.tags.set(tags)
        return food
    return factory
