from django.urls import path
from . import views

app_name = 'storefront'

urlpatterns = [
    path('', views.menu_page, name='menu'),
    path('items/', views.menu_items, name='menu-items'),
    path('add-to-cart/', views.add_to_cart, name='add-to-cart'),
]
