from django.urls import path
from . import views

app_name = 'commerce'

urlpatterns = [
    path('products/', views.ProductListView.as_view(), name='product-list'),
    path('products/<int:pk>/', views.product_detail, name='product-detail'),
    path('cart/', views.cart_detail, name='cart-detail'),
]
