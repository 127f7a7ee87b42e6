from django.urls import path
from . import views

app_name = 'foods'

urlpatterns = [
    # Food Category URLs
    path('categories/', views.FoodCategoryListCreateView.as_view(), name='category-list-create'),
    path('categories/<int:pk>/', views.FoodCategoryRetrieveUpdateDestroyView.as_view(), name='category-detail'),

    # Food Tag URLs
    path('tags/', views.FoodTagListCreateView.as_view(), name='tag-list-create'),
    path('tags/<int:pk>/', views.FoodTagRetrieveUpdateDestroyView.as_view(), name='tag-detail'),

    # Food Product URLs
    path('products/', views.FoodProductListCreateView.as_view(), name='food-list-create'),
    path('products/<int:pk>/', views.FoodProductRetrieveUpdateDestroyView.as_view(), name='food-detail'),

    # Settings and maintenance
    path('settings/', views.takeaway_settings, name='settings'),
    path('status/', views.system_status, name='status'),
    path('sync/', views.bulk_sync, name='bulk-sync'),
    path('cleanup/', views.cleanup_orphans, name='cleanup-orphans'),
]
