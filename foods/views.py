import logging

from rest_framework import generics, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework import filters
from django_filters.rest_framework import DjangoFilterBackend
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

from core import options
from core.exceptions import CommerceInactiveError
from core.permissions import IsFoodEditor, ReadAuthenticatedWriteEditor
from .models import FoodCategory, FoodTag, FoodProduct
from .serializers import (
    FoodCategorySerializer, FoodTagSerializer, FoodProductSerializer,
    FoodProductListSerializer, SettingsSerializer
)

logger = logging.getLogger(__name__)


# Food Category Views
class FoodCategoryListCreateView(generics.ListCreateAPIView):
    """
    get: List all food categories
    post: Create a new food category (food editors only)
    """
    queryset = FoodCategory.objects.all()
    serializer_class = FoodCategorySerializer
    permission_classes = [ReadAuthenticatedWriteEditor]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ['parent']
    search_fields = ['name', 'slug']
    ordering_fields = ['name', 'order', 'date_added']
    ordering = ['order', 'name']


class FoodCategoryRetrieveUpdateDestroyView(generics.RetrieveUpdateDestroyAPIView):
    """
    get: Get category details
    put/patch: Update category, including its menu order (food editors only)
    delete: Delete category (food editors only)
    """
    queryset = FoodCategory.objects.all()
    serializer_class = FoodCategorySerializer
    permission_classes = [ReadAuthenticatedWriteEditor]


# Food Tag Views
class FoodTagListCreateView(generics.ListCreateAPIView):
    queryset = FoodTag.objects.all()
    serializer_class = FoodTagSerializer
    permission_classes = [ReadAuthenticatedWriteEditor]
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name', 'slug']
    ordering = ['name']


class FoodTagRetrieveUpdateDestroyView(generics.RetrieveUpdateDestroyAPIView):
    queryset = FoodTag.objects.all()
    serializer_class = FoodTagSerializer
    permission_classes = [ReadAuthenticatedWriteEditor]


# Food Product Views
class FoodProductListCreateView(generics.ListCreateAPIView):
    """
    get: List all food products
    post: Create a new food product (food editors only). Saving syncs the commerce mirror
    """
    queryset = FoodProduct.objects.prefetch_related('categories', 'tags')
    permission_classes = [ReadAuthenticatedWriteEditor]
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = {
        'status': ['exact'],
        'halal': ['exact'],
        'vegetarian': ['exact'],
        'vegan': ['exact'],
        'is_menu': ['exact'],
        'spicy': ['exact', 'gte'],
        'categories__slug': ['exact'],
        'tags__slug': ['exact'],
    }
    search_fields = ['title', 'excerpt', 'content']
    ordering_fields = ['title', 'price', 'menu_order', 'created_at']
    ordering = ['menu_order', 'title']

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return FoodProductSerializer
        return FoodProductListSerializer


class FoodProductRetrieveUpdateDestroyView(generics.RetrieveUpdateDestroyAPIView):
    """
    get: Get food product details
    put/patch: Update food product (food editors only)
    delete: Delete food product and its commerce mirror (food editors only)
    """
    queryset = FoodProduct.objects.prefetch_related('categories', 'tags')
    serializer_class = FoodProductSerializer
    permission_classes = [ReadAuthenticatedWriteEditor]


def _settings_payload():
    return {
        'icons': options.get_icons(),
        'order_button_text': options.get_order_button_text(),
        'default_image': options.get_option(options.DEFAULT_IMAGE, ''),
    }


@swagger_auto_schema(method='put', request_body=SettingsSerializer, responses={200: SettingsSerializer})
@api_view(['GET', 'PUT'])
@permission_classes([IsFoodEditor])
def takeaway_settings(request):
    """Read or save the menu icons, order button text and default image"""
    if request.method == 'GET':
        return Response(_settings_payload())

    serializer = SettingsSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    if 'icons' in data:
        icons = options.get_icons()
        icons.update(data['icons'])
        options.update_option(options.ICONS, icons)
    if 'order_button_text' in data:
        options.update_option(options.ORDER_BUTTON_TEXT, data['order_button_text'])
    if 'default_image' in data:
        options.update_option(options.DEFAULT_IMAGE, data['default_image'])

    logger.info(f"Takeaway settings updated by {request.user}")
    return Response(_settings_payload())


@api_view(['GET'])
@permission_classes([IsFoodEditor])
def system_status(request):
    """State of the cart integration: commerce, virtual product and food counts"""
    commerce_active = options.is_commerce_active()
    virtual_product = {'id': None, 'valid': False}

    if commerce_active:
        from commerce.models import Product

        virtual_product_id = options.get_option(options.VIRTUAL_PRODUCT_ID)
        if virtual_product_id:
            virtual_product['id'] = virtual_product_id
            virtual_product['valid'] = Product.objects.filter(
                pk=virtual_product_id, is_virtual_master=True
            ).exists()

    counts = {key: FoodProduct.objects.filter(status=key).count() for key, _label in FoodProduct.STATUS_CHOICES}

    return Response({
        'commerce_active': commerce_active,
        'virtual_product': virtual_product,
        'food_counts': counts,
        'published_with_price': FoodProduct.objects.published().with_price().count(),
    })


@swagger_auto_schema(
    method='post',
    operation_description="Sync every published food product to its commerce mirror",
    responses={
        200: openapi.Response(description="Counts of synced, failed and skipped food products"),
        503: openapi.Response(description="Commerce integration inactive"),
    }
)
@api_view(['POST'])
@permission_classes([IsFoodEditor])
def bulk_sync(request):
    if not options.is_commerce_active():
        raise CommerceInactiveError("bulk sync requested")

    from commerce.sync import food_sync
    return Response(food_sync.bulk_sync())


@swagger_auto_schema(
    method='post',
    operation_description="Delete commerce mirrors whose food product no longer exists",
    responses={200: openapi.Response(description="Number of removed products")}
)
@api_view(['POST'])
@permission_classes([IsFoodEditor])
def cleanup_orphans(request):
    if not options.is_commerce_active():
        raise CommerceInactiveError("orphan cleanup requested")

    from commerce.sync import food_sync
    return Response({'cleaned_up': food_sync.cleanup_orphaned()})
