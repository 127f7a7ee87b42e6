from django.shortcuts import get_object_or_404, redirect
from rest_framework import filters, generics
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .cart import get_cart
from .models import Product
from .serializers import CartSerializer, ProductSerializer


class ProductListView(generics.ListAPIView):
    """
    get: Shop listing, food mirrors and hidden products are left out
    """
    serializer_class = ProductSerializer
    permission_classes = [AllowAny]
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['title', 'excerpt', 'sku']
    ordering_fields = ['title', 'price', 'created_at']
    ordering = ['menu_order', 'title']

    def get_queryset(self):
        queryset = Product.objects.visible().prefetch_related('tags')

        tag = self.request.query_params.get('tag')
        if tag:
            queryset = queryset.filter(tags__slug=tag)
        return queryset


@api_view(['GET'])
@permission_classes([AllowAny])
def product_detail(request, pk):
    """Product page. Food mirrors are not browsable and send the visitor back to the shop"""
    product = get_object_or_404(Product, pk=pk)
    if product.is_food_product:
        return redirect('commerce:product-list')
    return Response(ProductSerializer(product).data)


@api_view(['GET'])
@permission_classes([AllowAny])
def cart_detail(request):
    """Current session cart with line names, prices and totals"""
    cart = get_cart(request)
    return Response(CartSerializer(cart).data)
