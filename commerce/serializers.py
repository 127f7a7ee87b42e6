from rest_framework import serializers
from .models import Product, Cart, CartItem
from .cart import format_price


class ProductSerializer(serializers.ModelSerializer):
    tags = serializers.SlugRelatedField(many=True, read_only=True, slug_field='name')

    class Meta:
        model = Product
        fields = [
            'id', 'title', 'slug', 'excerpt', 'sku', 'price', 'regular_price',
            'sale_price', 'virtual', 'stock_status', 'image', 'tags'
        ]


class CartItemSerializer(serializers.ModelSerializer):
    name = serializers.CharField(source='display_name', read_only=True)
    unit_price = serializers.SerializerMethodField()
    line_total = serializers.SerializerMethodField()
    item_data = serializers.ListField(read_only=True)

    class Meta:
        model = CartItem
        fields = ['line_key', 'name', 'quantity', 'unit_price', 'line_total', 'item_data']

    def get_unit_price(self, obj):
        return format_price(obj.unit_price())

    def get_line_total(self, obj):
        return format_price(obj.line_total())


class CartSerializer(serializers.ModelSerializer):
    items = CartItemSerializer(many=True, read_only=True)
    cart_count = serializers.IntegerField(source='contents_count', read_only=True)
    cart_total = serializers.SerializerMethodField()

    class Meta:
        model = Cart
        fields = ['items', 'cart_count', 'cart_total']

    def get_cart_total(self, obj):
        return format_price(obj.total())
