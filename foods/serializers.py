from rest_framework import serializers

from core.options import ICON_KEYS
from .constants import ALLERGEN_LABELS, SPICY_LABELS
from .models import FoodCategory, FoodTag, FoodProduct


class FoodCategorySerializer(serializers.ModelSerializer):
    items_count = serializers.SerializerMethodField()

    class Meta:
        model = FoodCategory
        fields = ['id', 'name', 'slug', 'parent', 'description', 'order', 'date_added', 'items_count']
        read_only_fields = ['date_added', 'items_count']
        extra_kwargs = {'slug': {'required': False}}

    def get_items_count(self, obj):
        return obj.foods.filter(status=FoodProduct.STATUS_PUBLISH).count()

    def validate_parent(self, value):
        if value and self.instance and value.pk == self.instance.pk:
            raise serializers.ValidationError("A category cannot be its own parent.")
        return value


class FoodTagSerializer(serializers.ModelSerializer):
    items_count = serializers.SerializerMethodField()

    class Meta:
        model = FoodTag
        fields = ['id', 'name', 'slug', 'items_count']
        read_only_fields = ['items_count']
        extra_kwargs = {'slug': {'required': False}}

    def get_items_count(self, obj):
        return obj.foods.count()


class PriceField(serializers.DecimalField):
    """Decimal price sent as text, bounded like the model column. Blank clears the price"""

    def __init__(self, **kwargs):
        kwargs.setdefault('max_digits', 10)
        kwargs.setdefault('decimal_places', 2)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if data is None:
            return None
        text = str(data).strip().replace(',', '.')
        if text == '':
            return None
        value = super().to_internal_value(text)
        if value < 0:
            raise serializers.ValidationError("Enter a valid price.")
        return value


class FoodProductListSerializer(serializers.ModelSerializer):
    categories = serializers.SlugRelatedField(many=True, read_only=True, slug_field='slug')
    tags = serializers.SlugRelatedField(many=True, read_only=True, slug_field='slug')
    price = PriceField(read_only=True)
    spicy_label = serializers.SerializerMethodField()

    class Meta:
        model = FoodProduct
        fields = [
            'id', 'title', 'excerpt', 'status', 'menu_order', 'price', 'halal', 'vegetarian',
            'vegan', 'is_menu', 'spicy', 'spicy_label', 'allergens', 'categories', 'tags',
            'commerce_product_id'
        ]

    def get_spicy_label(self, obj):
        return str(SPICY_LABELS[obj.spicy])


class FoodProductSerializer(serializers.ModelSerializer):
    """Create and update food items with their menu attributes"""
    price = PriceField(required=False, allow_null=True)
    categories = serializers.PrimaryKeyRelatedField(many=True, required=False, queryset=FoodCategory.objects.all())
    tags = serializers.PrimaryKeyRelatedField(many=True, required=False, queryset=FoodTag.objects.all())
    allergens = serializers.ListField(child=serializers.CharField(), required=False)

    class Meta:
        model = FoodProduct
        fields = [
            'id', 'title', 'content', 'excerpt', 'status', 'menu_order', 'image', 'price',
            'halal', 'vegetarian', 'vegan', 'is_menu', 'spicy', 'allergens', 'categories',
            'tags', 'commerce_product_id', 'created_at', 'updated_at'
        ]
        read_only_fields = ['commerce_product_id', 'created_at', 'updated_at']

    def validate_allergens(self, value):
        unknown = [key for key in value if key not in ALLERGEN_LABELS]
        if unknown:
            raise serializers.ValidationError(f"Unknown allergens: {', '.join(unknown)}")
        # keep the order of the allergen table, drop duplicates
        return [key for key in ALLERGEN_LABELS if key in value]

    def create(self, validated_data):
        request = self.context.get('request')
        if request and request.user.is_authenticated:
            validated_data.setdefault('author', request.user)
        return super().create(validated_data)


class SettingsSerializer(serializers.Serializer):
    icons = serializers.DictField(child=serializers.CharField(allow_blank=True), required=False)
    order_button_text = serializers.CharField(max_length=100, required=False)
    default_image = serializers.CharField(max_length=500, allow_blank=True, required=False)

    def validate_icons(self, value):
        unknown = [key for key in value if key not in ICON_KEYS]
        if unknown:
            raise serializers.ValidationError(f"Unknown icons: {', '.join(unknown)}")
        return value
