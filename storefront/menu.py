"""Build the public menu: category sections, item cards and filter buttons."""
from django.db.models import Count, Q

from commerce.cart import format_price
from core import options
from foods.constants import ALLERGEN_LABELS, DIET_EMOJI, DIET_LABELS, SPICY_LABELS
from foods.models import FoodCategory, FoodProduct, FoodTag

from .filtering import MenuFilter

ADD_TO_CART_ACTION = 'yoco_add_to_cart'


def menu_items_queryset(category=None):
    """Published food items with a price, optionally limited to one category slug."""
    queryset = (
        FoodProduct.objects.published()
        .with_price()
        .prefetch_related('categories', 'tags')
    )
    if category:
        queryset = queryset.filter(categories__slug=category).distinct()
    return queryset


def diet_badges(food, icons):
    badges = []
    for key in ('halal', 'vegetarian', 'vegan'):
        if getattr(food, key):
            badges.append({
                'key': key,
                'label': str(DIET_LABELS[key]),
                'icon': icons.get(key, ''),
                'emoji': DIET_EMOJI[key],
                'repeat': 1,
            })
    if food.spicy > 0:
        badges.append({
            'key': 'spicy',
            'label': str(SPICY_LABELS[food.spicy]),
            'icon': icons.get('spicy', ''),
            'emoji': DIET_EMOJI['spicy'],
            'repeat': food.spicy,
        })
    return badges


def serialize_item(food, icons=None, button_text=None):
    icons = options.get_icons() if icons is None else icons
    categories = list(food.categories.all())
    tags = list(food.tags.all())
    badges = diet_badges(food, icons)

    return {
        'id': food.pk,
        'title': food.title,
        'description': food.excerpt,
        'image': food.image_url,
        'is_menu': food.is_menu,
        'price': f"{food.price:.2f}",
        'price_display': format_price(food.price),
        'diet_badges': badges,
        'diet_labels': [badge['label'] for badge in badges],
        'allergens': [
            {'key': key, 'label': str(ALLERGEN_LABELS[key])}
            for key in food.allergens or [] if key in ALLERGEN_LABELS
        ],
        'tags': [{'name': tag.name, 'slug': tag.slug} for tag in tags],
        'category_slugs': [category.slug for category in categories],
        'tag_slugs': [tag.slug for tag in tags],
        'button_text': button_text or options.get_order_button_text(),
    }


def build_menu(category=None, menu_filter=None):
    """Everything the menu template and the JSON menu endpoint need.

    Items that fail ``menu_filter`` stay in the sections with ``hidden`` set,
    sections without a visible item are hidden too.
    """
    menu_filter = menu_filter or MenuFilter()
    icons = options.get_icons()
    button_text = options.get_order_button_text()

    foods = list(menu_items_queryset(category))
    items = {food.pk: serialize_item(food, icons, button_text) for food in foods}
    result = menu_filter.apply(items.values())
    visible_ids = set(result.visible_ids)

    for item in items.values():
        item['hidden'] = item['id'] not in visible_ids

    section_categories = FoodCategory.objects.order_by('order', 'name')
    if category:
        section_categories = section_categories.filter(slug=category)

    sections = []
    for section_category in section_categories:
        section_items = sorted(
            (items[food.pk] for food in foods if section_category in food.categories.all()),
            key=lambda item: item['title'].lower(),
        )
        if not section_items:
            continue
        sections.append({
            'slug': section_category.slug,
            'name': section_category.name,
            'description': section_category.description,
            'items': section_items,
            'hidden': section_category.slug not in result.categories,
        })

    published = Q(foods__status=FoodProduct.STATUS_PUBLISH)
    filter_categories = [
        {'slug': c.slug, 'name': c.name, 'count': c.food_count, 'active': c.slug in menu_filter.categories}
        for c in FoodCategory.objects.annotate(food_count=Count('foods', filter=published, distinct=True))
    ]
    filter_tags = [
        {'slug': t.slug, 'name': t.name, 'count': t.food_count, 'active': t.slug in menu_filter.tags}
        for t in FoodTag.objects.annotate(food_count=Count('foods', filter=published, distinct=True))
    ]

    return {
        'sections': sections,
        'filter_categories': filter_categories,
        'filter_tags': filter_tags,
        'filter': menu_filter.as_dict(),
        'visible_count': result.count,
        'visible_ids': result.visible_ids,
        'visible_categories': sorted(result.categories),
        'has_items': bool(items),
        'button_text': button_text,
    }
