from django.utils.translation import gettext_lazy as _

ALLERGEN_LABELS = {
    'gluten': _('Gluten (wheat, rye, barley, oats, spelt)'),
    'crustaceans': _('Crustaceans'),
    'eggs': _('Eggs'),
    'fish': _('Fish'),
    'peanuts': _('Peanuts'),
    'soy': _('Soy'),
    'milk': _('Milk (including lactose)'),
    'nuts': _('Nuts (almond, hazelnut, walnut, etc.)'),
    'celery': _('Celery'),
    'mustard': _('Mustard'),
    'sesame': _('Sesame seeds'),
    'sulfites': _('Sulphites (E220-E228)'),
    'lupin': _('Lupin'),
    'molluscs': _('Molluscs (oysters, mussels, etc.)'),
}

SPICY_CHOICES = [
    (0, _('Not spicy')),
    (1, _('Mild')),
    (2, _('Spicy')),
    (3, _('Extra spicy')),
    (4, _('Fiery')),
]

SPICY_LABELS = dict(SPICY_CHOICES)

DIET_LABELS = {
    'halal': _('Halal'),
    'vegetarian': _('Vegetarian'),
    'vegan': _('Vegan'),
}

DIET_EMOJI = {
    'halal': '🕌',
    'vegetarian': '🥕',
    'vegan': '🌱',
    'spicy': '🌶️',
}
