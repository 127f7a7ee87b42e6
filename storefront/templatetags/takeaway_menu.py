from django import template
from django.urls import reverse

from storefront.filtering import MenuFilter
from storefront.menu import ADD_TO_CART_ACTION, build_menu
from storefront.nonce import create_nonce

register = template.Library()


@register.inclusion_tag('storefront/takeaway_menu.html', takes_context=True)
def takeaway_menu(context, category='', menu_filter=None):
    """Render the takeaway menu, optionally limited to one category slug

    Usage: {% takeaway_menu %} or {% takeaway_menu category="pizza" %}
    """
    request = context.get('request')
    menu = build_menu(category=category or None, menu_filter=menu_filter or MenuFilter())
    menu['ajax_url'] = reverse('storefront:add-to-cart')
    menu['items_url'] = reverse('storefront:menu-items')
    menu['nonce'] = create_nonce(request, ADD_TO_CART_ACTION) if request is not None else ''
    menu['category'] = category
    return menu
