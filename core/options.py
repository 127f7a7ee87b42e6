"""Site options: named JSON values shared by the takeaway apps."""
import logging

from django.conf import settings
from django.utils.translation import gettext as _

from .models import SiteOption

logger = logging.getLogger(__name__)

ICONS = 'yoco_icons'
ORDER_BUTTON_TEXT = 'yoco_order_button_text'
DEFAULT_IMAGE = 'yoco_default_image'
VIRTUAL_PRODUCT_ID = 'yoco_virtual_product_id'
PLACEHOLDER_PRODUCT_ID = 'yoco_wc_placeholder_product'

ICON_KEYS = ('halal', 'vegetarian', 'vegan', 'spicy')


def get_option(name, default=None):
    try:
        return SiteOption.objects.get(name=name).value
    except SiteOption.DoesNotExist:
        return default


def update_option(name, value):
    option, _created = SiteOption.objects.update_or_create(name=name, defaults={'value': value})
    return option.value


def delete_option(name):
    deleted, _rows = SiteOption.objects.filter(name=name).delete()
    return bool(deleted)


def get_icons():
    icons = get_option(ICONS) or {}
    return {key: icons.get(key, '') for key in ICON_KEYS}


def get_order_button_text():
    return get_option(ORDER_BUTTON_TEXT) or _('Order')


def set_default_options():
    """Fill in options that have never been saved."""
    if not get_option(ICONS):
        update_option(ICONS, {key: '' for key in ICON_KEYS})

    if not get_option(ORDER_BUTTON_TEXT):
        update_option(ORDER_BUTTON_TEXT, _('Order'))


def takeaway_setting(name):
    return settings.TAKEAWAY[name]


def is_commerce_active():
    """The commerce integration is installed and switched on."""
    from django.apps import apps

    return apps.is_installed('commerce') and bool(takeaway_setting('COMMERCE_ENABLED'))
