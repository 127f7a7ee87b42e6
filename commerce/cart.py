import logging
import uuid
from decimal import Decimal

from core.options import takeaway_setting

from .models import Cart, CartItem, Product

logger = logging.getLogger(__name__)


def get_cart(request):
    """Cart bound to the request's session, created on first use."""
    if not request.session.session_key:
        request.session.save()
        # an empty session only gets its cookie when marked modified
        request.session.modified = True
    cart, _ = Cart.objects.get_or_create(session_key=request.session.session_key)
    return cart


def add_to_cart(cart, product_id, quantity, item_data=None):
    """Add a line to ``cart``. Returns the line key, or ``None`` when refused."""
    if quantity < 1:
        return None

    product = Product.objects.filter(pk=product_id).first()
    if product is None:
        logger.error(f"Cannot add missing product #{product_id} to cart {cart.pk}")
        return None

    item_data = dict(item_data or {})
    line_key = item_data.get('unique_key') or make_line_key()

    item = CartItem.objects.create(
        cart=cart,
        product=product,
        quantity=quantity,
        line_key=line_key,
        data=item_data,
    )
    return item.line_key


def make_line_key():
    return uuid.uuid4().hex


def format_price(amount):
    amount = Decimal(str(amount)).quantize(Decimal('0.01'))
    return f"{takeaway_setting('CURRENCY_SYMBOL')}{amount}"
