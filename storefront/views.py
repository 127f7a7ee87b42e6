import logging

from django.http import JsonResponse
from django.shortcuts import render
from django.urls import reverse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from commerce.cart import add_to_cart as add_line_to_cart, format_price, get_cart, make_line_key
from commerce.virtual import ensure_virtual_product
from core.options import is_commerce_active
from foods.models import FoodProduct

from .filtering import MenuFilter
from .forms import AddToCartForm
from .menu import ADD_TO_CART_ACTION, build_menu
from .nonce import create_nonce, verify_nonce

logger = logging.getLogger(__name__)


def json_success(data, status=200):
    return JsonResponse({'success': True, 'data': data}, status=status)


def json_error(message, status=200):
    return JsonResponse({'success': False, 'data': message}, status=status)


@require_GET
def menu_page(request):
    """Page holding the takeaway menu, filters come from the query string"""
    context = {
        'category': request.GET.get('only', ''),
        'menu_filter': MenuFilter.from_query(request.GET),
    }
    return render(request, 'storefront/menu_page.html', context)


@require_GET
def menu_items(request):
    """Menu as JSON so the page can re-render after a search or filter change"""
    menu_filter = MenuFilter.from_query(request.GET)
    menu = build_menu(category=request.GET.get('only') or None, menu_filter=menu_filter)
    menu['ajax_url'] = reverse('storefront:add-to-cart')
    menu['nonce'] = create_nonce(request, ADD_TO_CART_ACTION)
    return JsonResponse(menu)


@csrf_exempt
@require_POST
def add_to_cart(request):
    """AJAX action yoco_add_to_cart: put a food item in the visitor's cart

    The session bound nonce stands in for the CSRF token, so the menu page
    does not need to render one.
    """
    if not verify_nonce(request, request.POST.get('nonce'), ADD_TO_CART_ACTION):
        logger.warning("Rejected add to cart with an invalid nonce")
        return json_error("Security check failed", status=403)

    if not is_commerce_active():
        return json_error("Commerce integration is not active")

    form = AddToCartForm(request.POST)
    if not form.is_valid():
        return json_error("Invalid data")

    food_id = form.cleaned_data['food_id']
    quantity = form.cleaned_data['quantity']

    food = FoodProduct.objects.filter(pk=food_id).first()
    if food is None:
        return json_error("Product not found")

    if not food.has_valid_price:
        return json_error("Product has no valid price")

    virtual_product_id = ensure_virtual_product()
    if not virtual_product_id:
        return json_error("Could not create virtual product")

    item_data = {
        'yoco_food_product': True,
        'yoco_food_id': food.pk,
        'yoco_food_title': food.title,
        'yoco_food_price': str(food.price),
        'yoco_food_image': food.image_url,
        'yoco_food_description': food.excerpt,
        'yoco_is_virtual': True,
        'unique_key': make_line_key(),
    }

    cart = get_cart(request)
    line_key = add_line_to_cart(cart, virtual_product_id, quantity, item_data)
    if not line_key:
        logger.error(f"Could not add food #{food.pk} to cart {cart.pk}")
        return json_error("Could not add product to cart")

    logger.info(f"Added {quantity}x food #{food.pk} to cart {cart.pk}")
    return json_success({
        'message': "Product added to cart",
        'cart_count': cart.contents_count(),
        'cart_total': format_price(cart.total()),
    })
