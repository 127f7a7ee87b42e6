from django import forms

MAX_QUANTITY = 999


class AddToCartForm(forms.Form):
    food_id = forms.IntegerField(min_value=1)
    quantity = forms.IntegerField(min_value=1, max_value=MAX_QUANTITY)
