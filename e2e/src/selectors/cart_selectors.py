# e2e/src/selectors/cart_selectors.py

CART_ITEM_SELECTOR = ".cart_item"
CHECKOUT_BUTTON_SELECTOR = "#checkout"
