# e2e/src/selectors/inventory_selectors.py

INVENTORY_LIST_SELECTOR = ".inventory_list"
INVENTORY_ITEM_SELECTOR = ".inventory_item"
INVENTORY_ITEM_NAME_SELECTOR = ".inventory_item_name"

# 商品ごとのボタンは slug で組み立てる（例: sauce-labs-backpack）
ADD_TO_CART_ID_PREFIX = "add-to-cart-"
REMOVE_ID_PREFIX = "remove-"

# ヘッダーのカートリンク（バッジの数字はこの中に出る）
CART_LINK_SELECTOR = ".shopping_cart_link"


def add_to_cart_selector(product: str) -> str:
    return f"#{ADD_TO_CART_ID_PREFIX}{product}"


def remove_selector(product: str) -> str:
    return f"#{REMOVE_ID_PREFIX}{product}"
