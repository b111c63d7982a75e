"""inventory功能测试用例：商品数量、排序方式"""

PRODUCT_COUNT = 6

# 下拉框 option value
PRODUCT_SORT = {
    "name_asc": "az",
    "name_desc": "za",
    "price_asc": "lohi",
    "price_desc": "hilo",
}

# 默认排序
DEFAULT_SORT = PRODUCT_SORT["name_asc"]

ADD_TO_CART_LABEL = "Add to cart"
REMOVE_LABEL = "Remove"
