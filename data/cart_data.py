"""cart功能测试用例：加购商品（测试数据 key）"""

SINGLE_PRODUCT = "backpack"

MULTIPLE_PRODUCTS = ["backpack", "bikeLight", "boltTshirt"]

# 先加购 FIRST_PRODUCTS，继续购物后再加购 SECOND_PRODUCTS
FIRST_PRODUCTS = ["backpack", "bikeLight"]
SECOND_PRODUCTS = ["onesie"]

# 加购后删除的商品
REMOVE_PRODUCT = "bikeLight"

CART_ITEM_QUANTITY = 1
