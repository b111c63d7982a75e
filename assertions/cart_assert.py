from decimal import Decimal


class CartAssert:

    @staticmethod
    def cart_badge_count(actual: int, expect: int):
        """购物车图标显示数字"""
        assert actual == expect, f"购物车角标显示的加购商品数量错误：{actual}!={expect}"

    @staticmethod
    def cart_item_count(actual: int, expect: int):
        assert actual == expect, f"购物车页面商品数量错误：{actual}!={expect}"

    @staticmethod
    def on_cart_page(on_cart_page: bool, url: str):
        assert on_cart_page, f"当前不在购物车页面：{url}"

    @staticmethod
    def contains_products(cart_names: list, expect_names: list):
        """加购商品都在购物车页中，且没有多余商品"""
        for name in expect_names:
            assert name in cart_names, f"加购的商品{name}，在购物车页面不存在"
        assert len(cart_names) == len(expect_names), f"购物车商品{cart_names} != 加购商品{expect_names}"

    @staticmethod
    def quantity(actual: int, expect: int):
        assert actual == expect, f"商品数量错误：{actual}!={expect}"

    @staticmethod
    def price_equal(expect: Decimal, actual: Decimal):
        assert expect == actual, f"预期价格：{expect}!={actual}"
