import re
from decimal import Decimal
from itertools import groupby

from config.pages import PAGE_TITLES, URLS


class ProductsAssert:

    @staticmethod
    def on_products_page(url: str, title: str):
        assert URLS["inventory"] in url, f"当前不在商品列表页：{url}"
        assert title == PAGE_TITLES["inventory"], f"商品列表页标题错误：{title}"

    @staticmethod
    def product_count(actual_count: int, expect_count: int):
        assert actual_count == expect_count, f"期望商品数量：{expect_count}，实际商品数量：{actual_count}"

    @staticmethod
    def column_not_empty(values: list):
        assert values, "商品信息list为空"
        for value in values:
            assert value and value.strip(), "存在商品信息为空"

    @staticmethod
    def product_price_format(prices: list[str]):
        assert prices, "商品价格list为空"
        for price in prices:
            assert re.match(r"^\$\d+(\.\d{2})$", price), f"商品价格格式错误：{price}"

    @staticmethod
    def names_sorted_like(actual: list[str], products: list, reverse: bool):
        """页面商品顺序 == 测试数据按名称排序后的顺序"""
        expect = [p.name for p in sorted(products, key=lambda p: p.name, reverse=reverse)]
        assert actual == expect, f"商品名称未按{'倒序' if reverse else '正序'}排列：{actual}，预期：{expect}"

    @staticmethod
    def prices_sorted_like(actual: list[tuple[Decimal, str]], products: list, reverse: bool):
        """
        页面 (价格, 名称) 序列 == 测试数据按价格排序后的序列
        价格相同的商品先后顺序由被测系统决定：同价位只比较名称集合
        """
        expect = _price_groups(sorted(((p.price, p.name) for p in products), key=lambda pair: pair[0],
                                      reverse=reverse))
        actual_groups = _price_groups(actual)
        assert actual_groups == expect, \
            f"商品未按价格{'倒序' if reverse else '正序'}排列：{actual_groups}，预期：{expect}"

    @staticmethod
    def in_cart_state(product_name: str, actual: bool, expect: bool):
        state = "已加购" if expect else "未加购"
        assert actual == expect, f"商品{product_name}应为{state}状态"

    @staticmethod
    def button_label(product_name: str, actual: str, expect: str):
        assert actual == expect, f"商品{product_name}按钮文字：{actual}!={expect}"


def _price_groups(pairs) -> list[tuple[Decimal, set]]:
    """[(价格, 名称), ...] -> 相邻同价位合并为 [(价格, {名称, ...}), ...]"""
    return [(price, {name for _, name in group}) for price, group in groupby(pairs, key=lambda pair: pair[0])]
