import re
from decimal import Decimal


class CheckOutAssert:

    @staticmethod
    def error_message(actual_msg: str, expect_msg: str):
        """收件人校验提示，逐字一致"""
        assert actual_msg == expect_msg, f"预期提示信息：{expect_msg}，实际提示信息：{actual_msg}"

    @staticmethod
    def tips_message(actual_msg: str, expect_msg: str):
        """完成页提示只要求包含"""
        assert expect_msg in actual_msg, f"预期提示信息：{expect_msg}，不存在于{actual_msg}"

    @staticmethod
    def in_checkout_flow(state, url: str):
        assert state is not None, f"当前页面不在 checkout 流程中：{url}"

    @staticmethod
    def not_empty(column: str):
        assert column.strip() != "", f"{column}为空！"

    @staticmethod
    def price_format(price: str):
        """只关心price格式，不关心具体 label 文案
           UI 改文案测试不炸"""
        assert re.match(r"^[A-Za-z ]+: \$\d+(\.\d{2})$", price), f"价格格式错误：{price}"

    @staticmethod
    def price_equal(expect: Decimal, actual: Decimal):
        assert expect == actual, f"预期价格：{expect}!={actual}"

    @staticmethod
    def positive(value: Decimal, name: str):
        assert value > 0, f"{name}必须大于 0：{value}"

    @staticmethod
    def order_totals(totals):
        """total == subtotal + tax（两位小数）"""
        assert totals.is_consistent(), f"实际总金额{totals.total}!=预期总金额{totals.expected_total()}"

    @staticmethod
    def product_count(added_products: list, checkout_products: list):
        """加购商品=结算页商品？"""
        assert len(
            added_products) == len(
            checkout_products), f"已加购商品数量{len(added_products)} !=结算页面商品数量 {len(checkout_products)}"

    @staticmethod
    def product_detail_match(added_products: list, checkout_products: list):
        """加购商品与结算页商品一致性对比"""
        for added in added_products:
            assert added in checkout_products, f"加购的商品{added}，在结算页面不存在"

        for item in checkout_products:
            assert item in added_products, f"结算页面的商品{item}，不在加购商品列表中"
