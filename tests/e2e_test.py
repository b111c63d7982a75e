import allure
import pytest

from data.checkout_data import FINISH_PAGE_MESSAGE
from pages.cart_page import CartPage
from pages.checkout_flow import CheckoutState, Exit
from pages.checkout_page import CheckoutPage
from pages.login_page import LoginPage
from pages.products_page import ProductsPage
from utils.test_data import get_checkout_info, get_product, get_user


@allure.feature("E2E")
@pytest.mark.ui
class TestPurchaseFlow:

    def test_standard_user_purchase(self, page):
        """登录 -> 加购 -> 购物车 -> 填写信息 -> 确认订单 -> 完成 -> 回到首页，购物车清空"""
        backpack = get_product("backpack")

        with allure.step("UI 登录"):
            login_page = LoginPage(page)
            login_page.open_login()
            login_page.login_as(get_user("standard"))
            products_page = ProductsPage(page)
            products_page.verify_on_products_page()

        with allure.step("加购并进入购物车"):
            products_page.add_product_to_cart(backpack.name)
            products_page.go_to_cart()
            cart_page = CartPage(page)
            cart_page.verify_item_count(1)
            cart_page.verify_contains([backpack.name])
            cart_page.proceed_to_checkout()

        with allure.step("填写收货人信息"):
            check_out_page = CheckoutPage(page)
            assert check_out_page.complete_checkout_information(
                get_checkout_info("valid")) is CheckoutState.OVERVIEW

        with allure.step("确认订单"):
            assert check_out_page.get_overview_item_count() == 1
            check_out_page.verify_order_base_info()
            assert check_out_page.get_order_totals().subtotal == backpack.price
            assert check_out_page.finish() is CheckoutState.COMPLETE

        with allure.step("完成页"):
            check_out_page.verify_submit_order(FINISH_PAGE_MESSAGE)
            assert check_out_page.back_home() is Exit.PRODUCTS
            products_page.verify_on_products_page()
            assert products_page.get_cart_item_count() == 0
