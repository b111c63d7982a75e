import logging
import re
from decimal import Decimal

import allure
from playwright.sync_api import Page

from assertions.cart_assert import CartAssert
from config.locators import CART_LOCATORS, PRODUCT_CONTROLS, PRODUCTS_LOCATORS
from config.pages import PAGE_TITLES, URLS, url_pattern
from config.settings import TIMEOUTS
from data.models import CartLineItem, Product
from pages.base_page import BasePage, Navigable, Readable
from pages.header import Header
from utils.common_utils import exact_text, parse_money, slug, to_cents, wait_for_condition

logger = logging.getLogger(__name__)


class CartPage(Navigable, Readable, BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.header = Header(page)

        # cart 页商品
        self.cart_items = page.locator(CART_LOCATORS["cart_item"])  # 商品列表
        self.item_product_name = page.locator(PRODUCTS_LOCATORS["item_product_name"])  # 单商品名称
        self.item_product_price = page.locator(PRODUCTS_LOCATORS["item_product_price"])  # 单商品价格
        self.item_product_desc = page.locator(PRODUCTS_LOCATORS["item_product_desc"])  # 商品描述
        self.item_quantity = page.locator(CART_LOCATORS["item_quantity"])  # 商品数量
        self.remove_buttons = page.locator(CART_LOCATORS["any_remove_button"])

        self.continue_shopping_button = page.locator(CART_LOCATORS["continue"])  # continue-shopping按钮
        self.checkout_button = page.locator(CART_LOCATORS["checkout_button"])  # checkout按钮

    # ================= 页面状态 =================
    def is_on_cart_page(self) -> bool:
        return (re.search(url_pattern("cart"), self.current_url()) is not None
                and self.header.get_page_title() == PAGE_TITLES["cart"])

    def get_page_title(self) -> str:
        return self.header.get_page_title()

    # ================= 页面行为 =================
    def open_cart(self):
        self.open(URLS["cart"])
        self.wait_visible(self.checkout_button)

    @allure.step("购物车移除：{product_name}")
    def remove_product_from_cart(self, product_name: str):
        logger.info("remove from cart page: %s", product_name)
        self.click(self.control_for(PRODUCT_CONTROLS["remove"], slug(product_name)))

    def remove_all_items(self):
        # 每次都取第一个 Remove，删除后列表会重新渲染
        while self.get_count(self.remove_buttons) > 0:
            count = self.get_count(self.remove_buttons)
            self.click(self.remove_buttons.first)
            wait_for_condition(lambda: self.get_count(self.remove_buttons) < count,
                               timeout=TIMEOUTS["short"] / 1000, message="cart item was not removed")

    def continue_shopping(self):
        self.click(self.continue_shopping_button)
        self.wait_url(url_pattern("inventory"))

    @allure.step("去结算")
    def proceed_to_checkout(self):
        self.click(self.checkout_button)
        self.wait_url(url_pattern("checkout_step_one"))

    # ================= 数据获取 =================
    def get_cart_item_count(self) -> int:
        return self.get_count(self.cart_items)

    def is_cart_empty(self) -> bool:
        return self.get_cart_item_count() == 0

    def get_cart_badge_count(self) -> int:
        return self.header.get_cart_badge_count()

    def get_all_item_names(self) -> list[str]:
        return self.get_texts(self.item_product_name)

    def get_all_item_prices(self) -> list[str]:
        return self.get_texts(self.item_product_price)

    def get_all_item_quantities(self) -> list[int]:
        return [int(q) for q in self.get_texts(self.item_quantity)]

    def get_line_items(self) -> list[CartLineItem]:
        """购物车页面商品信息（只读，用于断言）"""
        items = []
        for i in range(self.cart_items.count()):
            row = self.cart_items.nth(i)
            items.append(CartLineItem(
                name=self.text(row.locator(PRODUCTS_LOCATORS["item_product_name"])),
                price=parse_money(self.text(row.locator(PRODUCTS_LOCATORS["item_product_price"]))),
                quantity=int(self.text(row.locator(CART_LOCATORS["item_quantity"]))),
                description=self.text(row.locator(PRODUCTS_LOCATORS["item_product_desc"]))))
        return items

    def _cart_item(self, product_name: str):
        return self.cart_items.filter(has=self.page.locator(PRODUCTS_LOCATORS["item_product_name"],
                                                            has_text=exact_text(product_name)))

    def is_product_in_cart(self, product_name: str) -> bool:
        return product_name in self.get_all_item_names()

    def get_product_price(self, product_name: str) -> str:
        return self.text(self._cart_item(product_name).locator(PRODUCTS_LOCATORS["item_product_price"]))

    def get_product_quantity(self, product_name: str) -> int:
        return int(self.text(self._cart_item(product_name).locator(CART_LOCATORS["item_quantity"])))

    def get_product_description(self, product_name: str) -> str:
        return self.text(self._cart_item(product_name).locator(PRODUCTS_LOCATORS["item_product_desc"]))

    def is_checkout_button_enabled(self) -> bool:
        return self.is_enabled(self.checkout_button)

    # ================= 手动计算 =================
    def calculate_total_price(self) -> Decimal:
        """页面上所有商品价格之和（测试侧计算，不是被测系统的值）"""
        return to_cents(sum((parse_money(p) for p in self.get_all_item_prices()), Decimal("0")))

    # ================= 基础验证 =================
    def verify_on_cart_page(self):
        self.wait_text(self.header.title, PAGE_TITLES["cart"])
        CartAssert.on_cart_page(self.is_on_cart_page(), self.current_url())

    def verify_item_count(self, expect_count: int):
        CartAssert.cart_item_count(self.get_cart_item_count(), expect_count)

    def verify_contains(self, product_names: list[str]):
        CartAssert.contains_products(self.get_all_item_names(), product_names)

    def verify_badge_count(self, expect_count: int):
        CartAssert.cart_badge_count(self.get_cart_badge_count(), expect_count)

    def verify_line_item(self, product: Product, quantity: int):
        """购物车单行商品：价格与测试数据一致、数量正确"""
        CartAssert.price_equal(product.price, parse_money(self.get_product_price(product.name)))
        CartAssert.quantity(self.get_product_quantity(product.name), quantity)
