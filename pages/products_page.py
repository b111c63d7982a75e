import logging
import re
from decimal import Decimal

import allure
from playwright.sync_api import Page

from assertions.cart_assert import CartAssert
from assertions.products_assert import ProductsAssert
from config.locators import PRODUCT_CONTROLS, PRODUCTS_LOCATORS
from config.pages import PAGE_TITLES, URLS, url_pattern
from config.settings import TIMEOUTS
from data.models import Product
from pages.base_page import BasePage, Fillable, Navigable, Readable
from pages.header import Header
from utils.common_utils import exact_text, parse_money, slug

logger = logging.getLogger(__name__)


class ProductsPage(Navigable, Fillable, Readable, BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.header = Header(page)

        # 商品列表
        self.item_product = page.locator(PRODUCTS_LOCATORS["item_product"])

        # 商品明细
        self.item_product_name = page.locator(PRODUCTS_LOCATORS["item_product_name"])
        self.item_product_price = page.locator(PRODUCTS_LOCATORS["item_product_price"])
        self.item_product_desc = page.locator(PRODUCTS_LOCATORS["item_product_desc"])
        self.item_product_img = page.locator(PRODUCTS_LOCATORS["item_product_img"])

        # 排序下拉框
        self.product_sort_type = page.locator(PRODUCTS_LOCATORS["product_sort_type"])

    # ================= 页面状态 =================
    def is_on_products_page(self) -> bool:
        """URL 和标题都要匹配，只看 URL 不能说明页面已渲染完成"""
        return (re.search(url_pattern("inventory"), self.current_url()) is not None
                and self.header.get_page_title() == PAGE_TITLES["inventory"])

    def get_page_title(self) -> str:
        return self.header.get_page_title()

    # ================= 页面行为 =================
    def open_inventory(self):
        self.open(URLS["inventory"])
        self.wait_visible(self.item_product.first)

    @allure.step("排序：{option}")
    def sort_by(self, option: str):
        """option 为下拉框 value：az / za / lohi / hilo"""
        self.select_option(self.product_sort_type, option)

    def get_current_sort_option(self) -> str:
        return self.input_value(self.product_sort_type)

    def add_button(self, product_name: str):
        return self.control_for(PRODUCT_CONTROLS["add"], slug(product_name))

    def remove_button(self, product_name: str):
        return self.control_for(PRODUCT_CONTROLS["remove"], slug(product_name))

    @allure.step("加购：{product_name}")
    def add_product_to_cart(self, product_name: str):
        logger.info("add to cart: %s", product_name)
        self.click(self.add_button(product_name))

    @allure.step("移除：{product_name}")
    def remove_product_from_cart(self, product_name: str):
        logger.info("remove from cart: %s", product_name)
        self.click(self.remove_button(product_name))

    def add_products_to_cart(self, products: list[Product]):
        for product in products:
            self.add_product_to_cart(product.name)

    def go_to_cart(self):
        self.header.go_to_cart()

    def open_product_detail(self, product_name: str):
        self.click(self.item_product_name.filter(has_text=exact_text(product_name)))
        self.wait_url(url_pattern("inventory_item"))

    def open_menu(self):
        self.header.open_menu()

    def logout(self):
        self.header.logout()

    def reset_app_state(self):
        self.header.reset_app_state()

    # ================= 数据获取 =================
    def get_product_count(self) -> int:
        return self.get_count(self.item_product)

    def get_product_names(self) -> list[str]:
        return self.get_texts(self.item_product_name)

    def get_product_description(self) -> list[str]:
        return self.get_texts(self.item_product_desc)

    def get_product_imgs(self) -> list[str]:
        return self.get_attrs(self.item_product_img, "src")

    def get_product_prices(self) -> list[str]:
        return self.get_texts(self.item_product_price)

    def get_product_prices_as_number(self) -> list[Decimal]:
        return [parse_money(p) for p in self.get_product_prices()]

    def get_price_name_pairs(self) -> list[tuple[Decimal, str]]:
        """按页面顺序的 (价格, 名称)"""
        return list(zip(self.get_product_prices_as_number(), self.get_product_names()))

    def _product_item(self, product_name: str):
        """按名称定位商品卡片"""
        return self.item_product.filter(has=self.page.locator(PRODUCTS_LOCATORS["item_product_name"],
                                                              has_text=exact_text(product_name)))

    def get_product_price(self, product_name: str) -> str:
        return self.text(self._product_item(product_name).locator(PRODUCTS_LOCATORS["item_product_price"]))

    def get_product_desc(self, product_name: str) -> str:
        return self.text(self._product_item(product_name).locator(PRODUCTS_LOCATORS["item_product_desc"]))

    def is_product_in_cart(self, product_name: str) -> bool:
        """Remove 按钮可见即已加购"""
        return self.is_visible(self.remove_button(product_name))

    def get_product_button_label(self, product_name: str) -> str:
        add = self.add_button(product_name)
        if self.is_visible(add):
            return self.text(add)
        return self.text(self.remove_button(product_name))

    def get_cart_item_count(self) -> int:
        return self.header.get_cart_badge_count()

    def are_all_product_images_visible(self) -> bool:
        images = self.item_product_img
        return all(images.nth(i).is_visible() for i in range(images.count()))

    # ========== 基础校验 ==========
    def verify_on_products_page(self):
        self.wait_text(self.header.title, PAGE_TITLES["inventory"], timeout=TIMEOUTS["navigation"])
        ProductsAssert.on_products_page(self.current_url(), self.get_page_title())

    def verify_base_info(self, expect_count: int):
        ProductsAssert.product_count(self.get_product_count(), expect_count)  # 商品数量一致
        ProductsAssert.column_not_empty(self.get_product_names())  # 商品名称非空
        ProductsAssert.column_not_empty(self.get_product_description())  # 商品描述非空
        ProductsAssert.column_not_empty(self.get_product_imgs())  # 商品图片非空
        ProductsAssert.product_price_format(self.get_product_prices())  # 商品价格格式

    def verify_sorted_names(self, expected: list[Product], reverse: bool = False):
        ProductsAssert.names_sorted_like(self.get_product_names(), expected, reverse)

    def verify_sorted_prices(self, expected: list[Product], reverse: bool = False):
        ProductsAssert.prices_sorted_like(self.get_price_name_pairs(), expected, reverse)

    def verify_in_cart(self, product_name: str, in_cart: bool):
        ProductsAssert.in_cart_state(product_name, self.is_product_in_cart(product_name), in_cart)

    def verify_button_label(self, product_name: str, expect_label: str):
        ProductsAssert.button_label(product_name, self.get_product_button_label(product_name), expect_label)

    def verify_cart_badge(self, expect_count: int):
        CartAssert.cart_badge_count(self.get_cart_item_count(), expect_count)
