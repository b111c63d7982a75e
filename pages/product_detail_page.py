from decimal import Decimal

from playwright.sync_api import Page

from config.locators import PRODUCT_DETAIL_LOCATORS
from config.pages import PAGE_TITLES, url_pattern
from pages.base_page import BasePage, Navigable, Readable
from pages.header import Header
from utils.common_utils import parse_money


class ProductDetailPage(Navigable, Readable, BasePage):
    """inventory-item.html?id=N 单商品详情"""

    def __init__(self, page: Page):
        super().__init__(page)
        self.header = Header(page)
        self.name = page.locator(PRODUCT_DETAIL_LOCATORS["name"])
        self.price = page.locator(PRODUCT_DETAIL_LOCATORS["price"])
        self.desc = page.locator(PRODUCT_DETAIL_LOCATORS["desc"])
        self.add_button = page.locator(PRODUCT_DETAIL_LOCATORS["add_button"])
        self.remove_button = page.locator(PRODUCT_DETAIL_LOCATORS["remove_button"])
        self.back_button = page.locator(PRODUCT_DETAIL_LOCATORS["back_button"])

    def get_name(self) -> str:
        return self.text(self.name)

    def get_price(self) -> Decimal:
        return parse_money(self.text(self.price))

    def get_description(self) -> str:
        return self.text(self.desc)

    def add_to_cart(self):
        self.click(self.add_button)

    def remove_from_cart(self):
        self.click(self.remove_button)

    def is_in_cart(self) -> bool:
        return self.is_visible(self.remove_button)

    def back_to_products(self):
        self.click(self.back_button)
        self.wait_url(url_pattern("inventory"))
        self.wait_text(self.header.title, PAGE_TITLES["inventory"])
