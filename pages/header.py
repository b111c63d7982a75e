import logging

import allure
from playwright.sync_api import Page

from config.locators import HEADER_LOCATORS
from config.pages import PAGE_TITLES, login_url_pattern, url_pattern
from pages.base_page import BasePage, Navigable, Readable

logger = logging.getLogger(__name__)


class Header(Navigable, Readable, BasePage):
    """登录后各页面共用的顶部区域：标题、购物车、侧边菜单"""

    def __init__(self, page: Page):
        super().__init__(page)
        self.title = page.locator(HEADER_LOCATORS["title"])
        self.shopping_cart_link = page.locator(HEADER_LOCATORS["shopping_cart_link"])
        self.shopping_cart_badge = page.locator(HEADER_LOCATORS["shopping_cart_badge"])

        self.menu_button = page.locator(HEADER_LOCATORS["menu_button"])
        self.all_items_link = page.locator(HEADER_LOCATORS["all_items_link"])
        self.about_link = page.locator(HEADER_LOCATORS["about_link"])
        self.logout_link = page.locator(HEADER_LOCATORS["logout_link"])
        self.reset_app_link = page.locator(HEADER_LOCATORS["reset_app_link"])

    def get_page_title(self) -> str:
        return self.text(self.title)

    def get_cart_badge_count(self) -> int:
        """购物车角标数字，没有角标即为 0"""
        if not self.is_visible(self.shopping_cart_badge):
            return 0
        return int(self.text(self.shopping_cart_badge))

    @allure.step("进入购物车")
    def go_to_cart(self):
        self.click(self.shopping_cart_link)
        self.wait_url(url_pattern("cart"))
        # URL 先变，列表后渲染
        self.wait_text(self.title, PAGE_TITLES["cart"])

    def open_menu(self):
        self.click(self.menu_button)
        # 等待菜单动画结束
        self.wait_visible(self.logout_link)

    @allure.step("退出登录")
    def logout(self):
        self.open_menu()
        self.click(self.logout_link)
        self.wait_url(login_url_pattern())
        logger.info("logged out")

    @allure.step("重置应用状态")
    def reset_app_state(self):
        self.open_menu()
        self.click(self.reset_app_link)
        self.wait_hidden(self.shopping_cart_badge)
