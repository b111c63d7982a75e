import logging
import re

import allure
from playwright.sync_api import Page

from assertions.login_assert import LoginAssert
from config.locators import LOGIN_LOCATORS
from config.pages import URLS, login_url_pattern
from data.models import UserCredential
from pages.base_page import BasePage, Fillable, Navigable, Readable

logger = logging.getLogger(__name__)


class LoginPage(Navigable, Fillable, Readable, BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.username_input = page.locator(LOGIN_LOCATORS["username_input"])  # 用户名输入框
        self.password_input = page.locator(LOGIN_LOCATORS["password_input"])  # 密码输入框
        self.login_button = page.locator(LOGIN_LOCATORS["login_button"])  # 登录按钮
        self.error_message = page.locator(LOGIN_LOCATORS["error_msg"])  # 登录校验错误提示信息
        self.error_close_button = page.locator(LOGIN_LOCATORS["error_close_button"])
        self.login_logo = page.locator(LOGIN_LOCATORS["login_logo"])

    # ================= 页面行为 =================
    def open_login(self):
        self.open(URLS["login"])
        self.wait_visible(self.username_input)

    @allure.step("登录：{username}")
    def login(self, username: str, password: str):
        logger.info("login as %r", username)
        self.fill(self.username_input, username)
        self.fill(self.password_input, password)
        self.click(self.login_button)

    def login_as(self, user: UserCredential):
        self.login(user.username, user.password)

    def dismiss_error(self):
        self.click(self.error_close_button)
        self.wait_hidden(self.error_message)

    def clear_fields(self):
        self.clear(self.username_input)
        self.clear(self.password_input)

    # ================= 数据获取 =================
    def get_error_message(self) -> str:
        # 先等错误提示出现
        self.wait_visible(self.error_message)
        return self.text(self.error_message)

    def is_error_displayed(self) -> bool:
        return self.is_visible(self.error_message)

    def is_login_button_enabled(self) -> bool:
        return self.is_enabled(self.login_button)

    def get_logo_text(self) -> str:
        return self.text(self.login_logo)

    def get_username_placeholder(self):
        return self.attr(self.username_input, "placeholder")

    def get_password_placeholder(self):
        return self.attr(self.password_input, "placeholder")

    def is_on_login_page(self) -> bool:
        """URL 是根路径并且登录按钮可见"""
        return re.search(login_url_pattern(), self.current_url()) is not None and self.is_visible(self.login_button)

    # ========== 登录校验 ==========
    def verify_login_fail(self, expect_msg: str):
        LoginAssert.error_message(self.get_error_message(), expect_msg)
        LoginAssert.stays_on_login(self.is_on_login_page())

    def verify_error_dismissed(self):
        LoginAssert.error_hidden(self.is_error_displayed())

    def verify_elements_visible(self):
        LoginAssert.elements_visible({
            "username_input": self.is_visible(self.username_input),
            "password_input": self.is_visible(self.password_input),
            "login_button": self.is_visible(self.login_button),
            "login_logo": self.is_visible(self.login_logo),
        })

    def verify_on_login_page(self):
        self.wait_visible(self.login_button)
        LoginAssert.stays_on_login(self.is_on_login_page())
