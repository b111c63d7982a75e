import logging
import re
from decimal import Decimal

import allure
from playwright.sync_api import Page

from assertions.checkout_assert import CheckOutAssert
from config.locators import CART_LOCATORS, CHECKOUT_LOCATORS, PRODUCTS_LOCATORS
from data.models import CartLineItem, CheckoutInfo, OrderTotals
from pages.base_page import BasePage, Fillable, Navigable, Readable
from pages.checkout_flow import (BACK_HOME, CANCEL, CONTINUE, FINISH, CheckoutState, Exit, detect_state,
                                 next_state)
from pages.header import Header
from utils.common_utils import parse_money, to_cents

logger = logging.getLogger(__name__)


class CheckoutPage(Navigable, Fillable, Readable, BasePage):
    def __init__(self, page: Page):
        super().__init__(page)
        self.header = Header(page)
        #  step one 收货人信息
        self.firstName_input = page.locator(CHECKOUT_LOCATORS["firstName_input"])  # firstName输入框
        self.lastName_input = page.locator(CHECKOUT_LOCATORS["lastName_input"])  # lastName输入框
        self.postalCode_input = page.locator(CHECKOUT_LOCATORS["postalCode_input"])  # postalCode输入框
        self.error_message = page.locator(CHECKOUT_LOCATORS["error_msg"])  # 收货人未填写点击下一步错误提示文案
        self.error_close_button = page.locator(CHECKOUT_LOCATORS["error_close_button"])
        self.cancel_button = page.locator(CHECKOUT_LOCATORS["cancel_button"])  # 取消按钮
        self.continue_button = page.locator(CHECKOUT_LOCATORS["continue_button"])  # 继续按钮

        #  step two 商品信息
        self.cart_items = page.locator(CHECKOUT_LOCATORS["cart_item"])
        self.item_product_name = page.locator(PRODUCTS_LOCATORS["item_product_name"])
        # 订单价格
        self.payment_information = page.locator(CHECKOUT_LOCATORS["payment_information"])  # 支付信息value
        self.shipping_information = page.locator(CHECKOUT_LOCATORS["shipping_information"])  # 运费信息value
        self.item_total = page.locator(CHECKOUT_LOCATORS["subtotal_label"])  # 商品总价格
        self.tax = page.locator(CHECKOUT_LOCATORS["tax_label"])  # 税
        self.total = page.locator(CHECKOUT_LOCATORS["total_label"])  # 订单价格
        self.finish_button = page.locator(CHECKOUT_LOCATORS["finish_button"])  # 完成按钮

        #  complete
        self.complete_header = page.locator(CHECKOUT_LOCATORS["complete_header"])
        self.complete_text = page.locator(CHECKOUT_LOCATORS["complete_text"])
        self.pony_express = page.locator(CHECKOUT_LOCATORS["pony_express"])
        self.back_home_button = page.locator(CHECKOUT_LOCATORS["back_home_button"])

    # ========== 流程状态 ==========
    def current_state(self):
        """当前处于哪个 checkout 状态（URL + 标题），不在流程中返回 None"""
        title = self.header.get_page_title() if self.is_visible(self.header.title) else ""
        return detect_state(self.current_url(), title)

    def is_on(self, state: CheckoutState) -> bool:
        return self.current_state() is state

    def expect_state(self, state: CheckoutState):
        """等待页面到达 state：URL 和标题都要出现，超时抛 WaitTimeoutError"""
        self.wait_url(re.escape(state.url))
        self.wait_text(self.header.title, state.title)

    def _transition(self, action: str, button):
        self.wait_visible(self.header.title)
        state = self.current_state()
        CheckOutAssert.in_checkout_flow(state, self.current_url())
        target = next_state(state, action)
        logger.info("checkout %s: %s -> %s", action, state.name, target.name)
        self.click(button)
        if isinstance(target, CheckoutState):
            self.expect_state(target)
        else:
            self.wait_url(re.escape(target.url))
        return target

    def is_on_checkout_info_page(self) -> bool:
        return self.is_on(CheckoutState.INFO_ENTRY)

    def is_on_checkout_overview_page(self) -> bool:
        return self.is_on(CheckoutState.OVERVIEW)

    def is_on_checkout_complete_page(self) -> bool:
        return self.is_on(CheckoutState.COMPLETE)

    # ========== checkout-step-one ==========
    @allure.step("填写收货人信息")
    def fill_checkout_information(self, first_name: str, last_name: str, postal_code: str):
        self.fill(self.firstName_input, first_name)
        self.fill(self.lastName_input, last_name)
        self.fill(self.postalCode_input, postal_code)

    def fill_info(self, info: CheckoutInfo):
        self.fill_checkout_information(info.first_name, info.last_name, info.postal_code)

    def click_continue(self):
        """校验失败时停留在 step one，所以这里不走状态跳转"""
        self.click(self.continue_button)

    def continue_to_overview(self):
        return self._transition(CONTINUE, self.continue_button)

    def complete_checkout_information(self, info: CheckoutInfo):
        self.fill_info(info)
        return self.continue_to_overview()

    def cancel(self):
        """step one -> 购物车；step two -> 商品列表"""
        return self._transition(CANCEL, self.cancel_button)

    def get_error_message(self) -> str:
        self.wait_visible(self.error_message)
        return self.text(self.error_message)

    def is_error_displayed(self) -> bool:
        return self.is_visible(self.error_message)

    def dismiss_error(self):
        self.click(self.error_close_button)
        self.wait_hidden(self.error_message)

    def clear_checkout_fields(self):
        self.clear(self.firstName_input)
        self.clear(self.lastName_input)
        self.clear(self.postalCode_input)

    # ========== checkout-step-two ==========
    def get_overview_item_count(self) -> int:
        return self.get_count(self.cart_items)

    def get_overview_product_names(self) -> list[str]:
        return self.get_texts(self.item_product_name)

    def get_overview_line_items(self) -> list[CartLineItem]:
        self.wait_visible(self.cart_items.first)
        items = []
        for i in range(self.cart_items.count()):
            row = self.cart_items.nth(i)
            items.append(CartLineItem(
                name=self.text(row.locator(PRODUCTS_LOCATORS["item_product_name"])),
                price=parse_money(self.text(row.locator(PRODUCTS_LOCATORS["item_product_price"]))),
                quantity=int(self.text(row.locator(CART_LOCATORS["item_quantity"]))),
                description=self.text(row.locator(PRODUCTS_LOCATORS["item_product_desc"]))))
        return items

    def get_payment_information(self) -> str:
        return self.text(self.payment_information)

    def get_shipping_information(self) -> str:
        return self.text(self.shipping_information)

    def get_item_total_label(self) -> str:
        return self.text(self.item_total)

    def get_tax_label(self) -> str:
        return self.text(self.tax)

    def get_total_label(self) -> str:
        return self.text(self.total)

    def get_order_totals(self) -> OrderTotals:
        return OrderTotals(subtotal=parse_money(self.get_item_total_label()),
                           tax=parse_money(self.get_tax_label()),
                           total=parse_money(self.get_total_label()))

    def is_total_calculation_correct(self) -> bool:
        return self.get_order_totals().is_consistent()

    # 手动计算：显式指定 sum 初始值
    def sum_products_price(self) -> Decimal:
        return to_cents(sum((item.price for item in self.get_overview_line_items()), Decimal("0")))

    @allure.step("提交订单")
    def finish(self):
        return self._transition(FINISH, self.finish_button)

    # ========== checkout-complete ==========
    def get_complete_header(self) -> str:
        return self.text(self.complete_header)

    def get_complete_text(self) -> str:
        return self.text(self.complete_text)

    def is_success_image_displayed(self) -> bool:
        return self.is_visible(self.pony_express)

    def back_home(self) -> Exit:
        return self._transition(BACK_HOME, self.back_home_button)

    def is_order_completed(self, finish_message: str) -> bool:
        return self.is_on_checkout_complete_page() and finish_message in self.get_complete_header()

    @allure.step("完成整个 checkout 流程")
    def complete_checkout_flow(self, info: CheckoutInfo):
        self.complete_checkout_information(info)
        self.finish()
        self.wait_visible(self.complete_header)

    # ========== checkout-step-one 基本验证 ==========
    def verify_error_message(self, expect_error_msg: str):
        CheckOutAssert.error_message(self.get_error_message(), expect_error_msg)

    # ========== checkout-step-two 基本验证 ==========
    def verify_order_products_match(self, expected: list[CartLineItem]):
        order_products = self.get_overview_line_items()
        CheckOutAssert.product_count(expected, order_products)
        CheckOutAssert.product_detail_match(expected, order_products)

    def verify_order_base_info(self):
        CheckOutAssert.not_empty(self.get_payment_information())
        CheckOutAssert.not_empty(self.get_shipping_information())
        # 验证 item total / tax / total 格式
        CheckOutAssert.price_format(self.get_item_total_label())
        CheckOutAssert.price_format(self.get_tax_label())
        CheckOutAssert.price_format(self.get_total_label())

        totals = self.get_order_totals()
        CheckOutAssert.positive(totals.subtotal, "item total")
        CheckOutAssert.positive(totals.total, "total")
        # 验证商品总价格
        CheckOutAssert.price_equal(self.sum_products_price(), totals.subtotal)
        # 验证订单总价格
        CheckOutAssert.order_totals(totals)

    # ========== 提交订单页面 ==========
    def verify_submit_order(self, finish_message: str):
        CheckOutAssert.tips_message(self.get_complete_header(), finish_message)
