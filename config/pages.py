import os
import re

# 运行环境：ENV=prod python -m pytest
ENV = os.getenv("ENV", "prod")

BASE_URLS = {
    "prod": "https://www.saucedemo.com",
    "local": "http://localhost:3000",
}

BASE_URL = os.getenv("BASE_URL", BASE_URLS.get(ENV, BASE_URLS["prod"]))

# 页面路径（相对 BASE_URL，context 设置了 base_url）
URLS = {
    "login": "/",
    "inventory": "/inventory.html",
    "inventory_item": "/inventory-item.html",
    "cart": "/cart.html",
    "checkout_step_one": "/checkout-step-one.html",
    "checkout_step_two": "/checkout-step-two.html",
    "checkout_complete": "/checkout-complete.html",
}

# 页面标题 .title
PAGE_TITLES = {
    "inventory": "Products",
    "cart": "Your Cart",
    "checkout_step_one": "Checkout: Your Information",
    "checkout_step_two": "Checkout: Overview",
    "checkout_complete": "Checkout: Complete!",
}


def url_pattern(name: str) -> str:
    """wait_url 用的正则片段，如 r"/cart\\.html" """
    return re.escape(URLS[name])


def login_url_pattern() -> str:
    """登录页只有根路径"""
    return "^" + re.escape(BASE_URL.rstrip("/")) + "/?$"
