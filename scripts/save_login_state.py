from pathlib import Path

from playwright.sync_api import Browser, sync_playwright

from config.pages import BASE_URL
from config.settings import BROWSER, HEADLESS, STORAGE_STATE
from pages.login_page import LoginPage
from pages.products_page import ProductsPage
from utils.test_data import get_user


def save_login_state(browser: Browser, path: Path = STORAGE_STATE) -> Path:
    """生成登录态（standard 用户），need_login 的用例基于它创建 context"""
    context = browser.new_context(base_url=BASE_URL)
    try:
        page = context.new_page()

        # 使用 Page Object 登录
        login_page = LoginPage(page)
        login_page.open_login()
        login_page.login_as(get_user("standard"))
        ProductsPage(page).verify_on_products_page()

        path.parent.mkdir(parents=True, exist_ok=True)  # 确保storage目录一直存在
        context.storage_state(path=str(path))  # 保存登录态到login.json
    finally:
        context.close()

    # 再次校验文件
    if not path.exists() or path.stat().st_size == 0:
        raise RuntimeError(f"‼️ {path}生成失败，请检查浏览器或账号")
    print(f"✅ login.json 已生成 -> {path}")
    return path


def main():
    """单独执行该脚本命令：python -m scripts.save_login_state"""
    with sync_playwright() as p:
        browser = getattr(p, BROWSER).launch(headless=HEADLESS)
        try:
            save_login_state(browser)
        finally:
            browser.close()


if __name__ == "__main__":
    main()
