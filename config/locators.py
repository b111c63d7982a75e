LOGIN_LOCATORS = {
    "username_input": "[data-test='username']",  # 用户名
    "password_input": "[data-test='password']",  # 用户密码
    "login_button": "[data-test='login-button']",  # 登录按钮
    "error_msg": "[data-test='error']",  # 登录错误提示信息
    "error_close_button": "[data-test='error-button']",  # 关闭错误提示
    "login_logo": ".login_logo",  # 登录页logo
}

HEADER_LOCATORS = {
    "title": ".title",  # 页面标题
    "shopping_cart_link": "[data-test='shopping-cart-link']",  # 购物车icon
    "shopping_cart_badge": "[data-test='shopping-cart-badge']",  # 购物车显示商品数量
    # 侧边菜单
    "menu_button": "#react-burger-menu-btn",
    "all_items_link": "#inventory_sidebar_link",
    "about_link": "#about_sidebar_link",
    "logout_link": "#logout_sidebar_link",
    "reset_app_link": "#reset_sidebar_link",
}

PRODUCTS_LOCATORS = {
    "item_product": ".inventory_item",  # 商品列表
    "item_product_name": ".inventory_item_name",  # 单商品名称
    "item_product_price": ".inventory_item_price",  # 单商品价格
    "item_product_desc": ".inventory_item_desc",  # 单商品描述
    "item_product_img": ".inventory_item_img img",  # 单商品图片
    "product_sort_type": "[data-test='product-sort-container']",  # 商品排序方式
}

PRODUCT_DETAIL_LOCATORS = {
    "name": ".inventory_details_name",
    "price": ".inventory_details_price",
    "desc": ".inventory_details_desc",
    "add_button": "[data-test='add-to-cart']",
    "remove_button": "[data-test='remove']",
    "back_button": "[data-test='back-to-products']",
}

# 按商品名称定位的按钮：[data-test='{kind}-{slug}']
PRODUCT_CONTROLS = {
    "add": "add-to-cart",
    "remove": "remove",
}

CART_LOCATORS = {
    "cart_item": ".cart_item",  # 购物车商品列表
    "item_quantity": ".cart_quantity",  # 商品数量
    "any_remove_button": "[data-test^='remove']",
    "continue": "[data-test='continue-shopping']",  # 继续购物按钮
    "checkout_button": "[data-test='checkout']",  # 结算按钮
}

CHECKOUT_LOCATORS = {
    # --------checkout-step-one.html---------
    "firstName_input": "[data-test='firstName']",  # firstName输入框
    "lastName_input": "[data-test='lastName']",  # lastName输入框
    "postalCode_input": "[data-test='postalCode']",  # postalCode输入框
    "error_msg": "[data-test='error']",  # Error: First Name is required
    "error_close_button": "[data-test='error-button']",
    "cancel_button": "[data-test='cancel']",  # 取消按钮（step one / step two 共用）
    "continue_button": "[data-test='continue']",  # 继续按钮

    # --------checkout-step-two.html---------
    "cart_item": ".cart_item",  # 订单确认页面商品列表
    "payment_information": "[data-test='payment-info-value']",  # 支付信息value
    "shipping_information": "[data-test='shipping-info-value']",  # 运费信息value
    "subtotal_label": ".summary_subtotal_label",  # Item total: $29.99
    "tax_label": ".summary_tax_label",  # Tax: $2.40
    "total_label": ".summary_total_label",  # Total: $32.39
    "finish_button": "[data-test='finish']",  # 完成按钮

    # --------checkout-complete.html---------
    "complete_header": ".complete-header",  # Thank you for your order!
    "complete_text": ".complete-text",
    "pony_express": ".pony_express",
    "back_home_button": "[data-test='back-to-products']",
}
