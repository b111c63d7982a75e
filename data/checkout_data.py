"""checkout功能测试用例：收货人校验提示、完成页提示"""

# 页面校验顺序：firstName -> lastName -> postalCode，只显示第一个未填写字段的错误
CHECKOUT_FIELD_ORDER = ("firstName", "lastName", "postalCode")

CHECKOUT_ERROR_MESSAGES = {
    "firstName": "Error: First Name is required",
    "lastName": "Error: Last Name is required",
    "postalCode": "Error: Postal Code is required",
}

# 测试数据 key -> 预期错误提示
CHECKOUT_FAIL_CASES = {
    "missingFirstName": CHECKOUT_ERROR_MESSAGES["firstName"],
    "missingLastName": CHECKOUT_ERROR_MESSAGES["lastName"],
    "missingPostalCode": CHECKOUT_ERROR_MESSAGES["postalCode"],
    "allEmpty": CHECKOUT_ERROR_MESSAGES["firstName"],
}

FINISH_PAGE_MESSAGE = "Thank you for your order!"
ORDER_DISPATCHED_MESSAGE = "Your order has been dispatched"


def first_blank_field(form: dict):
    """按校验顺序返回第一个为空的字段名，都填写返回 None"""
    for field in CHECKOUT_FIELD_ORDER:
        if not form.get(field, ""):
            return field
    return None


def expected_checkout_error(form: dict):
    field = first_blank_field(form)
    return CHECKOUT_ERROR_MESSAGES[field] if field else None
