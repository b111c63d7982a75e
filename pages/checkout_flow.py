"""
checkout 线性流程：INFO_ENTRY -> OVERVIEW -> COMPLETE
只有 Cancel 能离开流程：step one 回到购物车，step two 回到商品列表
"""
from enum import Enum
from typing import Union

from config.pages import PAGE_TITLES, URLS
from utils.exceptions import InvalidTransitionError


class CheckoutState(Enum):
    INFO_ENTRY = "checkout_step_one"
    OVERVIEW = "checkout_step_two"
    COMPLETE = "checkout_complete"

    @property
    def url(self) -> str:
        return URLS[self.value]

    @property
    def title(self) -> str:
        return PAGE_TITLES[self.value]


class Exit(Enum):
    """离开 checkout 流程后到达的页面"""
    CART = "cart"
    PRODUCTS = "inventory"

    @property
    def url(self) -> str:
        return URLS[self.value]


Destination = Union[CheckoutState, Exit]

CONTINUE = "continue"
CANCEL = "cancel"
FINISH = "finish"
BACK_HOME = "back_home"

TRANSITIONS = {
    (CheckoutState.INFO_ENTRY, CONTINUE): CheckoutState.OVERVIEW,
    (CheckoutState.INFO_ENTRY, CANCEL): Exit.CART,
    (CheckoutState.OVERVIEW, FINISH): CheckoutState.COMPLETE,
    (CheckoutState.OVERVIEW, CANCEL): Exit.PRODUCTS,
    (CheckoutState.COMPLETE, BACK_HOME): Exit.PRODUCTS,
}


def next_state(state: CheckoutState, action: str) -> Destination:
    """
    :raises InvalidTransitionError: 当前状态不支持该操作
    """
    try:
        return TRANSITIONS[(state, action)]
    except KeyError:
        raise InvalidTransitionError(f"'{action}' is not allowed from {state.name}") from None


def allowed_actions(state: CheckoutState) -> list[str]:
    return [action for (src, action) in TRANSITIONS if src is state]


def detect_state(url: str, title: str):
    """URL 和标题同时匹配才算处于该状态，否则返回 None"""
    for state in CheckoutState:
        if state.url in url and title == state.title:
            return state
    return None
