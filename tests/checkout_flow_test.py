import pytest

from config.pages import BASE_URL
from pages.checkout_flow import (BACK_HOME, CANCEL, CONTINUE, FINISH, TRANSITIONS, CheckoutState, Exit,
                                 allowed_actions, detect_state, next_state)
from utils.exceptions import InvalidTransitionError


class TestTransitions:

    @pytest.mark.parametrize("state, action, expect", [
        (CheckoutState.INFO_ENTRY, CONTINUE, CheckoutState.OVERVIEW),
        (CheckoutState.INFO_ENTRY, CANCEL, Exit.CART),
        (CheckoutState.OVERVIEW, FINISH, CheckoutState.COMPLETE),
        (CheckoutState.OVERVIEW, CANCEL, Exit.PRODUCTS),
        (CheckoutState.COMPLETE, BACK_HOME, Exit.PRODUCTS),
    ])
    def test_next_state(self, state, action, expect):
        assert next_state(state, action) is expect

    @pytest.mark.parametrize("state, action", [
        (CheckoutState.INFO_ENTRY, FINISH),
        (CheckoutState.OVERVIEW, CONTINUE),
        (CheckoutState.COMPLETE, CANCEL),
        (CheckoutState.COMPLETE, CONTINUE),
    ])
    def test_invalid_transition(self, state, action):
        with pytest.raises(InvalidTransitionError):
            next_state(state, action)

    def test_invalid_transition_is_value_error(self):
        with pytest.raises(ValueError):
            next_state(CheckoutState.INFO_ENTRY, "jump")

    def test_flow_is_linear(self):
        """只有 continue / finish 在流程内前进，其余跳转都离开流程"""
        forward = {k: v for k, v in TRANSITIONS.items() if isinstance(v, CheckoutState)}
        assert set(forward.values()) == {CheckoutState.OVERVIEW, CheckoutState.COMPLETE}

    def test_allowed_actions(self):
        assert allowed_actions(CheckoutState.INFO_ENTRY) == [CONTINUE, CANCEL]
        assert allowed_actions(CheckoutState.OVERVIEW) == [FINISH, CANCEL]
        assert allowed_actions(CheckoutState.COMPLETE) == [BACK_HOME]


class TestDetectState:

    @pytest.mark.parametrize("state", list(CheckoutState))
    def test_url_and_title(self, state):
        assert detect_state(BASE_URL.rstrip("/") + state.url, state.title) is state

    def test_url_without_title(self):
        """URL 已跳转但页面还没渲染"""
        assert detect_state(BASE_URL.rstrip("/") + CheckoutState.OVERVIEW.url, "") is None

    def test_title_of_other_state(self):
        url = BASE_URL.rstrip("/") + CheckoutState.OVERVIEW.url
        assert detect_state(url, CheckoutState.INFO_ENTRY.title) is None

    def test_outside_flow(self):
        assert detect_state(BASE_URL.rstrip("/") + Exit.CART.url, "Your Cart") is None
