import pytest

from data.models import USER_CATEGORIES
from utils.exceptions import FixtureLookupError
from utils.test_data import (USER_PARTITIONS, all_products, all_users, find, find_checkout_info, find_product,
                             find_user, get_checkout_info, get_product, get_user, load_test_data,
                             users_in_categories)


class TestFind:

    def test_found_user(self):
        result = find_user("standard")
        assert result.found
        assert result.partition == "validUsers"
        assert result.record["username"] == "standard_user"

    def test_found_in_second_partition(self):
        result = find_user("lockedOut")
        assert result.partition == "invalidUsers"

    def test_not_found_is_a_value(self):
        result = find_user("nobody")
        assert not result.found
        assert result.partition is None

    def test_first_partition_wins(self):
        data = {"a": {"k": {"v": 1}}, "b": {"k": {"v": 2}}}
        assert find("k", ("a", "b"), data=data).record == {"v": 1}
        assert find("k", ("b", "a"), data=data).record == {"v": 2}

    def test_missing_partition(self):
        assert not find("k", ("missing",), data={}).found

    def test_checkout_and_product(self):
        assert find_checkout_info("valid").found
        assert not find_product("nothing").found


class TestGet:

    def test_get_user(self):
        user = get_user("problem")
        assert user.username == "problem_user"
        assert user.password == "secret_sauce"
        assert user.category == "problem"

    def test_get_missing_user_fails_fast(self):
        with pytest.raises(FixtureLookupError) as exc_info:
            get_user("nobody")
        assert exc_info.value.key == "nobody"
        assert exc_info.value.partitions == USER_PARTITIONS
        assert "nobody" in str(exc_info.value)

    def test_get_missing_product_is_lookup_error(self):
        with pytest.raises(LookupError):
            get_product("nothing")

    def test_get_checkout_info(self):
        info = get_checkout_info("missingLastName")
        assert info.as_form() == {"firstName": "John", "lastName": "", "postalCode": "12345"}

    def test_get_product(self):
        product = get_product("redTshirt")
        assert product.name == "Test.allTheThings() T-Shirt (Red)"
        assert str(product.price) == "15.99"
        assert product.slug == "test.allthethings()-t-shirt-(red)"


class TestCollections:

    def test_every_user_has_known_category(self):
        for user in all_users().values():
            assert user.category in USER_CATEGORIES

    def test_valid_user_categories(self):
        keys = {u.key for u in users_in_categories("standard", "problem", "performance-degraded")}
        assert keys == {"standard", "problem", "performance"}

    def test_products_unique(self):
        products = all_products()
        assert len(products) == 6
        assert len({p.name for p in products}) == len(products)
        assert len({p.slug for p in products}) == len(products)

    def test_products_keep_file_order(self):
        assert [p.key for p in all_products()] == list(load_test_data()["products"])

    def test_prices_positive(self):
        assert all(p.price > 0 for p in all_products())
