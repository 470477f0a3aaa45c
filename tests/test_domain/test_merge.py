"""
Unit tests for the partial-update merge

These tests use plain objects as targets; no database is involved.
"""
from decimal import Decimal
from types import SimpleNamespace
from typing import Optional

import pytest
from pydantic import BaseModel

from nile.core.exceptions import InvalidPayloadError
from nile.domain.customer import CUSTOMER_MERGE_FIELDS, CustomerUpdate, merge_customer
from nile.domain.merge import MergeOptions, is_present, merge_partial, present_fields, required_value
from nile.domain.payment import PaymentUpdate
from nile.domain.product import ProductUpdate, merge_product


def make_customer(**overrides):
    values = {
        "id": 3,
        "name": "Old Name",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "username": "ada",
        "email": "ada@example.test",
        "phone_number": "+355691234567",
        "address": "Tirana",
    }
    values.update(overrides)
    return SimpleNamespace(**values)


class TestMergePartial:
    """merge_partial / per-entity merges"""

    def test_all_absent_patch_leaves_entity_unchanged(self):
        customer = make_customer()
        before = dict(vars(customer))

        merge_customer(customer, CustomerUpdate())

        assert vars(customer) == before

    def test_present_fields_overwrite_and_absent_fields_stay(self):
        customer = make_customer()

        merge_customer(customer, CustomerUpdate(name="New Name", email="new@example.test"))

        assert customer.name == "New Name"
        assert customer.email == "new@example.test"
        assert customer.first_name == "Ada"
        assert customer.last_name == "Lovelace"
        assert customer.address == "Tirana"
        assert customer.id == 3

    def test_explicit_null_is_ignored_by_default(self):
        customer = make_customer()

        merge_customer(customer, CustomerUpdate.model_validate({"email": None}))

        assert customer.email == "ada@example.test"

    def test_explicit_null_is_copied_when_not_ignored(self):
        customer = make_customer()
        options = MergeOptions(ignore_none=False)

        merge_customer(customer, CustomerUpdate.model_validate({"email": None}), options)

        assert customer.email is None
        assert customer.name == "Old Name"

    def test_identifier_is_never_overwritten(self):
        class PatchWithId(BaseModel):
            id: Optional[int] = None
            name: Optional[str] = None

        target = SimpleNamespace(id=7, name="before")

        merge_partial(target, PatchWithId(id=99, name="after"), ("id", "name"))

        assert target.id == 7
        assert target.name == "after"

    def test_returns_the_same_target(self):
        customer = make_customer()
        assert merge_customer(customer, CustomerUpdate(name="X")) is customer

    def test_customer_fields_do_not_include_id(self):
        assert "id" not in CUSTOMER_MERGE_FIELDS


class TestProductMerge:

    def test_reference_ids_are_not_merged(self):
        product = SimpleNamespace(
            id=1, name="Widget", description=None, image=None,
            price=Decimal("9.99"), quantity=5, business_id=1, category_id=None,
        )

        merge_product(product, ProductUpdate(quantity=7, business_id=2, category_id=4))

        assert product.quantity == 7
        assert product.business_id == 1
        assert product.category_id is None
        assert product.price == Decimal("9.99")

    def test_camel_case_reference_counts_as_present(self):
        patch = ProductUpdate.model_validate({"categoryId": 4})

        assert is_present(patch, "category_id")
        assert patch.category_id == 4
        assert not is_present(patch, "business_id")


class TestPresentFields:

    def test_only_sent_values_are_reported(self):
        patch = PaymentUpdate.model_validate({"amount": "15.00", "payment_status": "COMPLETED"})

        values = present_fields(patch, ("amount", "payment_status", "payment_method"))

        assert values == {"amount": Decimal("15.00"), "payment_status": patch.payment_status}

    def test_costumer_alias_is_accepted(self):
        patch = PaymentUpdate.model_validate({"costumerId": 5})
        assert patch.customer_id == 5
        assert is_present(patch, "customer_id")


class TestRequiredFields:
    """Nulls for NOT NULL columns when MergeOptions(ignore_none=False)"""

    keep_nulls = MergeOptions(ignore_none=False)

    def test_null_required_field_raises(self):
        patch = ProductUpdate.model_validate({"price": None})

        with pytest.raises(InvalidPayloadError) as exc_info:
            present_fields(patch, ("name", "price"), self.keep_nulls, required=("price",))

        assert exc_info.value.code == "INVALID_PAYLOAD"

    def test_null_optional_field_is_kept(self):
        patch = ProductUpdate.model_validate({"description": None})

        values = present_fields(patch, ("name", "description"), self.keep_nulls, required=("name",))

        assert values == {"description": None}

    def test_required_null_is_ignored_by_default(self):
        product = SimpleNamespace(id=1, name="Widget", price=Decimal("9.99"))

        merge_product(product, ProductUpdate.model_validate({"name": None}))

        assert product.name == "Widget"

    def test_failed_merge_writes_nothing(self):
        product = SimpleNamespace(
            id=1, name="Widget", description="old", image=None,
            price=Decimal("9.99"), quantity=5,
        )

        with pytest.raises(InvalidPayloadError):
            merge_product(product, ProductUpdate.model_validate({"description": "new", "quantity": None}),
                          self.keep_nulls)

        assert product.description == "old"
        assert product.quantity == 5

    def test_required_value(self):
        assert required_value(ProductUpdate(business_id=2), "business_id") == 2
        with pytest.raises(InvalidPayloadError):
            required_value(ProductUpdate.model_validate({"business_id": None}), "business_id")
