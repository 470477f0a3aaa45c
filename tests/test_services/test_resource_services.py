"""
Tests for the customer, business and category services
"""
import pytest

from nile import models
from nile.core.exceptions import InvalidPayloadError, NotFoundError
from nile.domain.business import BusinessCreate, BusinessUpdate
from nile.domain.category import CategoryCreate, CategoryUpdate
from nile.domain.customer import CustomerCreate, CustomerUpdate
from nile.domain.merge import MergeOptions
from nile.services import BusinessService, CategoryService, CustomerService, ProductService


class TestCustomerService:

    def test_create_ignores_client_id(self, db):
        payload = CustomerCreate.model_validate({"id": 500, "name": "Grace"})

        customer = CustomerService(db).create(payload)

        assert customer.id != 500
        assert customer.name == "Grace"

    def test_update_changes_only_sent_fields(self, db, customer):
        updated = CustomerService(db).update(customer.id, CustomerUpdate(name="New Name"))

        assert updated.name == "New Name"
        assert updated.first_name == "Ada"
        assert updated.email == "ada@example.test"
        assert updated.address == "Rruga e Durrësit 1, Tirana"

    def test_explicit_null_clears_with_per_call_options(self, db, customer):
        service = CustomerService(db, merge_options=MergeOptions(ignore_none=False))

        updated = service.update(customer.id, CustomerUpdate.model_validate({"phone_number": None}))

        assert updated.phone_number is None
        assert updated.name == "Ada Lovelace"

    def test_get_by_id_missing(self, db):
        with pytest.raises(NotFoundError):
            CustomerService(db).get_by_id(1)

    def test_delete_is_strict(self, db, customer):
        service = CustomerService(db)
        service.delete(customer.id)

        with pytest.raises(NotFoundError):
            service.get_by_id(customer.id)
        with pytest.raises(NotFoundError):
            service.delete(customer.id)

    def test_get_list(self, db):
        service = CustomerService(db)
        service.create(CustomerCreate(name="One"))
        service.create(CustomerCreate(name="Two"))

        assert [c.name for c in service.get_list()] == ["One", "Two"]


class TestBusinessService:

    def test_create_and_update(self, db):
        service = BusinessService(db)
        business = service.create(BusinessCreate(name="Shop", website="https://shop.test"))

        updated = service.update(business.id, BusinessUpdate(email="hi@shop.test"))

        assert updated.name == "Shop"
        assert updated.website == "https://shop.test"
        assert updated.email == "hi@shop.test"

    def test_delete_removes_owned_products(self, db, product, business):
        BusinessService(db).delete(business.id)

        assert db.query(models.Product).count() == 0


class TestCategoryService:

    def test_delete_keeps_products_and_unsets_category(self, db, product, category):
        CategoryService(db).delete(category.id)

        remaining = ProductService(db).get_by_id(product.id)
        assert remaining.category_id is None

    def test_create(self, db):
        category = CategoryService(db).create(CategoryCreate(name="Toys"))
        assert category.id is not None
        assert category.description is None

    def test_update_merges_only_sent_fields(self, db, category):
        updated = CategoryService(db).update(category.id, CategoryUpdate(description="Phones and laptops"))

        assert updated.id == category.id
        assert updated.name == "Electronics"
        assert updated.description == "Phones and laptops"

    def test_update_ignores_null_name_by_default(self, db, category):
        updated = CategoryService(db).update(category.id, CategoryUpdate.model_validate({"name": None}))

        assert updated.name == "Electronics"

    def test_null_name_is_rejected_when_nulls_are_kept(self, db, category):
        service = CategoryService(db, merge_options=MergeOptions(ignore_none=False))

        with pytest.raises(InvalidPayloadError):
            service.update(category.id, CategoryUpdate.model_validate({"name": None}))

        assert service.get_by_id(category.id).name == "Electronics"
