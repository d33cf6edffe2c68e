"""
Tests for loading products and customers from JSON files.
"""
import json

import pytest
from pydantic import ValidationError

from shop.domain.models import Customer
from shop.repos.customer_repo import CustomerRepo, load_customers
from shop.repos.product_repo import load_products


class TestLoadProducts:

    def test_camel_case_file(self, data_files):
        result = load_products(data_files["products"])
        assert result.ok
        laptop = result.value[0]
        assert laptop.tags == ("laptop", "gaming", "asus")
        assert laptop.created_at is not None
        assert str(laptop.price) == "1899.00"

    def test_missing_file(self, tmp_path):
        result = load_products(str(tmp_path / "missing.json"))
        assert result.error.kind == "LoadError"
        assert "missing.json" in result.error.reason

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_products(str(path)).error.kind == "LoadError"

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_bytes(b'[{"id": "\xff"}]')
        result = load_products(str(path))
        assert result.error.kind == "LoadError"
        assert "UTF-8" in result.error.reason

    def test_negative_stock_rejected(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text(
            json.dumps([{"id": "X", "name": "Thing", "category": "Misc", "price": "1", "stock": -1}]),
            encoding="utf-8",
        )
        assert load_products(str(path)).error.kind == "LoadError"

    def test_duplicate_ids_rejected(self, tmp_path):
        item = {"id": "X", "name": "Thing", "category": "Misc", "price": "1", "stock": 1}
        path = tmp_path / "products.json"
        path.write_text(json.dumps([item, item]), encoding="utf-8")
        assert load_products(str(path)).error.kind == "LoadError"


class TestLoadCustomers:

    def test_load(self, data_files):
        result = load_customers(data_files["customers"])
        assert [c.id for c in result.value] == ["C001", "C002"]
        assert result.value[1].phone is None

    def test_invalid_email(self, tmp_path):
        path = tmp_path / "customers.json"
        path.write_text(json.dumps([{"id": "C", "name": "N", "email": "no-at-sign"}]), encoding="utf-8")
        assert load_customers(str(path)).error.kind == "LoadError"

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "customers.json"
        path.write_bytes(b'[{"name": "Pawe\xb3"}]')
        assert load_customers(str(path)).error.kind == "LoadError"

    def test_short_phone(self):
        with pytest.raises(ValidationError):
            Customer(id="C", name="N", email="n@example.com", phone="123")


class TestCustomerRepo:

    @pytest.fixture
    def repo(self, data_files):
        return CustomerRepo(load_customers(data_files["customers"]).value)

    def test_find_by_id(self, repo):
        assert repo.find_by_id("C002").name == "Piotr Nowak"
        assert repo.find_by_id("C999") is None

    def test_find_by_email_case_insensitive(self, repo):
        assert repo.find_by_email("ANNA.KOWALSKA@example.com").id == "C001"

    def test_search_by_name(self, repo):
        assert [c.id for c in repo.search_by_name("nowak")] == ["C002"]

    def test_find_by_email_ignores_surrounding_whitespace(self, repo):
        assert repo.find_by_email("  piotr.nowak@example.com ").id == "C002"

    def test_search_by_name_case_insensitive(self, repo):
        assert [c.id for c in repo.search_by_name(" KOWAL ")] == ["C001"]
        assert repo.search_by_name("zzz") == []
