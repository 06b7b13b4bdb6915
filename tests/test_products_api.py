"""API tests for /api/producto: validation, category join and status mapping."""

import unittest

from tests.support import ApiTestCase

BASE = "/api/producto"


class ProductApiTestCase(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.category = self.make_category("Beverages")

    def _create(self, **overrides: object):
        body = {
            "name": "Cola",
            "description": "Can, 330 ml",
            "price": 1.5,
            "stock": 10,
            "category_id": self.category.id,
        }
        body.update(overrides)
        return self.client.post(BASE, json=body, headers=self.admin_headers)


class TestProductCreate(ProductApiTestCase):
    def test_create_resolves_category_name(self) -> None:
        resp = self._create()
        self.assertEqual(resp.status_code, 201)
        body = resp.json()
        self.assertEqual(body["name"], "Cola")
        self.assertEqual(body["price"], 1.5)
        self.assertEqual(body["stock"], 10)
        self.assertEqual(body["category_id"], self.category.id)
        self.assertEqual(body["category_name"], "Beverages")

    def test_negative_price_or_stock_is_400(self) -> None:
        for overrides in ({"price": -1}, {"stock": -1}):
            with self.subTest(**overrides):
                self.assertEqual(self._create(**overrides).status_code, 400)

    def test_zero_price_and_stock_are_allowed(self) -> None:
        self.assertEqual(self._create(price=0, stock=0).status_code, 201)

    def test_unknown_category_is_400(self) -> None:
        resp = self._create(category_id=9999)
        self.assertEqual(resp.status_code, 400)
        self.assertIn("9999", resp.json()["detail"])

    def test_duplicate_name_is_409(self) -> None:
        self._create()
        self.assertEqual(self._create().status_code, 409)

    def test_user_role_cannot_create(self) -> None:
        resp = self.client.post(
            BASE,
            json={"name": "Cola", "price": 1, "stock": 1, "category_id": self.category.id},
            headers=self.user_headers,
        )
        self.assertEqual(resp.status_code, 403)


class TestProductRead(ProductApiTestCase):
    def test_list_requires_token_and_joins_category(self) -> None:
        self._create()
        self.assertEqual(self.client.get(BASE).status_code, 401)
        resp = self.client.get(BASE, headers=self.user_headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()[0]["category_name"], "Beverages")

    def test_get_by_id_is_public(self) -> None:
        product_id = self._create().json()["id"]
        resp = self.client.get(f"{BASE}/{product_id}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["category_name"], "Beverages")

    def test_get_missing_is_404(self) -> None:
        resp = self.client.get(f"{BASE}/777")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "Product not found")


class TestProductUpdateDelete(ProductApiTestCase):
    def test_update_returns_refreshed_record(self) -> None:
        product_id = self._create().json()["id"]
        snacks = self.make_category("Snacks")
        resp = self.client.put(
            f"{BASE}/{product_id}",
            json={"price": 2.25, "category_id": snacks.id},
            headers=self.admin_headers,
        )
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["price"], 2.25)
        self.assertEqual(body["stock"], 10)
        self.assertEqual(body["category_name"], "Snacks")

    def test_update_negative_stock_is_400(self) -> None:
        product_id = self._create().json()["id"]
        resp = self.client.put(f"{BASE}/{product_id}", json={"stock": -1}, headers=self.admin_headers)
        self.assertEqual(resp.status_code, 400)

    def test_update_null_price_is_400(self) -> None:
        product_id = self._create().json()["id"]
        resp = self.client.put(f"{BASE}/{product_id}", json={"price": None}, headers=self.admin_headers)
        self.assertEqual(resp.status_code, 400)

    def test_update_unknown_category_is_400(self) -> None:
        product_id = self._create().json()["id"]
        resp = self.client.put(
            f"{BASE}/{product_id}", json={"category_id": 4242}, headers=self.admin_headers
        )
        self.assertEqual(resp.status_code, 400)

    def test_update_missing_is_404(self) -> None:
        resp = self.client.put(f"{BASE}/404", json={"stock": 1}, headers=self.admin_headers)
        self.assertEqual(resp.status_code, 404)

    def test_delete_then_missing(self) -> None:
        product_id = self._create().json()["id"]
        resp = self.client.delete(f"{BASE}/{product_id}", headers=self.admin_headers)
        self.assertEqual(resp.status_code, 200)
        resp = self.client.delete(f"{BASE}/{product_id}", headers=self.admin_headers)
        self.assertEqual(resp.status_code, 404)

    def test_deleting_referenced_category_is_409(self) -> None:
        self._create()
        resp = self.client.delete(f"/api/categoria/{self.category.id}", headers=self.admin_headers)
        self.assertEqual(resp.status_code, 409)


if __name__ == "__main__":
    unittest.main()
