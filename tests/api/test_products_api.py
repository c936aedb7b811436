"""Tests for the product catalog: localized reads and admin writes."""

from pathlib import Path

import pytest


async def create_product(client, headers, **fields):
    data = {"sku": "TEA-01", "price": "4.20", **fields}
    response = await client.post("/api/admin/products", data=data, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["product_id"]


class TestLocalizedReads:
    async def test_product_only_listed_in_its_languages(self, client, admin_headers, languages):
        product_id = await create_product(client, admin_headers, name_en="Green tea")

        english = await client.get("/api/products", params={"lang": "en"})
        french = await client.get("/api/products", params={"lang": "fr"})

        assert [p["id"] for p in english.json()] == [product_id]
        assert french.json() == []

        missing = await client.get(f"/api/products/{product_id}", params={"lang": "fr"})
        assert missing.status_code == 404
        assert missing.json() == {"error": "Product not found"}

    async def test_default_language_is_used_without_lang(self, client, admin_headers, languages):
        product_id = await create_product(client, admin_headers, name_en="Green tea", name_fr="Thé vert")

        response = await client.get(f"/api/products/{product_id}")

        assert response.json()["name"] == "Green tea"

    async def test_unknown_language_names_the_code(self, client, languages):
        response = await client.get("/api/products", params={"lang": "xx"})

        assert response.status_code == 404
        assert response.json() == {"error": "Language code 'xx' not found"}

    async def test_read_joins_product_and_translation(self, client, admin_headers, languages):
        product_id = await create_product(
            client, admin_headers,
            category="tea", status="active",
            name_fr="Thé vert", description_fr="En vrac", slug_fr="the-vert",
        )

        body = (await client.get(f"/api/products/{product_id}", params={"lang": "fr"})).json()

        assert body == {
            "id": product_id,
            "sku": "TEA-01",
            "price": 4.2,
            "main_image_url": None,
            "category": "tea",
            "status": "active",
            "name": "Thé vert",
            "description": "En vrac",
            "slug": "the-vert",
        }

    async def test_unknown_product(self, client, languages):
        response = await client.get("/api/products/missing")

        assert response.status_code == 404


class TestCreate:
    async def test_slug_defaults_to_sku_and_code(self, client, admin_headers, languages):
        product_id = await create_product(client, admin_headers, name_en="Green tea")

        body = (await client.get(f"/api/products/{product_id}", params={"lang": "en"})).json()

        assert body["slug"] == "TEA-01-en"

    async def test_translation_needs_a_name(self, client, admin_headers, languages):
        product_id = await create_product(client, admin_headers, description_fr="Sans nom")

        response = await client.get(f"/api/products/{product_id}", params={"lang": "fr"})

        assert response.status_code == 404

    async def test_inactive_language_fields_are_ignored(self, client, admin_headers, languages):
        await create_product(client, admin_headers, name_de="Grüner Tee")

        response = await client.get("/api/products", params={"lang": "de"})

        assert response.json() == []

    @pytest.mark.parametrize("data, message", [
        ({"price": "1"}, "SKU and price are required"),
        ({"sku": "A"}, "SKU and price are required"),
        ({"sku": "A", "price": "cheap"}, "Price must be a number"),
    ])
    async def test_invalid_forms(self, client, admin_headers, languages, data, message):
        response = await client.post("/api/admin/products", data=data, headers=admin_headers)

        assert response.status_code == 400
        assert response.json() == {"error": message}

    async def test_editors_cannot_write_products(self, client, editor_headers, languages):
        response = await client.post(
            "/api/admin/products", data={"sku": "A", "price": "1"}, headers=editor_headers
        )

        assert response.status_code == 403

    async def test_anonymous_cannot_write_products(self, client, languages):
        response = await client.post("/api/admin/products", data={"sku": "A", "price": "1"})

        assert response.status_code == 401


class TestUpdate:
    async def test_update_is_idempotent(self, client, admin_headers, languages):
        product_id = await create_product(client, admin_headers, name_en="Green tea")
        changes = {"price": "5.00", "status": "archived", "name_en": "Green tea", "description_en": "New"}

        first = await client.put(f"/api/admin/products/{product_id}", data=changes, headers=admin_headers)
        after_first = (await client.get(f"/api/products/{product_id}")).json()
        second = await client.put(f"/api/admin/products/{product_id}", data=changes, headers=admin_headers)
        after_second = (await client.get(f"/api/products/{product_id}")).json()

        assert first.status_code == second.status_code == 200
        assert after_first == after_second
        assert after_second["price"] == 5.0
        assert after_second["description"] == "New"

    async def test_update_adds_missing_translation(self, client, admin_headers, languages):
        product_id = await create_product(client, admin_headers, name_en="Green tea")

        await client.put(
            f"/api/admin/products/{product_id}", data={"name_fr": "Thé vert"}, headers=admin_headers
        )

        body = (await client.get(f"/api/products/{product_id}", params={"lang": "fr"})).json()
        assert body["name"] == "Thé vert"

    async def test_translation_is_rewritten_as_a_whole(self, client, admin_headers, languages):
        product_id = await create_product(
            client, admin_headers, name_en="Green tea", description_en="Loose leaf"
        )

        await client.put(
            f"/api/admin/products/{product_id}", data={"name_en": "Sencha"}, headers=admin_headers
        )

        body = (await client.get(f"/api/products/{product_id}")).json()
        assert body["name"] == "Sencha"
        assert body["description"] is None

    async def test_parent_fields_not_sent_are_kept(self, client, admin_headers, languages):
        product_id = await create_product(client, admin_headers, category="tea", name_en="Green tea")

        await client.put(f"/api/admin/products/{product_id}", data={"status": "sold out"}, headers=admin_headers)

        body = (await client.get(f"/api/products/{product_id}")).json()
        assert body["category"] == "tea"
        assert body["status"] == "sold out"
        assert body["price"] == 4.2

    async def test_update_unknown_product(self, client, admin_headers, languages):
        response = await client.put(
            "/api/admin/products/missing", data={"status": "x"}, headers=admin_headers
        )

        assert response.status_code == 404


class TestImages:
    async def test_image_upload_and_removal(self, client, admin_headers, languages, api_settings):
        created = await client.post(
            "/api/admin/products",
            data={"sku": "TEA-01", "price": "4.20", "name_en": "Green tea"},
            files={"image": ("photo.png", b"\x89PNG-bytes", "image/png")},
            headers=admin_headers,
        )
        body = created.json()
        product_id = body["product_id"]
        image_url = body["image_url"]
        stored = Path(api_settings.media_root) / f"{product_id}_photo.png"

        assert image_url == f"/media/{product_id}_photo.png"
        assert stored.read_bytes() == b"\x89PNG-bytes"

        served = await client.get(image_url)
        assert served.status_code == 200
        assert served.content == b"\x89PNG-bytes"

        removed = await client.put(
            f"/api/admin/products/{product_id}", data={"delete_image": "true"}, headers=admin_headers
        )

        assert removed.status_code == 200
        assert not stored.exists()
        product = (await client.get(f"/api/products/{product_id}")).json()
        assert product["main_image_url"] == ""

    async def test_image_names_are_url_safe(self, client, admin_headers, languages, api_settings):
        created = await client.post(
            "/api/admin/products",
            data={"sku": "TEA-01", "price": "4.20", "name_en": "Green tea"},
            files={"image": ("photo #1.png", b"hash", "image/png")},
            headers=admin_headers,
        )
        product_id = created.json()["product_id"]
        stored = Path(api_settings.media_root) / f"{product_id}_photo #1.png"

        assert created.json()["image_url"] == f"/media/{product_id}_photo%20%231.png"
        served = await client.get(created.json()["image_url"])
        assert served.content == b"hash"

        await client.put(
            f"/api/admin/products/{product_id}", data={"delete_image": "true"}, headers=admin_headers
        )

        assert not stored.exists()

    async def test_delete_image_wins_over_new_upload(self, client, admin_headers, languages, api_settings):
        product_id = await create_product(client, admin_headers, name_en="Green tea")

        await client.put(
            f"/api/admin/products/{product_id}",
            data={"delete_image": "true"},
            files={"image": ("new.png", b"new", "image/png")},
            headers=admin_headers,
        )

        product = (await client.get(f"/api/products/{product_id}")).json()
        assert product["main_image_url"] == ""
        assert not (Path(api_settings.media_root) / f"{product_id}_new.png").exists()

    async def test_replace_image(self, client, admin_headers, languages):
        product_id = await create_product(client, admin_headers, name_en="Green tea")

        await client.put(
            f"/api/admin/products/{product_id}",
            files={"image": ("new.png", b"new", "image/png")},
            headers=admin_headers,
        )

        product = (await client.get(f"/api/products/{product_id}")).json()
        assert product["main_image_url"] == f"/media/{product_id}_new.png"


class TestDelete:
    async def test_delete_removes_product_and_image(self, client, admin_headers, languages, api_settings):
        created = await client.post(
            "/api/admin/products",
            data={"sku": "TEA-01", "price": "4.20", "name_en": "Green tea"},
            files={"image": ("photo.png", b"data", "image/png")},
            headers=admin_headers,
        )
        product_id = created.json()["product_id"]

        response = await client.delete(f"/api/admin/products/{product_id}", headers=admin_headers)

        assert response.status_code == 200
        assert not (Path(api_settings.media_root) / f"{product_id}_photo.png").exists()
        assert (await client.get(f"/api/products/{product_id}")).status_code == 404

    async def test_delete_unknown_product(self, client, admin_headers):
        response = await client.delete("/api/admin/products/missing", headers=admin_headers)

        assert response.status_code == 404
