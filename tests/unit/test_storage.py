"""Tests for the local and S3 blob stores."""

import boto3
import pytest
from botocore.stub import Stubber

from shopfront.core.config import Settings
from shopfront.core.errors import ConfigurationError, StoreError
from shopfront.infrastructure.storage import (
    BlobStore, LocalBlobStore, S3BlobStore, get_blob_store
)


class TestNameFromUrl:
    @pytest.mark.parametrize("url, expected", [
        ("https://cdn.example.com/abc_photo.png", "abc_photo.png"),
        ("/media/abc_photo.png", "abc_photo.png"),
        ("/media/abc_photo%231.png", "abc_photo#1.png"),
        ("", None),
        (None, None),
    ])
    def test_last_path_segment(self, url, expected):
        assert BlobStore.name_from_url(url) == expected


class TestPublicUrl:
    def test_names_are_percent_encoded(self, tmp_path):
        store = LocalBlobStore(str(tmp_path), "/media")

        assert store.public_url("abc_photo #1.png") == "/media/abc_photo%20%231.png"

    def test_round_trip_through_url(self, tmp_path):
        store = LocalBlobStore(str(tmp_path), "/media")
        name = "abc_photo #1?.png"

        assert BlobStore.name_from_url(store.public_url(name)) == name


class TestLocalBlobStore:
    async def test_put_then_delete(self, tmp_path):
        store = LocalBlobStore(str(tmp_path / "media"), "/media/")

        url = await store.put("id_photo.png", b"data", "image/png")

        assert url == "/media/id_photo.png"
        assert (tmp_path / "media" / "id_photo.png").read_bytes() == b"data"

        await store.delete("id_photo.png")

        assert not (tmp_path / "media" / "id_photo.png").exists()

    async def test_names_cannot_escape_the_root(self, tmp_path):
        store = LocalBlobStore(str(tmp_path / "media"), "/media")

        url = await store.put("../outside.png", b"data")

        assert url == "/media/outside.png"
        assert not (tmp_path / "outside.png").exists()

    async def test_deleting_a_missing_blob_is_fine(self, tmp_path):
        store = LocalBlobStore(str(tmp_path), "/media")

        await store.delete("never-stored.png")


@pytest.fixture
def s3_client():
    return boto3.client(
        "s3",
        region_name="auto",
        endpoint_url="https://account.r2.cloudflarestorage.com",
        aws_access_key_id="test",
        aws_secret_access_key="test",
    )


class TestS3BlobStore:
    async def test_put_returns_public_url(self, s3_client):
        store = S3BlobStore("images", "https://cdn.example.com", s3_client)

        with Stubber(s3_client) as stubber:
            stubber.add_response("put_object", {})
            url = await store.put("id_photo.png", b"data", "image/png")
            stubber.assert_no_pending_responses()

        assert url == "https://cdn.example.com/id_photo.png"

    async def test_delete(self, s3_client):
        store = S3BlobStore("images", "https://cdn.example.com", s3_client)

        with Stubber(s3_client) as stubber:
            stubber.add_response("delete_object", {}, {"Bucket": "images", "Key": "id_photo.png"})
            await store.delete("id_photo.png")
            stubber.assert_no_pending_responses()

    async def test_client_errors_become_store_errors(self, s3_client):
        store = S3BlobStore("images", "https://cdn.example.com", s3_client)

        with Stubber(s3_client) as stubber:
            stubber.add_client_error("put_object", service_error_code="AccessDenied", http_status_code=403)
            with pytest.raises(StoreError):
                await store.put("id_photo.png", b"data")


class TestGetBlobStore:
    def test_local_by_default(self, tmp_path):
        settings = Settings(_env_file=None, media_root=str(tmp_path))

        store = get_blob_store(settings)

        assert isinstance(store, LocalBlobStore)
        assert store.public_url("x.png") == "/media/x.png"

    def test_s3_requires_a_bucket(self):
        settings = Settings(_env_file=None, storage_backend="s3", public_blob_url="https://cdn.example.com")

        with pytest.raises(ConfigurationError):
            get_blob_store(settings)

    def test_s3_store(self):
        settings = Settings(
            _env_file=None,
            storage_backend="s3",
            s3_bucket="images",
            s3_region="auto",
            s3_endpoint_url="https://account.r2.cloudflarestorage.com",
            s3_access_key_id="test",
            s3_secret_access_key="test",
            public_blob_url="https://cdn.example.com/",
        )

        store = get_blob_store(settings)

        assert isinstance(store, S3BlobStore)
        assert store.public_url("x.png") == "https://cdn.example.com/x.png"
