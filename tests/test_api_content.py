"""
Tests for the content API endpoints.

Tests FastAPI routes with a faked content facade and store lookup.
Validates delegation, request preamble, response schemas, and error mapping.
"""

from app.application.content.dtos import (
    ContentFolderItem,
    ReadableContentBox,
    ReadableContentPage,
)
from app.domain.content.entities import ContentType, FileContentType

API = "/api/v1"


class TestPageEndpoints:
    """Tests for GET /content/pages and /content/pages/{code}."""

    def test_empty_page_list(self, client, fake_facade) -> None:
        """No pages yields an empty JSON list."""
        response = client.get(f"{API}/content/pages", params={"store": "DEFAULT", "lang": "en"})
        assert response.status_code == 200
        assert response.json() == []
        assert fake_facade.calls == [("list_pages", "DEFAULT", "en")]

    def test_page_list_body(self, client, fake_facade) -> None:
        """Pages are serialized with their localized fields."""
        fake_facade.pages["about"] = ReadableContentPage(
            code="about",
            title="About us",
            body="<p>Hi</p>",
            language="en",
            metadata={"keywords": "shop"},
        )
        body = client.get(f"{API}/content/pages").json()
        assert body == [
            {
                "code": "about",
                "title": "About us",
                "body": "<p>Hi</p>",
                "language": "en",
                "visible": True,
                "metadata": {"keywords": "shop"},
            }
        ]

    def test_missing_page_returns_null(self, client) -> None:
        """A missing page answers 200 with a null body."""
        response = client.get(f"{API}/content/pages/unknown")
        assert response.status_code == 200
        assert response.json() is None

    def test_missing_page_strict_returns_404(self, fake_app, client) -> None:
        """Strict page lookup maps a missing page to 404."""
        fake_app.state.settings = fake_app.state.settings.model_copy(
            update={"strict_page_lookup": True}
        )
        response = client.get(f"{API}/content/pages/unknown")
        assert response.status_code == 404
        assert response.json()["error"] == "Content not found"

    def test_page_code_taken_literally(self, client, fake_facade) -> None:
        """The code path parameter is passed without normalization."""
        client.get(f"{API}/content/pages/About-Us")
        assert fake_facade.calls[-1][:2] == ("find_page", "About-Us")


class TestBoxEndpoints:
    """Tests for summary and box endpoints."""

    def test_summary_and_boxes_use_summary_prefix(self, client, fake_facade) -> None:
        """Both listings ask for BOX content prefixed with summary_."""
        client.get(f"{API}/content/summary")
        client.get(f"{API}/content/boxes")
        assert [c[:3] for c in fake_facade.calls] == [
            ("list_boxes", ContentType.BOX, "summary_"),
            ("list_boxes", ContentType.BOX, "summary_"),
        ]

    def test_box_by_code(self, client, fake_facade) -> None:
        """A box is serialized with name and html."""
        fake_facade.boxes["summary_home"] = ReadableContentBox(
            code="summary_home", name="Home", html="<b>hi</b>", language="en"
        )
        response = client.get(f"{API}/content/boxes/summary_home")
        assert response.status_code == 200
        assert response.json()["html"] == "<b>hi</b>"

    def test_missing_box_returns_404(self, client) -> None:
        """A missing box surfaces as 404."""
        response = client.get(f"{API}/content/boxes/nope")
        assert response.status_code == 404

    def test_store_content_uses_path_store(self, client, fake_facade, fake_stores) -> None:
        """/{store}/content/{code} resolves the store from the path."""
        fake_facade.boxes["banner"] = ReadableContentBox(
            code="banner", name="Banner", html="", language="fr"
        )
        response = client.get(f"{API}/ACME/content/banner", params={"store": "DEFAULT"})
        assert response.status_code == 200
        assert fake_stores.calls == ["ACME"]
        assert fake_facade.calls == [("get_box", "banner", "ACME", "fr")]


class TestFolderEndpoints:
    """Tests for folder listings and path decoding."""

    def test_folder_path_is_decoded(self, client, fake_facade) -> None:
        """path=a%2Fb reaches the facade as a/b."""
        response = client.get(f"{API}/content/folder?path=a%2Fb")
        assert response.status_code == 200
        assert fake_facade.calls == [("get_folder", "a/b", "DEFAULT")]

    def test_double_encoded_path_is_decoded(self, client, fake_facade) -> None:
        """A percent-encoded path value is decoded once more."""
        client.get(f"{API}/content/folder?path=caf%25C3%25A9")
        assert fake_facade.calls == [("get_folder", "café", "DEFAULT")]

    def test_folder_without_path(self, client, fake_facade) -> None:
        """No path means the root listing."""
        response = client.get(f"{API}/content/folder")
        assert response.json() == {"path": None, "files": []}
        assert fake_facade.calls == [("get_folder", None, "DEFAULT")]

    def test_folder_files_use_camel_case(self, client, fake_facade) -> None:
        """File descriptors expose contentType."""
        fake_facade.folder_files = (
            ContentFolderItem(
                name="logo.png", url="/static/files/DEFAULT/IMAGE/logo.png",
                size=10, content_type="image/png",
            ),
        )
        files = client.get(f"{API}/content/folder").json()["files"]
        assert files == [
            {
                "name": "logo.png",
                "url": "/static/files/DEFAULT/IMAGE/logo.png",
                "size": 10,
                "contentType": "image/png",
            }
        ]

    def test_plus_in_path_decodes_to_space(self, client, fake_facade) -> None:
        """path=a%2Bb arrives as a+b and is form-decoded to "a b"."""
        client.get(f"{API}/content/folder?path=a%2Bb")
        assert fake_facade.calls == [("get_folder", "a b", "DEFAULT")]

    def test_malformed_escape_returns_500(self, client, fake_facade) -> None:
        response = client.get(f"{API}/content/folder", params={"path": "%zz"})
        assert response.status_code == 500
        assert fake_facade.calls == []

    def test_undecodable_path_returns_500(self, client) -> None:
        """Invalid UTF-8 after decoding is reported as a server error."""
        response = client.get(f"{API}/content/folder", params={"path": "%FF"})
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_images_resolves_store_from_path(self, client, fake_facade, fake_stores) -> None:
        """/{store}/content/images ignores the store query parameter."""
        response = client.get(
            f"{API}/ACME/content/images", params={"path": "banners", "store": "DEFAULT"}
        )
        assert response.status_code == 200
        assert fake_stores.calls == ["ACME"]
        assert fake_facade.calls == [("get_folder", "banners", "ACME")]

    def test_images_unknown_store_returns_404(self, client, fake_facade) -> None:
        """An unknown store segment never reaches the facade."""
        response = client.get(f"{API}/NOPE/content/images")
        assert response.status_code == 404
        assert fake_facade.calls == []


class TestRequestPreamble:
    """Tests for store and language resolution."""

    def test_unknown_store_returns_404(self, client, fake_facade) -> None:
        response = client.get(f"{API}/content/pages", params={"store": "NOPE"})
        assert response.status_code == 404
        assert response.json()["error"] == "Store not found"
        assert fake_facade.calls == []

    def test_unsupported_language_returns_400(self, client) -> None:
        response = client.get(f"{API}/content/pages", params={"lang": "de"})
        assert response.status_code == 400
        assert response.json()["error"] == "Language not supported"

    def test_accept_language_header(self, client, fake_facade) -> None:
        client.get(f"{API}/content/pages", headers={"Accept-Language": "fr-CA,en;q=0.5"})
        assert fake_facade.calls == [("list_pages", "DEFAULT", "fr")]

    def test_default_language_fallback(self, client, fake_facade) -> None:
        client.get(f"{API}/content/pages", params={"store": "ACME"})
        assert fake_facade.calls == [("list_pages", "ACME", "fr")]


class TestUploadEndpoints:
    """Tests for POST /private/content and /private/files."""

    def test_single_upload(self, client, fake_facade) -> None:
        """A 10-byte PNG reaches the facade with its bytes and MIME type."""
        data = b"\x89PNG\r\n\x1a\n\x00\x00"
        response = client.post(
            f"{API}/private/content",
            files={"file": ("logo.png", data, "image/png")},
        )
        assert response.status_code == 201
        assert response.content == b""
        name, file, store = fake_facade.calls[0]
        assert name == "add_file"
        assert file.name == "logo.png"
        assert file.content_type == "image/png"
        assert file.file == data
        assert store == "DEFAULT"

    def test_multiple_upload_forwards_every_file(self, client, fake_facade) -> None:
        """Every part is forwarded, duplicates included."""
        response = client.post(
            f"{API}/private/files",
            files=[
                ("files", ("a.txt", b"one", "text/plain")),
                ("files", ("a.txt", b"two", "text/plain")),
                ("files", ("b.jpg", b"three", "image/jpeg")),
            ],
        )
        assert response.status_code == 201
        name, files, _ = fake_facade.calls[0]
        assert name == "add_files"
        assert [f.name for f in files] == ["a.txt", "a.txt", "b.jpg"]
        assert [f.file for f in files] == [b"one", b"two", b"three"]

    def test_upload_without_file_returns_422(self, client) -> None:
        response = client.post(f"{API}/private/content")
        assert response.status_code == 422


class TestSavePageEndpoint:
    """Tests for POST /private/content/page."""

    PAGE = {"code": "x", "descriptions": [{"title": "X", "body": "<p>x</p>"}]}

    def test_path_page_code_overrides_body(self, client, fake_facade) -> None:
        response = client.post(f"{API}/private/content/page/y", json=self.PAGE)
        assert response.status_code == 200
        _, page, store, lang = fake_facade.calls[0]
        assert page.code == "y"
        assert (store, lang) == ("DEFAULT", "en")

    def test_query_page_code_overrides_body(self, client, fake_facade) -> None:
        body = dict(self.PAGE, code="about")
        client.post(f"{API}/private/content/page", params={"pageCode": "home"}, json=body)
        assert fake_facade.calls[0][1].code == "home"

    def test_body_code_kept_without_override(self, client, fake_facade) -> None:
        client.post(f"{API}/private/content/page", json=self.PAGE)
        page = fake_facade.calls[0][1]
        assert page.code == "x"
        assert page.descriptions[0].title == "X"
        assert page.descriptions[0].language is None

    def test_code_only_body_with_page_code(self, client, fake_facade) -> None:
        """A body without descriptions is accepted; pageCode wins."""
        response = client.post(
            f"{API}/private/content/page", params={"pageCode": "y"}, json={"code": "x"}
        )
        assert response.status_code == 200
        _, page, store, lang = fake_facade.calls[0]
        assert (page.code, page.descriptions) == ("y", ())
        assert (store, lang) == ("DEFAULT", "en")

    def test_box_without_descriptions_rejected(self, client, fake_facade) -> None:
        response = client.post(f"{API}/private/content/box", json={"code": "summary_a"})
        assert response.status_code == 422
        assert fake_facade.calls == []

    def test_save_box(self, client, fake_facade) -> None:
        body = {"code": "summary_a", "sortOrder": 3, "descriptions": [{"title": "A"}]}
        response = client.post(f"{API}/private/content/box", json=body)
        assert response.status_code == 200
        box = fake_facade.calls[0][1]
        assert (box.code, box.sort_order) == ("summary_a", 3)


class TestDeleteEndpoint:
    """Tests for DELETE /private/content."""

    def test_delete_forwards_name_and_type(self, client, fake_facade) -> None:
        response = client.delete(
            f"{API}/private/content", params={"name": "logo.png", "contentType": "IMAGE"}
        )
        assert response.status_code == 200
        assert fake_facade.calls == [
            ("delete", "DEFAULT", "logo.png", FileContentType.IMAGE)
        ]

    def test_delete_unknown_type_rejected(self, client) -> None:
        response = client.delete(
            f"{API}/private/content", params={"name": "logo.png", "contentType": "VIDEO"}
        )
        assert response.status_code == 422

    def test_delete_from_form_fields(self, client, fake_facade) -> None:
        response = client.request(
            "DELETE",
            f"{API}/private/content",
            data={"name": "logo.png", "contentType": "IMAGE"},
        )
        assert response.status_code == 200
        assert fake_facade.calls == [
            ("delete", "DEFAULT", "logo.png", FileContentType.IMAGE)
        ]

    def test_query_and_form_fields_combined(self, client, fake_facade) -> None:
        response = client.request(
            "DELETE",
            f"{API}/private/content",
            params={"name": "terms.pdf"},
            data={"contentType": "STATIC_FILE"},
        )
        assert response.status_code == 200
        assert fake_facade.calls == [
            ("delete", "DEFAULT", "terms.pdf", FileContentType.STATIC_FILE)
        ]

    def test_delete_without_fields_rejected(self, client, fake_facade) -> None:
        response = client.delete(f"{API}/private/content")
        assert response.status_code == 422
        assert fake_facade.calls == []


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self, client) -> None:
        response = client.get(f"{API}/content/pages")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
