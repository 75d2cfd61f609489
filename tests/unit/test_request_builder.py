"""
Unit tests for build_request() (auth embedding and body encoding)
"""

import sys
from pathlib import Path

# Add parent directory to path to import trello_manager module
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import json
from urllib.parse import parse_qs, urlsplit

import pytest

from trello_manager import API_BASE_URL, Credentials, build_request

CREDS = Credentials(api_key="my-key", token="my-token")


def _query(prepared):
    return parse_qs(urlsplit(prepared.url).query)


class TestAuthEmbedding:
    """Test key/token query parameters"""

    @pytest.mark.parametrize("method", ["GET", "POST", "PUT", "DELETE"])
    def test_every_method_carries_key_and_token(self, method):
        """Should add key and token for every HTTP method"""
        prepared = build_request(CREDS, method, "cards/abc")
        assert _query(prepared) == {"key": ["my-key"], "token": ["my-token"]}

    def test_extra_params_kept(self):
        """Should keep extra query parameters alongside auth"""
        prepared = build_request(CREDS, "GET", "boards/b1", params={"lists": "open"})
        assert _query(prepared) == {"lists": ["open"], "key": ["my-key"], "token": ["my-token"]}

    def test_caller_cannot_override_credentials(self):
        """Should ignore key/token passed as extra params"""
        prepared = build_request(
            CREDS, "GET", "boards/b1", params={"key": "evil", "token": "evil", "cards": "open"}
        )
        query = _query(prepared)
        assert query["key"] == ["my-key"]
        assert query["token"] == ["my-token"]

    def test_params_dict_not_mutated(self):
        """Should not modify the caller's params dict"""
        params = {"lists": "open"}
        build_request(CREDS, "GET", "boards/b1", params=params)
        assert params == {"lists": "open"}

    def test_auth_comes_last_in_query_string(self):
        """Should append key and token after the endpoint parameters"""
        prepared = build_request(CREDS, "GET", "boards/b1", params={"lists": "open", "cards": "open"})
        assert urlsplit(prepared.url).query == "lists=open&cards=open&key=my-key&token=my-token"


class TestURL:
    """Test URL assembly"""

    def test_default_base_url(self):
        prepared = build_request(CREDS, "GET", "cards/abc")
        assert prepared.url.startswith(f"{API_BASE_URL}/cards/abc?")

    def test_leading_slash_and_custom_base(self):
        """Should join base and path with exactly one slash"""
        prepared = build_request(CREDS, "GET", "/cards/abc", base_url="http://localhost:8080/1/")
        assert urlsplit(prepared.url).path == "/1/cards/abc"
        assert prepared.url.startswith("http://localhost:8080/1/cards/abc?")

    def test_method_uppercased(self):
        assert build_request(CREDS, "put", "cards/abc").method == "PUT"


class TestBodies:
    """Test JSON and multipart bodies"""

    def test_get_has_no_body(self):
        prepared = build_request(CREDS, "GET", "cards/abc")
        assert prepared.body is None
        assert "Content-Type" not in prepared.headers
        assert prepared.headers["Accept"] == "application/json"

    def test_json_body(self):
        """Should serialize JSON bodies with the JSON content type"""
        prepared = build_request(CREDS, "PUT", "cards/abc", json_body={"closed": True})
        assert prepared.headers["Content-Type"] == "application/json"
        assert json.loads(prepared.body) == {"closed": True}

    def test_empty_json_object_still_sent(self):
        """Should send {} rather than dropping an empty body"""
        prepared = build_request(CREDS, "DELETE", "cards/abc", json_body={})
        assert json.loads(prepared.body) == {}
        assert prepared.headers["Content-Type"] == "application/json"

    def test_multipart_content_type_set_by_encoder(self):
        """Should let the form encoder pick the multipart content type and boundary"""
        prepared = build_request(CREDS, "POST", "cards/abc/attachments", files={"file": b"data"})
        assert prepared.headers["Content-Type"].startswith("multipart/form-data; boundary=")
        assert b'name="file"' in prepared.body
        assert b"data" in prepared.body

    def test_json_and_files_together_rejected(self):
        """Should refuse to build a request with two kinds of body"""
        with pytest.raises(ValueError, match="not both"):
            build_request(CREDS, "POST", "cards", json_body={"a": 1}, files={"file": b"x"})


class TestCredentials:
    """Test the Credentials value object"""

    def test_as_params(self):
        assert CREDS.as_params() == {"key": "my-key", "token": "my-token"}

    def test_repr_hides_token(self):
        """Should not include the token in repr"""
        assert "my-token" not in repr(CREDS)
        assert "my-key" in repr(CREDS)

    def test_equality(self):
        assert Credentials("my-key", "my-token") == CREDS
