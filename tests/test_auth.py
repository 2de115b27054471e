import pytest

from product_api.auth import authorize, require_key
from product_api.errors import ApiError, ErrorKind


SECRET = "s3cret"


class TestAuthorize:

    @pytest.mark.parametrize("method", ["GET", "HEAD", "OPTIONS", "get"])
    def test_read_only_methods_always_pass(self, method):
        assert authorize(method, None, SECRET) is None
        assert authorize(method, "wrong", SECRET) is None

    @pytest.mark.parametrize("method", ["POST", "PUT", "DELETE"])
    def test_mutating_methods_need_a_key(self, method):
        assert authorize(method, None, SECRET) is ErrorKind.MISSING_KEY
        assert authorize(method, "", SECRET) is ErrorKind.MISSING_KEY

    def test_wrong_key_is_invalid(self):
        assert authorize("POST", "S3CRET", SECRET) is ErrorKind.INVALID_KEY

    def test_matching_key_passes(self):
        assert authorize("DELETE", SECRET, SECRET) is None

    def test_require_key_raises_with_status(self):
        with pytest.raises(ApiError) as exc:
            require_key("PUT", None, SECRET)
        assert exc.value.status == 401
        with pytest.raises(ApiError) as exc:
            require_key("PUT", "nope", SECRET)
        assert exc.value.status == 403
