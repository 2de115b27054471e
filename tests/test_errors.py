from product_api.errors import ApiError, ErrorKind, error_response


class TestErrorResponse:

    def test_api_error_uses_kind_status_and_message(self):
        body, status = error_response(ApiError(ErrorKind.INVALID_KEY))
        assert status == 403
        assert body == {"success": False, "message": "Invalid API key"}

    def test_validation_errors_are_listed(self):
        body, status = error_response(ApiError(ErrorKind.VALIDATION, errors=["a", "b"]))
        assert status == 400
        assert body["errors"] == ["a", "b"]

    def test_custom_message(self):
        body, _ = error_response(ApiError(ErrorKind.NOT_FOUND, "gone"))
        assert body["message"] == "gone"

    def test_other_exceptions_are_unexpected(self):
        body, status = error_response(KeyError("x"))
        assert status == 500
        assert body == {"success": False, "message": "Internal Server Error"}

    def test_diagnostics_only_when_asked(self):
        try:
            raise ValueError("bad")
        except ValueError as exc:
            error = exc
        body, _ = error_response(error, expose_diagnostics=True)
        assert body["error"] == "ValueError"
        assert "ValueError: bad" in body["stack"]
        assert "stack" not in error_response(error)[0]
