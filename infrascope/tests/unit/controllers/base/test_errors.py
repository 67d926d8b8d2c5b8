"""Tests for the data-access error taxonomy and BaseController contract."""

from __future__ import annotations

import pytest

from infrascope.controllers.base import BaseController, FetchError, InfrascopeError, NotFoundError

pytestmark = [pytest.mark.unit, pytest.mark.fast]


class TestErrors:
    def test_not_found_message_with_identifier(self) -> None:
        error = NotFoundError("User", "u9")
        assert str(error) == "User 'u9' not found"
        assert error.resource == "User"
        assert error.identifier == "u9"

    def test_not_found_message_without_identifier(self) -> None:
        assert str(NotFoundError("Endpoint")) == "Endpoint not found"

    def test_fetch_error_status_code(self) -> None:
        error = FetchError("bad gateway", status_code=502)
        assert error.status_code == 502
        assert FetchError("offline").status_code is None

    def test_hierarchy(self) -> None:
        assert issubclass(NotFoundError, InfrascopeError)
        assert issubclass(FetchError, InfrascopeError)


class TestBaseController:
    def test_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            BaseController(lambda *_: None)  # type: ignore[abstract]
