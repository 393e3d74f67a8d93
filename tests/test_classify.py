"""Tests for target classification."""

from __future__ import annotations

import pytest

from djtest.classify import classify
from djtest.models import TargetKind


class TestClassify:
    """Tests for classify."""

    @pytest.mark.parametrize(
        "token", ["test_creates_user", "test_total", "test2", "testfoo"]
    )
    def test_method_names(self, token: str) -> None:
        assert classify(token) is TargetKind.METHOD

    @pytest.mark.parametrize(
        "token",
        ["UserCreationTest", "UserCreationTests", "TestUserCreation", "TestsFooBar"],
    )
    def test_class_names(self, token: str) -> None:
        assert classify(token) is TargetKind.CLASS

    @pytest.mark.parametrize("token", ["", "billing/invoices", "Test", "test", "app"])
    def test_module_or_package(self, token: str) -> None:
        assert classify(token) is TargetKind.MODULE_OR_PACKAGE

    def test_method_match_is_trailing(self) -> None:
        assert classify("InvoiceTest.test_total") is TargetKind.METHOD

    def test_method_wins_over_class(self) -> None:
        assert classify("TestInvoice_test_total") is TargetKind.METHOD

    def test_class_suffix_is_case_sensitive(self) -> None:
        assert classify("Invoicetest") is TargetKind.MODULE_OR_PACKAGE

    def test_uppercase_in_method_tail(self) -> None:
        assert classify("test_Total") is TargetKind.MODULE_OR_PACKAGE
