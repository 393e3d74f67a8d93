"""Shared test fixtures for djtest."""

from __future__ import annotations

from pathlib import Path

import pytest

from djtest.config import DjtestConfig


@pytest.fixture()
def config() -> DjtestConfig:
    """Default configuration."""
    return DjtestConfig()


@pytest.fixture()
def billing_tests() -> str:
    """Source of a test module with two classes sharing a method name."""
    return '''\
from django.test import TestCase


class InvoiceTest(TestCase):
    """Invoices."""

    def test_total(self):
        self.assertEqual(1, 1)

    def test_tax(self):
        pass


class CreditNoteTest(InvoiceTest):
    def test_total(self):
        super().test_total()
'''


@pytest.fixture()
def django_project(tmp_path: Path) -> Path:
    """Create a small Django-style project tree."""
    (tmp_path / "manage.py").write_text("import sys\n", encoding="utf-8")
    billing = tmp_path / "app" / "billing"
    billing.mkdir(parents=True)
    (tmp_path / "app" / "__init__.py").write_text("", encoding="utf-8")
    (billing / "__init__.py").write_text("", encoding="utf-8")
    (billing / "models.py").write_text(
        "class Invoice:\n    total = 0\n", encoding="utf-8"
    )
    (billing / "tests.py").write_text(
        '''\
from django.test import TestCase


class InvoiceTest(TestCase):
    def test_total(self):
        self.assertEqual(1, 1)
''',
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture()
def src_project(tmp_path: Path) -> Path:
    """Create a project that keeps manage.py and its apps under src/."""
    src = tmp_path / "src"
    users = src / "users"
    users.mkdir(parents=True)
    (src / "manage.py").write_text("import sys\n", encoding="utf-8")
    (users / "tests.py").write_text(
        "class UserCreationTests:\n    def test_creates_user(self):\n        pass\n",
        encoding="utf-8",
    )
    return tmp_path
