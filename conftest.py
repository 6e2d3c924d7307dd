"""Pytest configuration and shared fixtures."""

import os
import tempfile

import pytest

# Keep the redirect cache out of the working tree
os.environ.setdefault("CACHE_DIR", tempfile.mkdtemp(prefix="betcheck-cache-"))

from betcheck.registry.models import OperatorRecord, Registry  # noqa: E402


def make_record(domain, tax_id="", company_name="", brand="", **kwargs):
    return OperatorRecord(
        domain=domain,
        tax_id=tax_id,
        company_name=company_name,
        brand=brand,
        **kwargs,
    )


@pytest.fixture
def record():
    return make_record


@pytest.fixture
def example_registry():
    return Registry.from_records([
        make_record("examplebet.bet.br", "11.111.111/0001-11", "Example Co", "EXAMPLE"),
    ])


@pytest.fixture
def group_registry():
    return Registry.from_records([
        make_record("a.bet.br", "22.222.222/0001-22", "Group SA", "A BRAND"),
        make_record("b.bet.br", "22.222.222/0001-22", "Group SA", "B BRAND"),
        make_record("não registrado", "22.222.222/0001-22", "Group SA", "C BRAND"),
        make_record("other.bet.br", "33.333.333/0001-33", "Other Ltda", ""),
    ])
