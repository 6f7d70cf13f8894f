"""Pytest fixtures for infield tests."""

import pytest

from infield_lib.backends import InspectScanner, NamespaceScanner
from infield_lib.strategies import DefaultInclusionPolicy, DefaultTypeTransformer


@pytest.fixture(params=[InspectScanner, NamespaceScanner], ids=lambda cls: cls.name)
def scanner(request):
    """Each test using this fixture runs once per backend."""
    return request.param()


@pytest.fixture
def scanners():
    return [InspectScanner(), NamespaceScanner()]


@pytest.fixture
def inclusion_policy():
    return DefaultInclusionPolicy("tests")


@pytest.fixture
def type_transformer():
    return DefaultTypeTransformer()
