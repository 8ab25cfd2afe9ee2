import pytest

from . import models


@pytest.fixture
def users(db):
    return [
        models.User.objects.create(name="Ana", email="ana@example.com"),
        models.User.objects.create(name="Bob", email="bob@example.com"),
    ]


@pytest.fixture
def product(db):
    return models.Product.objects.create(upc="1", sku="federation", name="Books")
