from __future__ import annotations

import pytest

from jsonapi_serializer import ResourceConfig


@pytest.fixture
def user():
    return {"id": "u1", "first": "a", "last": "b"}


@pytest.fixture
def users_config():
    return ResourceConfig(type="users")


@pytest.fixture
def pets_config():
    toys = ResourceConfig(type="toys")
    pets = ResourceConfig(type="pets", relationships={"toys": toys})
    return ResourceConfig(type="users", relationships={"pets": pets})


@pytest.fixture
def user_with_pets():
    return {
        "id": "u1",
        "pets": [
            {"id": "p1", "name": "rex", "toys": [{"id": "t1", "name": "ball"}]},
            {"id": "p2", "name": "tom", "toys": [{"id": "t2", "name": "rope"}, {"id": "t3", "name": "bone"}]},
        ],
    }
