from __future__ import annotations

import copy

import pytest
from pydantic import ValidationError

from jsonapi_serializer import ResourceConfig


def test_defaults():
    config = ResourceConfig(type="users")
    assert config.id_key == "id"
    assert config.allow == frozenset()
    assert config.deny == frozenset()
    assert dict(config.relationships) == {}
    assert config.top_level_links == {"self": "/users"}
    assert config.top_level_meta == {}
    assert config.key is None
    assert config.links_for is None


def test_explicit_links_are_kept():
    config = ResourceConfig(type="users", top_level_links={"self": "https://api.test/users"})
    assert config.top_level_links == {"self": "https://api.test/users"}


def test_filters_accept_any_iterable():
    config = ResourceConfig(type="users", allow=["a", "b"], deny={"c"})
    assert config.allow == frozenset({"a", "b"})
    assert config.deny == frozenset({"c"})


def test_config_is_frozen():
    config = ResourceConfig(type="users")
    with pytest.raises(ValidationError):
        config.type = "people"


def test_relationships_are_read_only():
    config = ResourceConfig(type="users", relationships={"pets": ResourceConfig(type="pets")})
    with pytest.raises(TypeError):
        config.relationships["toys"] = ResourceConfig(type="toys")


def test_relationships_do_not_alias_caller_mapping():
    relationships = {"pets": ResourceConfig(type="pets")}
    config = ResourceConfig(type="users", relationships=relationships)
    relationships["toys"] = ResourceConfig(type="toys")
    assert list(config.relationships) == ["pets"]


def test_relationship_lookup():
    pets = ResourceConfig(type="pets")
    config = ResourceConfig(type="users", relationships={"pets": pets})
    assert config.relationship("pets") is pets
    assert config.relationship("toys") is None


def test_nested_configs_from_plain_data():
    config = ResourceConfig.model_validate(
        {"type": "users", "relationships": {"pets": {"type": "pets", "id_key": "pid"}}}
    )
    pets = config.relationship("pets")
    assert isinstance(pets, ResourceConfig)
    assert pets.id_key == "pid"
    assert pets.top_level_links == {"self": "/pets"}


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"type": 5},
        {"type": "users", "relationships": {"pets": "pets"}},
        {"type": "users", "links_for": "not callable"},
    ],
)
def test_invalid_config_is_rejected(kwargs):
    with pytest.raises(ValidationError):
        ResourceConfig(**kwargs)


def test_default_relationships_are_read_only():
    with pytest.raises(TypeError):
        ResourceConfig(type="users").relationships["pets"] = ResourceConfig(type="pets")


def test_links_and_meta_do_not_alias_caller_values():
    links = {"self": "/users", "related": ["/a"]}
    meta = {"total": 0}
    config = ResourceConfig(type="users", top_level_links=links, top_level_meta=meta)
    links["self"] = "/other"
    links["related"].append("/b")
    meta["total"] = 99
    assert config.top_level_links == {"self": "/users", "related": ("/a",)}
    assert config.top_level_meta == {"total": 0}


def test_links_and_meta_are_read_only():
    config = ResourceConfig(type="users", top_level_meta={"page": {"size": 10}})
    with pytest.raises(TypeError):
        config.top_level_links["self"] = "/other"
    with pytest.raises(TypeError):
        config.top_level_meta["page"]["size"] = 20


def test_config_can_be_deep_copied():
    pets = ResourceConfig(type="pets", top_level_meta={"n": 1})
    config = ResourceConfig(type="users", relationships={"pets": pets})
    copied = copy.deepcopy(config)
    assert copied == config
    assert copied is not config
    assert copied.relationship("pets").type == "pets"
    with pytest.raises(TypeError):
        copied.relationships["toys"] = pets


def test_deep_model_copy_leaves_original_untouched():
    config = ResourceConfig(type="users", id_key="uid")
    copied = config.model_copy(deep=True, update={"id_key": "pk"})
    assert copied.id_key == "pk"
    assert config.id_key == "uid"
