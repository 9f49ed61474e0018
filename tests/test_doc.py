"""Tests for building the documentation index tree."""

import weakref
from typing import Any

import pytest

from apidoc.doc import Doc
from apidoc.doc_class import DocClass
from apidoc.doc_interface import DocInterface
from apidoc.doc_typedef import DocTypedef
from apidoc.errors import MalformedSourceError
from conftest import ORIGIN

DOCS_ROOT = "https://hypixel-api-reborn.github.io/#/docs/main/master"


def test_doc_adopts_every_top_level_kind(doc: Doc) -> None:
    """Verify classes, typedefs and interfaces are registered by kind."""
    assert [c.name for c in doc.classes] == ["Guild", "User", "Base"]
    assert [t.name for t in doc.typedefs] == ["Snowflake", "FetchOptions"]
    assert [i.name for i in doc.interfaces] == ["Cacheable"]
    assert isinstance(doc.children["guild"], DocClass)
    assert isinstance(doc.children["snowflake"], DocTypedef)
    assert isinstance(doc.children["cacheable"], DocInterface)


def test_doc_identity_from_origin(doc: Doc) -> None:
    """Verify project, repo and branch are taken from the origin URL."""
    assert doc.project == "Example"
    assert doc.repo == "example-lib"
    assert doc.branch == "master"
    assert doc.repo_url == "https://github.com/Example/example-lib/blob/master"
    assert doc.base_docs_url == DOCS_ROOT


def test_doc_empty_payload() -> None:
    """Verify an empty payload builds an empty, searchable index."""
    doc = Doc(ORIGIN, {})
    assert doc.children == {}
    assert doc.search("guild") is None


@pytest.mark.parametrize(
    "payload",
    [
        [],
        "not an object",
        {"classes": "Guild"},
        {"classes": [{"description": "no name"}]},
        {"classes": [{"name": "Guild", "props": [{"type": [[["string"]]]}]}]},
    ],
)
def test_doc_malformed_payload(payload: Any) -> None:
    """Verify structurally invalid payloads are rejected."""
    with pytest.raises(MalformedSourceError):
        Doc(ORIGIN, payload)


def test_doc_malformed_origin(payload: dict[str, Any]) -> None:
    """Verify an origin without project, repo and branch is rejected."""
    with pytest.raises(MalformedSourceError):
        Doc("https://example.com/docs.json", payload)


def test_duplicate_names_last_wins() -> None:
    """Verify a later record replaces an earlier one with the same name."""
    doc = Doc(
        ORIGIN,
        {
            "classes": [
                {"name": "Dup", "description": "first"},
                {"name": "dup", "description": "second"},
            ]
        },
    )
    assert len(doc.children) == 1
    assert doc.get("DUP").description == "second"


def test_members_point_back_to_parent(doc: Doc) -> None:
    """Verify members know their owner without keeping it alive."""
    guild = doc.get("Guild")
    owner = doc.get("Guild#owner")
    assert owner.parent is guild
    assert owner.doc is doc
    assert isinstance(owner._parent_ref, weakref.ref)  # noqa: SLF001
    assert guild.parent is None


def test_member_kinds_are_separated(doc: Doc) -> None:
    """Verify props, methods and events are grouped by kind."""
    guild = doc.get("Guild")
    assert [p.name for p in guild.props] == [
        "owner",
        "name",
        "members",
        "_secret",
        "instances",
    ]
    assert [m.name for m in guild.methods] == ["fetch", "leave", "_patch"]
    assert [e.name for e in guild.events] == ["update"]
    assert guild.params is None


def test_formatted_names(doc: Doc) -> None:
    """Verify link text for each element kind."""
    assert doc.get("Guild").formatted_name == "Guild"
    assert doc.get("Guild#owner").formatted_name == "Guild#owner"
    assert doc.get("Guild.instances").formatted_name == "Guild.instances"
    assert doc.get("Guild#fetch").formatted_name == "Guild#fetch()"
    assert doc.get("Guild#update").formatted_name == "Guild#update"
    options = doc.get("Guild#fetch").params[0]
    assert options.formatted_name == "`[options]`"


def test_element_urls(doc: Doc) -> None:
    """Verify page URLs and scroll anchors."""
    assert doc.get("Guild").url == f"{DOCS_ROOT}/class/Guild"
    assert doc.get("Snowflake").url == f"{DOCS_ROOT}/typedef/Snowflake"
    assert doc.get("Guild#owner").url == f"{DOCS_ROOT}/class/Guild?scrollTo=owner"
    assert (
        doc.get("Guild#instances").url
        == f"{DOCS_ROOT}/class/Guild?scrollTo=s-instances"
    )
    assert doc.get("Guild#update").url == f"{DOCS_ROOT}/class/Guild?scrollTo=e-update"
    options = doc.get("Guild#fetch").params[0]
    assert options.url == f"{DOCS_ROOT}/class/Guild?scrollTo=fetch"


def test_source_url(doc: Doc) -> None:
    """Verify the repository link is built from element metadata."""
    assert doc.get("Guild").source_url == (
        "https://github.com/Example/example-lib/blob/master/"
        "src/structures/Guild.js#L12"
    )
    assert doc.get("User").source_url is None


def test_element_flags(doc: Doc) -> None:
    """Verify access and scope flags."""
    assert doc.get("Guild#_secret").is_private
    assert not doc.get("Guild#owner").is_private
    assert doc.get("Guild#instances").is_static


def test_type_element(doc: Doc) -> None:
    """Verify the first named top-level type is found."""
    assert doc.get("Guild#owner").type_element is doc.get("User")
    assert doc.get("Guild#members").type_element is doc.get("Snowflake")
    assert doc.get("Guild#name").type_element is None


def test_returns_normalized(doc: Doc) -> None:
    """Verify both payload forms of ``returns`` are accepted."""
    fetch = doc.get("Guild#fetch")
    assert fetch.returns.types == ("Promise", "<", "Guild", ">")
    assert fetch.returns.description == "The fetched guild"
    to_string = doc.get("User#toString")
    assert to_string.returns.types == ("string",)
    assert to_string.returns.description is None
    assert doc.get("Guild#leave").returns is None


def test_class_to_json(doc: Doc) -> None:
    """Verify the structural dump lists every child by kind."""
    data = doc.get("Guild").to_json()
    assert data["name"] == "Guild"
    assert data["internal_type"] == "class"
    assert "parent" not in data
    assert data["props"] == ["owner", "name", "members", "_secret", "instances"]
    assert data["methods"] == ["fetch", "leave", "_patch"]
    assert data["events"] == ["update"]


def test_method_to_json(doc: Doc) -> None:
    """Verify the dump of a method includes its params recursively."""
    data = doc.get("Guild#fetch").to_json()
    assert data["parent"] == "Guild"
    assert data["examples"] == ["guild.fetch().then(console.log);"]
    [param] = data["params"]
    assert param["name"] == "options"
    assert param["type"] == "FetchOptions"
    assert param["optional"] is True


def test_doc_to_json(doc: Doc) -> None:
    """Verify the whole tree dumps grouped by kind."""
    data = doc.to_json()
    assert set(data) == {"classes", "typedefs", "interfaces"}
    assert [c["name"] for c in data["classes"]] == ["Guild", "User", "Base"]


def test_search_entries(doc: Doc) -> None:
    """Verify the flattened search projection covers elements and direct children."""
    ids = [entry.id for entry in doc.to_search_entries()]
    assert ids[:6] == [
        "Guild",
        "User",
        "Base",
        "Snowflake",
        "FetchOptions",
        "Cacheable",
    ]
    assert "Guild#owner" in ids
    assert "FetchOptions#force" in ids
    assert "Cacheable#clear" in ids
    # Params are not searchable.
    assert "Guild#fetch#options" not in ids
