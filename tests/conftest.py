"""Shared fixtures: a small documentation payload and its index."""

from typing import Any

import pytest

from apidoc.doc import Doc

ORIGIN = "https://raw.githubusercontent.com/Example/example-lib/docs/master.json"


def build_payload() -> dict[str, Any]:
    """Return a payload covering every element kind."""
    return {
        "classes": [
            {
                "name": "Guild",
                "description": "Represents a guild.\nOwned by a {@link User}.",
                "meta": {"path": "src/structures", "file": "Guild.js", "line": 12},
                "extends": [[["Base"]]],
                "props": [
                    {
                        "name": "owner",
                        "description": "The owner of the guild",
                        "type": [[["User"]]],
                    },
                    {"name": "name", "type": [[["string"]]]},
                    {
                        "name": "members",
                        "type": [
                            [
                                ["Collection", "<"],
                                ["Snowflake", ", "],
                                ["User", ">"],
                            ]
                        ],
                    },
                    {"name": "_secret", "access": "private", "type": [[["string"]]]},
                    {"name": "instances", "scope": "static", "type": [[["number"]]]},
                ],
                "methods": [
                    {
                        "name": "fetch",
                        "description": "Fetches the guild.",
                        "params": [
                            {
                                "name": "options",
                                "description": "Fetch options",
                                "optional": True,
                                "type": [[["FetchOptions"]]],
                            },
                        ],
                        "returns": {
                            "types": [[["Promise", "<"], ["Guild", ">"]]],
                            "description": "The fetched guild",
                        },
                        "examples": ["guild.fetch().then(console.log);"],
                    },
                    {"name": "leave", "description": "Leaves the guild."},
                    {"name": "_patch", "access": "private"},
                ],
                "events": [
                    {
                        "name": "update",
                        "description": "Emitted when the guild changes.",
                        "params": [{"name": "oldGuild", "type": [[["Guild"]]]}],
                    },
                ],
            },
            {
                "name": "User",
                "description": "Represents a user.",
                "props": [
                    {"name": "username", "type": [[["string"]]]},
                    {"name": "id", "type": [[["Snowflake"]]]},
                ],
                "methods": [{"name": "toString", "returns": [[["string"]]]}],
            },
            {"name": "Base", "description": "Base structure."},
        ],
        "typedefs": [
            {
                "name": "Snowflake",
                "description": "A Twitter snowflake.",
                "type": [[["string"]]],
            },
            {
                "name": "FetchOptions",
                "type": [[["Object"]]],
                "props": [
                    {"name": "force", "type": [[["boolean"]]], "optional": True},
                ],
            },
        ],
        "interfaces": [
            {
                "name": "Cacheable",
                "description": "Something that can be cached.",
                "methods": [{"name": "clear"}],
            },
        ],
    }


@pytest.fixture
def payload() -> dict[str, Any]:
    """Fixture providing a fresh copy of the sample payload."""
    return build_payload()


@pytest.fixture
def doc(payload: dict[str, Any]) -> Doc:
    """Fixture providing the index built from the sample payload."""
    return Doc(ORIGIN, payload)
