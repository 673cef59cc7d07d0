"""Tests for the tag type catalog."""

import pytest

from activity_api.application.use_cases.activity_types import list_activity_types

FULL_CATALOG = [
    "tag_zaji",
    "tag_origin",
    "tag_food",
    "tag_trip",
    "tag_finance",
    "tag_others",
]


def test_group_scope_gets_the_reduced_catalog() -> None:
    tags = list_activity_types("group")

    assert [(tag.type, tag.name) for tag in tags] == [("tag_zaji", "杂记")]


@pytest.mark.parametrize("scope", [None, "just-me", "friends"])
def test_other_scopes_get_the_full_catalog_in_order(scope) -> None:
    assert [tag.type for tag in list_activity_types(scope)] == FULL_CATALOG
