"""
Unit tests for input validation helpers.

This suite covers:
- Normalizing tag names given as a string, a list, or nothing
- Rejecting malformed tag names as configuration errors
- Normalizing and rejecting attribute names
"""

import pytest

from tagattrs.exceptions import ConfigurationError
from tagattrs.utils import validate_attribute_names, validate_tag_names


@pytest.mark.parametrize(
    ("tags", "expected"),
    [
        (None, ()),
        ("t1", ("t1",)),
        (["t1", "t2", "t1"], ("t1", "t2", "t1")),
        (("a",), ("a",)),
    ],
)
def test_validate_tag_names(tags, expected):
    """Tags are normalized to a tuple, keeping order and duplicates."""
    assert validate_tag_names(tags) == expected


@pytest.mark.parametrize("tags", [5, b"t1", ["t1", None], [""]])
def test_validate_tag_names_rejects(tags):
    """Anything but strings is a configuration error."""
    with pytest.raises(ConfigurationError):
        validate_tag_names(tags)


def test_validate_attribute_names():
    """Attribute names are normalized and deduplicated in order."""
    assert validate_attribute_names("a") == ("a",)
    assert validate_attribute_names(["b", "a", "b"]) == ("b", "a")


@pytest.mark.parametrize("names", [[], "not valid", ["__dunder__"], [3]])
def test_validate_attribute_names_rejects(names):
    """Empty, non-identifier and special names are refused."""
    with pytest.raises(ValueError):
        validate_attribute_names(names)
