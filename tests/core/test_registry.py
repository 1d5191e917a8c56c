"""
Unit tests for TagRegistry, the table of tag names recognized per class or role.

This suite covers:
- First registration installing tag tracking exactly once
- Additive re-registration preserving order and duplicates
- All-or-nothing registration when installation or validation fails
- Lookup of targets that never registered
- Logging behavior for registrations
"""

import pytest

from tagattrs.core import Declarable, TagRegistry
from tagattrs.exceptions import ConfigurationError, InstallationError


@pytest.fixture
def target():
    """Fresh declarable class with no tag tracking."""

    class Target(Declarable):
        pass

    return Target


def test_register_creates_entry(target):
    """First registration stores the tags and runs the installer once."""
    installed = []
    registry = TagRegistry(installer=installed.append)

    assert registry.register(target, ["t1", "t2"]) == ("t1", "t2")
    assert registry.lookup(target) == ("t1", "t2")
    assert registry.is_tracking(target)
    assert target in registry
    assert installed == [target]


def test_register_is_additive(target):
    """Registering again appends tags, keeps duplicates, and does not reinstall."""
    installed = []
    registry = TagRegistry(installer=installed.append)
    registry.register(target, ["t1", "t2"])
    registry.register(target, ["t2", "t3"])

    assert registry.lookup(target) == ("t1", "t2", "t2", "t3")
    assert installed == [target]
    assert len(registry) == 1


def test_register_single_string(target):
    """A single tag name does not need to be wrapped in a list."""
    registry = TagRegistry()
    registry.register(target, "only")
    assert registry.lookup(target) == ("only",)


def test_lookup_unknown_target(target):
    """Targets that never registered have no tags and are not tracking."""
    registry = TagRegistry()
    assert registry.lookup(target) == ()
    assert not registry.is_tracking(target)
    assert target not in registry
    assert 42 not in registry
    assert len(registry) == 0


def test_failed_install_leaves_no_entry(target):
    """An installer failure aborts the registration."""

    def installer(t):
        raise InstallationError("boom")

    registry = TagRegistry(installer=installer)
    with pytest.raises(InstallationError, match="boom"):
        registry.register(target, ["t1"])
    assert not registry.is_tracking(target)


def test_rejects_malformed_tag_names(target):
    """Non-string tag names are a configuration error and nothing is stored."""
    registry = TagRegistry()
    with pytest.raises(ConfigurationError, match="non-empty strings"):
        registry.register(target, ["t1", 3])
    assert not registry.is_tracking(target)


def test_iterates_over_registered_targets(target):
    """Iteration yields every registered target."""
    registry = TagRegistry()
    registry.register(target, "t1")
    assert list(registry) == [target]


def test_logs_registration(target, caplog):
    """Registrations are logged at DEBUG level when verbose."""
    registry = TagRegistry(verbose=True)
    with caplog.at_level("DEBUG"):
        registry.register(target, ["t1"])
        registry.register(target, ["t2"])
    assert "Target with tags ['t1']" in caplog.text
    assert "Target with ['t2']" in caplog.text
