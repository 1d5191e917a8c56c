"""
Unit tests for AttributeInterceptor, the declaration hook that records tags.

This suite covers:
- Installation guards (unsupported targets, idempotent installs)
- Recording only recognized tags, leaving other options untouched
- Declarations of several attributes at once
- Tags registered after some declarations were made
- Logging behavior for tagged declarations
"""

import pytest

from tagattrs.core import Declarable, TaggingService, has
from tagattrs.exceptions import InstallationError
from tagattrs.schema import TagRecord


@pytest.fixture
def service():
    """Standalone service, independent of the process-wide one."""
    return TaggingService()


@pytest.fixture
def target():
    """Fresh declarable class with no tag tracking."""

    class Target(Declarable):
        pass

    return Target


def test_install_rejects_plain_class(service):
    """Classes outside the declarable hierarchy cannot be intercepted."""
    with pytest.raises(InstallationError, match="error installing tag tracking"):
        service.interceptor.install(dict)


def test_install_rejects_instance(service, target):
    """Instances cannot be intercepted; tagging is per class."""
    with pytest.raises(InstallationError):
        service.interceptor.install(target())


def test_install_is_idempotent(service, target):
    """Installing twice leaves a single hook and opens the chain."""
    service.interceptor.install(target)
    service.interceptor.install(target)
    assert target.__declaration_hooks__.count(service.interceptor.intercept) == 1
    assert service.chain.participates(target)


def test_records_recognized_tags_only(service, target):
    """Only registered tag names become records; other options pass through."""
    service.track_tags(target, tags=["t1", "t2"])
    has(target, "a", t1="a.t1", default=3, other="x")

    assert service.tag_list(target) == [TagRecord("t1", frozenset({"a"}), "a.t1")]
    assert target.a.options["other"] == "x"
    assert target.a.options["t1"] == "a.t1"
    assert target().a == 3


def test_multi_name_declaration(service, target):
    """Attributes declared together share one record."""
    service.track_tags(target, tags="t1")
    has(target, ["a", "b"], t1="shared")

    (record,) = service.tag_list(target)
    assert record.attributes == {"a", "b"}
    assert record.value == "shared"


def test_declarations_before_tracking_are_not_recorded(service, target):
    """Only declarations made after tracking was requested are seen."""
    has(target, "early", t1="x")
    service.track_tags(target, tags="t1")
    has(target, "late", t1="y")

    assert [record.attributes for record in service.tag_list(target)] == [frozenset({"late"})]


def test_tags_added_later_apply_to_later_declarations(service, target):
    """Tag names are read from the registry at declaration time."""
    service.track_tags(target, tags="t1")
    has(target, "a", t1=1, t2=2)
    service.track_tags(target, tags="t2")
    has(target, "b", t1=3, t2=4)

    assert [(record.tag, record.value) for record in service.tag_list(target)] == [("t1", 1), ("t1", 3), ("t2", 4)]


def test_duplicate_tag_names_record_once(service, target):
    """A tag registered twice still yields one record per declaration."""
    service.track_tags(target, tags=["t1", "t1"])
    has(target, "a", t1=1)
    assert len(service.tag_list(target)) == 1


def test_untagged_declaration_adds_no_contributor(service, target):
    """Declarations without any tag leave the chain untouched."""
    service.track_tags(target, tags="t1")
    has(target, "plain", default=0)
    assert service.chain.contributors(target) == ()


def test_hooks_are_not_inherited(service, target):
    """Subclasses of a tracking class do not record their own declarations."""
    service.track_tags(target, tags="t1")

    class Child(target):
        pass

    has(Child, "c", t1="c.t1")
    assert service.chain.contributors(Child) == ()
    assert service.tag_list(Child) == []


def test_logs_tagged_declaration(target, caplog):
    """Tagged declarations are logged at DEBUG level when verbose."""
    service = TaggingService(verbose=True)
    service.track_tags(target, tags="t1")
    with caplog.at_level("DEBUG"):
        has(target, "a", t1=1)
    assert "Target.a tagged ['t1']" in caplog.text
