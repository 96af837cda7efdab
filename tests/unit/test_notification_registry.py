"""Tests for specreport.formatters.notifications module."""

from specreport.formatters import BaseFormatter, BaseTextFormatter
from specreport.formatters.notifications import (
    Notification,
    NotificationRegistry,
    coerce_notifications,
    formatter,
    get_notification_registry,
)


class Root:
    pass


class Child(Root):
    pass


class GrandChild(Child):
    pass


class TestNotificationsFor:
    """Tests for the ancestry union of registered notifications."""

    def test_union_of_class_and_ancestor(self):
        registry = NotificationRegistry()
        registry.register(Root, Notification.START)
        registry.register(Child, Notification.EXAMPLE_PASSED)

        assert registry.notifications_for(Child) == {Notification.START, Notification.EXAMPLE_PASSED}

    def test_ancestor_does_not_inherit_from_subclass(self):
        registry = NotificationRegistry()
        registry.register(Root, Notification.START)
        registry.register(Child, Notification.EXAMPLE_PASSED)

        assert registry.notifications_for(Root) == {Notification.START}

    def test_skips_unregistered_levels(self):
        registry = NotificationRegistry()
        registry.register(Root, Notification.START)
        registry.register(GrandChild, Notification.CLOSE)

        assert registry.notifications_for(GrandChild) == {Notification.START, Notification.CLOSE}

    def test_unregistered_hierarchy_is_empty(self):
        assert NotificationRegistry().notifications_for(GrandChild) == frozenset()

    def test_mixins_contribute(self):
        class Mixin:
            pass

        class Combined(Mixin, Child):
            pass

        registry = NotificationRegistry()
        registry.register(Mixin, Notification.SEED)
        registry.register(Root, Notification.START)

        assert registry.notifications_for(Combined) == {Notification.SEED, Notification.START}

    def test_builtin_base_classes(self):
        notifications = get_notification_registry().notifications_for(BaseTextFormatter)

        assert Notification.START in notifications
        assert Notification.CLOSE in notifications
        assert Notification.DUMP_SUMMARY in notifications
        assert Notification.EXAMPLE_PASSED not in notifications


class TestRegistration:
    """Tests for registering and inspecting entries."""

    def test_reregistration_overwrites(self):
        registry = NotificationRegistry()
        registry.register(Root, Notification.START)
        registry.register(Root, Notification.STOP)

        assert registry.get(Root) == {Notification.STOP}

    def test_is_registered_through_ancestor(self):
        registry = NotificationRegistry()
        registry.register(Root, Notification.START)

        assert registry.is_registered(GrandChild)
        assert GrandChild not in registry

    def test_empty_registration_is_recorded(self):
        registry = NotificationRegistry()
        registry.register(Root)

        assert registry.is_registered(Root)
        assert registry.notifications_for(Root) == frozenset()

    def test_accepts_arbitrary_tags(self):
        registry = NotificationRegistry()
        registry.register(Root, "custom_event")

        assert registry.notifications_for(Child) == {"custom_event"}

    def test_entries_view_is_read_only(self):
        registry = NotificationRegistry()
        registry.register(Root, Notification.START)

        entries = registry.entries()
        assert dict(entries) == {Root: frozenset({Notification.START})}
        assert not hasattr(entries, "__setitem__")

    def test_snapshot_is_not_affected_by_later_registration(self):
        registry = NotificationRegistry()
        registry.register(Root, Notification.START)
        snapshot = registry.snapshot()

        registry.register(Child, Notification.STOP)

        assert Child not in snapshot
        assert len(snapshot) == 1
        assert len(registry) == 2

    def test_builtin_formatters_registered(self):
        assert BaseFormatter in get_notification_registry()


class TestFormatterDecorator:
    """Tests for the @formatter decorator."""

    def test_registers_class(self):
        registry = NotificationRegistry()

        @formatter(Notification.EXAMPLE_FAILED, registry=registry)
        class FailuresOnly(BaseFormatter):
            pass

        assert registry.notifications_for(FailuresOnly) == {Notification.EXAMPLE_FAILED}

    def test_returns_original_class(self):
        registry = NotificationRegistry()

        @formatter(registry=registry)
        class Quiet(BaseFormatter):
            pass

        assert Quiet.__name__ == "Quiet"
        assert isinstance(Quiet("out"), BaseFormatter)


def test_coerce_notifications_maps_known_names():
    assert coerce_notifications(["example_passed", Notification.CLOSE, "unknown"]) == [
        Notification.EXAMPLE_PASSED,
        Notification.CLOSE,
        "unknown",
    ]
