"""Notifier timing with an injected clock."""
from pentopublic.dashboard.notifications import NotificationKind, Notifier

from conftest import FakeClock


def test_notification_expires_after_duration():
    clock = FakeClock()
    notifier = Notifier(duration=4, clock=clock)
    notifier.show("Saved", NotificationKind.SUCCESS)

    clock.now = 3.99
    assert notifier.current().message == "Saved"
    clock.now = 4.0
    assert notifier.current() is None


def test_newer_notification_replaces_and_restarts_countdown():
    clock = FakeClock()
    notifier = Notifier(duration=4, clock=clock)

    notifier.show("A", "success")
    clock.now = 2.5
    notifier.show("B", "error")

    clock.now = 4.5
    note = notifier.current()
    assert note.message == "B"
    assert note.kind is NotificationKind.ERROR

    clock.now = 6.49
    assert notifier.current().message == "B"
    clock.now = 6.5
    assert notifier.current() is None


def test_default_kind_is_info_and_clear_hides_it():
    notifier = Notifier(duration=4, clock=FakeClock())
    assert notifier.show("hello").kind is NotificationKind.INFO
    notifier.clear()
    assert notifier.current() is None


def test_duration_defaults_to_settings(monkeypatch):
    monkeypatch.setattr("pentopublic.config.settings.NOTIFICATION_SECONDS", 7.5)
    assert Notifier().duration == 7.5
