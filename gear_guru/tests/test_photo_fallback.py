from __future__ import annotations

from gear_guru.core.events import EventLog, ImageFallbackTriggered
from gear_guru.core.models import ProfilePhotoSource
from gear_guru.core.photo import ProfilePhoto


def test_primary_falls_back_then_shows_placeholder() -> None:
    log = EventLog()
    photo = ProfilePhoto(ProfilePhotoSource(primary="a.jpg", fallback="b.jpg"), item_id="profile-photo", sink=log)
    assert (photo.stage, photo.source, photo.alt_source) == ("primary", "a.jpg", "b.jpg")

    assert photo.on_load_error() == "fallback"
    assert photo.source == "b.jpg"
    assert photo.alt_source is None

    assert photo.on_load_error() == "placeholder"
    assert photo.source is None

    assert log.events == [
        ImageFallbackTriggered(item_id="profile-photo", stage="fallback", source="b.jpg"),
        ImageFallbackTriggered(item_id="profile-photo", stage="placeholder", source=None),
    ]


def test_errors_after_placeholder_are_ignored() -> None:
    log = EventLog()
    photo = ProfilePhoto(ProfilePhotoSource(primary="a.jpg", fallback="b.jpg"), item_id="profile-photo", sink=log)
    for _ in range(5):
        photo.on_load_error()

    assert photo.stage == "placeholder"
    assert len(log) == 2


def test_primary_without_fallback_goes_straight_to_placeholder() -> None:
    log = EventLog()
    photo = ProfilePhoto(ProfilePhotoSource(primary="a.jpg"), item_id="member", sink=log)

    assert photo.on_load_error() == "placeholder"
    assert [event.stage for event in log.events] == ["placeholder"]


def test_missing_photo_starts_on_placeholder() -> None:
    log = EventLog()
    photo = ProfilePhoto(None, item_id="profile-photo", sink=log)

    assert photo.stage == "placeholder"
    assert photo.source is None
    photo.on_load_error()
    assert len(log) == 0
