from __future__ import annotations

import logging
from typing import Literal

from .events import EventSink, ImageFallbackTriggered, discard_event
from .models import ProfilePhotoSource

logger = logging.getLogger(__name__)

PhotoStage = Literal["primary", "fallback", "placeholder"]


class ProfilePhoto:
    """Single-step image fallback for the member photo.

    A load error on the primary image switches to the designated fallback
    image. A load error on the fallback, or on a primary with no fallback,
    switches to the placeholder silhouette icon; that stage has nothing left
    to fail, so later errors are ignored.
    """

    def __init__(self, source: ProfilePhotoSource | None, item_id: str, sink: EventSink = discard_event) -> None:
        self.item_id = item_id
        self._photo_source = source
        self._sink = sink
        self._stage: PhotoStage = "primary" if source is not None else "placeholder"

    @property
    def stage(self) -> PhotoStage:
        return self._stage

    @property
    def source(self) -> str | None:
        if self._photo_source is None or self._stage == "placeholder":
            return None
        if self._stage == "fallback":
            return self._photo_source.fallback
        return self._photo_source.primary

    @property
    def alt_source(self) -> str | None:
        if self._photo_source is None or self._stage != "primary":
            return None
        return self._photo_source.fallback

    def on_load_error(self) -> PhotoStage:
        if self._stage == "placeholder":
            logger.debug("Ignoring load error for %s; placeholder already shown.", self.item_id)
            return self._stage
        has_fallback = self._photo_source is not None and bool(self._photo_source.fallback)
        if self._stage == "primary" and has_fallback:
            self._stage = "fallback"
        else:
            self._stage = "placeholder"
        logger.info("Photo %s switched to %s.", self.item_id, self._stage)
        self._sink(ImageFallbackTriggered(item_id=self.item_id, stage=self._stage, source=self.source))
        return self._stage
