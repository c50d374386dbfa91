"""URL templates for the Avalon web application."""

from __future__ import annotations

from urllib.parse import quote


class AvalonURLs:
    """Builds public, edit and metadata URLs against an Avalon base URL.

    Nothing here is ever fetched; the URLs are handed back to callers.
    """

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")

    def _media_object(self, media_object_id: str) -> str:
        return f"{self.base_url}/media_objects/{quote(media_object_id, safe=':')}"

    def media_object(self, media_object_id: str) -> str:
        return self._media_object(media_object_id)

    def media_object_edit(self, media_object_id: str) -> str:
        return f"{self._media_object(media_object_id)}/edit"

    def media_object_metadata(self, media_object_id: str) -> str:
        return f"{self._media_object(media_object_id)}/content/descMetadata"

    def section(self, media_object_id: str, section_id: str) -> str:
        return (
            f"{self._media_object(media_object_id)}"
            f"/section/{quote(section_id, safe=':')}"
        )

    def section_edit(self, media_object_id: str, section_id: str) -> str:
        return f"{self.section(media_object_id, section_id)}/edit"
