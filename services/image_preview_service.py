"""
Image preview probing.

The UI shows a preview for every image slot (main image, gallery slots).
Whether a user-entered URL loads is checked asynchronously, one probe per URL,
with no ordering between probes. Each result is written back only to the slot
that asked for it, and only if that slot still holds the same URL; results for
removed or re-edited slots are dropped on arrival.

Probe failures end in PreviewStatus.UNAVAILABLE and never reach validation.
"""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Iterable, Optional
from urllib.parse import urlencode

import httpx
import structlog

from config import Settings, get_settings

logger = structlog.get_logger(__name__)

LOCAL_REFERENCE_PREFIXES = ("blob:", "data:")


class PreviewStatus(str, Enum):
    """Preview state of one image slot."""
    PENDING = "pending"
    LOADED = "loaded"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class SlotPreview:
    url: str
    status: PreviewStatus


def main_slot(draft_index: int) -> tuple:
    return (draft_index, "main")


def gallery_slot(draft_index: int, slot_index: int) -> tuple:
    return (draft_index, "gallery", slot_index)


def is_local_reference(url: str) -> bool:
    """Same-session upload references resolve without a network call."""
    return url.startswith(LOCAL_REFERENCE_PREFIXES)


def proxied_image_url(
    url: Optional[str],
    proxy_url: Optional[str] = None
) -> Optional[str]:
    """
    Route an external image URL through the image proxy.

    - None / "" → None
    - blob:/data: references → unchanged
    - no proxy configured → unchanged

    Args:
        url: Image reference
        proxy_url: Proxy endpoint; defaults to settings.image_proxy_url
    """
    if not url:
        return None
    if is_local_reference(url):
        return url
    proxy = proxy_url if proxy_url is not None else get_settings().image_proxy_url
    if not proxy:
        return url
    return f"{proxy}?{urlencode({'url': url})}"


class ImagePreviewTracker:
    """
    Per-slot preview state for one listing session.

    Single writer: the tracker is owned by the UI event loop and has no locks.
    """

    def __init__(self):
        self._slots: dict[Hashable, SlotPreview] = {}
        self._tasks: set[asyncio.Task] = set()

    def begin(self, slot: Hashable, url: str) -> None:
        """Mark slot as waiting on url. Replaces any earlier URL."""
        self._slots[slot] = SlotPreview(url=url, status=PreviewStatus.PENDING)

    def record(self, slot: Hashable, url: str, loaded: bool) -> bool:
        """
        Store a probe result.

        Returns:
            False if the slot was removed or now holds another URL
        """
        current = self._slots.get(slot)
        if current is None or current.url != url:
            logger.debug("preview_result_discarded", slot=slot, url=url)
            return False

        status = PreviewStatus.LOADED if loaded else PreviewStatus.UNAVAILABLE
        self._slots[slot] = SlotPreview(url=url, status=status)
        return True

    def remove(self, slot: Hashable) -> None:
        self._slots.pop(slot, None)

    def retain(self, live_slots: Iterable[Hashable]) -> None:
        """Drop every slot not in live_slots (after drafts or images are removed)."""
        live = set(live_slots)
        for slot in [s for s in self._slots if s not in live]:
            del self._slots[slot]

    def status(self, slot: Hashable) -> Optional[PreviewStatus]:
        preview = self._slots.get(slot)
        return preview.status if preview else None

    def keep(self, task: asyncio.Task) -> None:
        """Hold a reference to a fire-and-forget task until it finishes."""
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    @property
    def pending_tasks(self) -> int:
        return len(self._tasks)


def create_probe_client(settings: Optional[Settings] = None) -> httpx.AsyncClient:
    """HTTP client configured for preview probes."""
    settings = settings or get_settings()
    return httpx.AsyncClient(
        timeout=settings.image_probe_timeout_seconds,
        follow_redirects=True,
    )


async def probe_image_url(
    url: str,
    client: httpx.AsyncClient,
    proxy_url: Optional[str] = None
) -> bool:
    """
    Check whether url resolves to a loadable image.

    Success means a 2xx response with an image/* content type. Only the
    response headers are read; the body is never downloaded.
    Network errors and timeouts count as failure; nothing is raised.
    """
    if is_local_reference(url):
        return True

    target = proxied_image_url(url, proxy_url)
    try:
        async with client.stream("GET", target, headers={"Accept": "image/*"}) as response:
            content_type = response.headers.get("content-type", "")
            loaded = response.is_success and content_type.startswith("image/")
    except httpx.HTTPError as e:
        logger.warning("image_probe_failed", url=url, error=str(e))
        return False

    if not loaded:
        logger.info(
            "image_probe_unavailable",
            url=url,
            status_code=response.status_code,
            content_type=content_type,
        )
    return loaded


async def _probe_and_record(
    tracker: ImagePreviewTracker,
    slot: Hashable,
    url: str,
    client: httpx.AsyncClient,
    proxy_url: Optional[str]
) -> Optional[PreviewStatus]:
    loaded = await probe_image_url(url, client, proxy_url)
    tracker.record(slot, url, loaded)
    return tracker.status(slot)


async def refresh_preview(
    tracker: ImagePreviewTracker,
    slot: Hashable,
    url: str,
    client: httpx.AsyncClient,
    proxy_url: Optional[str] = None
) -> Optional[PreviewStatus]:
    """
    Probe url for slot and wait for the result.

    Returns:
        The slot's status afterwards, None if the slot was removed meanwhile
    """
    tracker.begin(slot, url)
    return await _probe_and_record(tracker, slot, url, client, proxy_url)


def schedule_probe(
    tracker: ImagePreviewTracker,
    slot: Hashable,
    url: str,
    client: httpx.AsyncClient,
    proxy_url: Optional[str] = None
) -> asyncio.Task:
    """
    Start a fire-and-forget probe on the running event loop.

    The slot is marked pending immediately; the result lands whenever the
    probe finishes. There is no cancellation.
    """
    tracker.begin(slot, url)
    task = asyncio.get_running_loop().create_task(
        _probe_and_record(tracker, slot, url, client, proxy_url)
    )
    tracker.keep(task)
    return task
