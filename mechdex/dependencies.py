"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

import logging

from mechdex.config import get_settings
from mechdex.service import (
    FirebaseKeySwitchService,
    InMemoryKeySwitchService,
    KeySwitchService,
)

logger = logging.getLogger(__name__)

_key_switch_service: KeySwitchService | None = None


def get_key_switch_service() -> KeySwitchService:
    """
    Return a singleton KeySwitch service so in-memory data persists across requests.
    """
    global _key_switch_service
    if _key_switch_service:
        return _key_switch_service

    settings = get_settings()
    if settings.use_in_memory_backends or not settings.firebase_rtdb_base_url:
        logger.info("Using in-memory KeySwitch store")
        _key_switch_service = InMemoryKeySwitchService(
            seed_count=settings.in_memory_seed_count
        )
    else:
        _key_switch_service = FirebaseKeySwitchService(
            settings.firebase_rtdb_base_url,
            collection=settings.key_switch_collection,
            auth_token=settings.firebase_auth_token,
            timeout=settings.request_timeout_seconds,
        )
    return _key_switch_service
