"""
KeySwitch persistence: the Firebase Realtime Database REST client and an
in-memory implementation for development and tests.
"""

from __future__ import annotations

import copy
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

import requests

from mechdex.errors import NotFoundError, PersistenceError
from mechdex.fake_data import fake_key_switch
from mechdex.models import KeySwitch

logger = logging.getLogger(__name__)

DEFAULT_COLLECTION = "Switch"


class KeySwitchService(Protocol):
    """Defines the operations the controller needs from the KeySwitch store."""

    def create_key_switch(self, key_switch: KeySwitch) -> KeySwitch:
        ...

    def get_key_switch_by_id(self, key_switch_id: str) -> KeySwitch:
        ...

    def get_all_key_switches(self) -> list[KeySwitch]:
        ...

    def update_key_switch(self, key_switch: KeySwitch) -> KeySwitch:
        ...

    def delete_key_switch_by_id(self, key_switch_id: str) -> None:
        ...


def _require_id(key_switch: KeySwitch) -> str:
    if not key_switch.id:
        raise PersistenceError("Cannot update a KeySwitch without an id")
    return key_switch.id


class FirebaseKeySwitchService:
    """
    KeySwitch store backed by the Firebase Realtime Database REST API.

    Collection reads hit `{base_url}/{collection}.json` and return a map of
    id -> fields. Single item operations hit `{base_url}/{collection}/{id}.json`
    and work on the bare object. Only HTTP 200 is treated as success.

    See https://firebase.google.com/docs/reference/rest/database
    """

    def __init__(
        self,
        base_url: str,
        *,
        collection: str = DEFAULT_COLLECTION,
        auth_token: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        if not base_url:
            raise ValueError("base_url is required")
        self.base_url = base_url.rstrip("/")
        self.collection = collection
        self.auth_token = auth_token
        self.timeout = timeout
        self._session = session or requests.Session()

    def collection_url(self) -> str:
        return f"{self.base_url}/{self.collection}.json"

    def item_url(self, key_switch_id: str) -> str:
        return f"{self.base_url}/{self.collection}/{key_switch_id}.json"

    def create_key_switch(self, key_switch: KeySwitch) -> KeySwitch:
        """
        Push a new child under the collection and assign the generated key.

        Firebase answers a POST with `{"name": "<generated key>"}`.
        """
        response = self._send(
            "POST", self.collection_url(), action="Create", json=key_switch.to_payload()
        )
        body = self._decode(response)
        if not isinstance(body, dict) or not body.get("name"):
            raise PersistenceError(
                "Create response did not contain a generated key",
                status_code=response.status_code,
            )
        key_switch.id = body["name"]
        logger.info("Created KeySwitch %s", key_switch.id)
        return key_switch

    def get_key_switch_by_id(self, key_switch_id: str) -> KeySwitch:
        response = self._send("GET", self.item_url(key_switch_id), action="Get")
        body = self._decode(response)
        if body is None:
            raise NotFoundError(key_switch_id)
        if not isinstance(body, dict):
            raise PersistenceError(
                f"Unexpected value stored for KeySwitch {key_switch_id}",
                status_code=response.status_code,
            )
        # The stored value does not embed its own key.
        return KeySwitch.from_payload(body, key_switch_id)

    def get_all_key_switches(self) -> list[KeySwitch]:
        response = self._send("GET", self.collection_url(), action="Get all")
        body = self._decode(response)
        if not body:
            return []
        if not isinstance(body, dict):
            raise PersistenceError(
                f"Unexpected value stored at {self.collection}",
                status_code=response.status_code,
            )
        key_switches = []
        for key_switch_id, value in body.items():
            if not isinstance(value, dict):
                logger.warning(
                    "Skipping malformed KeySwitch %s in %s", key_switch_id, self.collection
                )
                continue
            key_switches.append(KeySwitch.from_payload(value, key_switch_id))
        return key_switches

    def update_key_switch(self, key_switch: KeySwitch) -> KeySwitch:
        """Overwrite the stored value of an existing KeySwitch."""
        key_switch_id = _require_id(key_switch)
        self._send(
            "PUT", self.item_url(key_switch_id), action="Update", json=key_switch.to_payload()
        )
        logger.info("Updated KeySwitch %s", key_switch_id)
        return key_switch

    def delete_key_switch_by_id(self, key_switch_id: str) -> None:
        # Firebase answers 200 for absent keys as well.
        self._send("DELETE", self.item_url(key_switch_id), action="Delete")
        logger.info("Deleted KeySwitch %s", key_switch_id)

    def _send(
        self, method: str, url: str, *, action: str, json: Optional[dict] = None
    ) -> requests.Response:
        params = {"auth": self.auth_token} if self.auth_token else None
        logger.debug("%s %s", method, url)
        try:
            response = self._session.request(
                method, url, json=json, params=params, timeout=self.timeout
            )
        except requests.RequestException as exc:
            logger.warning("%s request to %s failed: %s", method, url, exc)
            raise PersistenceError(f"{action} request failed: {exc}") from exc
        if response.status_code != 200:
            logger.warning("%s %s returned %s", method, url, response.status_code)
            raise PersistenceError(
                f"{action} was not successful with status code: {response.status_code}",
                status_code=response.status_code,
            )
        return response

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise PersistenceError(
                "Response body is not valid JSON", status_code=response.status_code
            ) from exc


@dataclass
class InMemoryKeySwitchService:
    """Dict-backed test double following the same contract as Firebase."""

    seed_count: int = 0
    stored_objects: dict = field(default_factory=dict)

    def __post_init__(self):
        for _ in range(self.seed_count):
            self.create_key_switch(fake_key_switch())

    def create_key_switch(self, key_switch: KeySwitch) -> KeySwitch:
        key_switch.id = f"-{uuid.uuid4().hex[:19]}"
        self.stored_objects[key_switch.id] = copy.deepcopy(key_switch.to_payload())
        return key_switch

    def get_key_switch_by_id(self, key_switch_id: str) -> KeySwitch:
        stored = self.stored_objects.get(key_switch_id)
        if stored is None:
            raise NotFoundError(key_switch_id)
        return KeySwitch.from_payload(stored, key_switch_id)

    def get_all_key_switches(self) -> list[KeySwitch]:
        return [
            KeySwitch.from_payload(stored, key_switch_id)
            for key_switch_id, stored in self.stored_objects.items()
        ]

    def update_key_switch(self, key_switch: KeySwitch) -> KeySwitch:
        key_switch_id = _require_id(key_switch)
        # PUT creates the value when it is absent.
        self.stored_objects[key_switch_id] = copy.deepcopy(key_switch.to_payload())
        return key_switch

    def delete_key_switch_by_id(self, key_switch_id: str) -> None:
        self.stored_objects.pop(key_switch_id, None)

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        self.stored_objects.clear()
