import unittest

from mechdex.errors import NotFoundError, PersistenceError, describe_error_chain
from mechdex.models import KeySwitch


class DescribeErrorChainTests(unittest.TestCase):
    def test_no_cause_returns_empty(self):
        self.assertEqual(describe_error_chain(RuntimeError("boom")), "")

    def test_walks_explicit_causes(self):
        try:
            try:
                try:
                    raise OSError("socket closed")
                except OSError as exc:
                    raise ValueError("bad body") from exc
            except ValueError as exc:
                raise RuntimeError("save failed") from exc
        except RuntimeError as exc:
            detail = describe_error_chain(exc)

        self.assertEqual(
            detail,
            "save failed    Caused by: bad body    Caused by: socket closed",
        )

    def test_suppressed_context_is_ignored(self):
        try:
            try:
                raise OSError("hidden")
            except OSError:
                raise RuntimeError("visible") from None
        except RuntimeError as exc:
            self.assertEqual(describe_error_chain(exc), "")

    def test_not_found_is_a_persistence_error(self):
        exc = NotFoundError("-Nabc")
        self.assertIsInstance(exc, PersistenceError)
        self.assertEqual(str(exc), "KeySwitch with id of -Nabc not found")


class KeySwitchPayloadTests(unittest.TestCase):
    def test_payload_uses_wire_names_and_excludes_id(self):
        key_switch = KeySwitch(id="-N1", switch_name="Quiet Red", switch_travel="2.0mm")
        payload = key_switch.to_payload()
        self.assertNotIn("id", payload)
        self.assertEqual(payload["switchName"], "Quiet Red")
        self.assertEqual(payload["switchTravel"], "2.0mm")
        self.assertIsNone(payload["company"])

    def test_from_payload_ignores_unknown_fields(self):
        key_switch = KeySwitch.from_payload(
            {"switchName": "Quiet Red", "colour": "red"}, "-N1"
        )
        self.assertEqual(key_switch.id, "-N1")
        self.assertEqual(key_switch.switch_name, "Quiet Red")
        self.assertFalse(key_switch.is_pending)
        self.assertTrue(KeySwitch().is_pending)

    def test_from_payload_converts_non_string_values(self):
        key_switch = KeySwitch.from_payload(
            {"switchName": 42, "actuationForce": 45.5, "company": True}, "-N1"
        )
        self.assertEqual(key_switch.switch_name, "42")
        self.assertEqual(key_switch.actuation_force, "45.5")
        self.assertEqual(key_switch.company, "true")


if __name__ == "__main__":
    unittest.main()
