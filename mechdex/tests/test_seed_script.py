import importlib.util
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from mechdex.errors import PersistenceError
from mechdex.service import InMemoryKeySwitchService

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "seed_key_switches.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("seed_key_switches", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class SeedKeySwitchesScriptTests(unittest.TestCase):
    def setUp(self):
        self.script = _load_script()
        self.service = InMemoryKeySwitchService()

    def _run(self, *argv):
        with patch.object(
            self.script, "get_key_switch_service", return_value=self.service
        ), patch("sys.argv", ["seed_key_switches.py", *argv]):
            return self.script.main()

    def test_dry_run_does_not_write(self):
        self.assertEqual(self._run("--num", "3", "--dry-run"), 0)
        self.assertEqual(self.service.get_all_key_switches(), [])

    def test_seeds_requested_number(self):
        self.assertEqual(self._run("-n", "4", "--list"), 0)
        snapshot = self.service.get_all_key_switches()
        self.assertEqual(len(snapshot), 4)
        self.assertTrue(all(k.id and k.switch_name for k in snapshot))

    def test_store_failure_returns_exit_code_1(self):
        self.service = MagicMock()
        self.service.create_key_switch.side_effect = PersistenceError(
            "Create was not successful with status code: 401", status_code=401
        )
        self.assertEqual(self._run("-n", "1"), 1)


if __name__ == "__main__":
    unittest.main()
