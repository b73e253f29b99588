import json
import logging
import os
import unittest
from unittest.mock import patch

from core.config_loader import Settings
from core.errors import BadRequestError, NotFoundError, StorageFaultError
from core.observability import JSONFormatter, setup_logging


class SettingsTests(unittest.TestCase):
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            s = Settings(_env_file=None)
        self.assertTrue(s.DATABASE_URL.startswith("sqlite"))
        self.assertEqual(s.BACKEND_CORS_ORIGINS, [])
        self.assertTrue(s.AUTO_CREATE_TABLES)

    def test_environment_overrides(self):
        env = {
            "DATABASE_URL": "postgresql://u:p@db/employees",
            "BACKEND_CORS_ORIGINS": '["http://localhost:5173"]',
            "LOG_LEVEL": "DEBUG",
        }
        with patch.dict(os.environ, env, clear=True):
            s = Settings(_env_file=None)
        self.assertEqual(s.DATABASE_URL, "postgresql://u:p@db/employees")
        self.assertEqual(s.BACKEND_CORS_ORIGINS, ["http://localhost:5173"])
        self.assertEqual(s.LOG_LEVEL, "DEBUG")


class ErrorTests(unittest.TestCase):
    def test_status_codes(self):
        self.assertEqual(NotFoundError().http_status, 404)
        self.assertEqual(BadRequestError().http_status, 400)
        self.assertEqual(StorageFaultError().http_status, 500)

    def test_to_response(self):
        self.assertEqual(
            NotFoundError("employee not found").to_response(),
            {"detail": "employee not found", "code": "NOT_FOUND", "category": "resource_not_found"},
        )


class JSONFormatterTests(unittest.TestCase):
    def test_extra_fields_are_surfaced(self):
        record = logging.LogRecord("employee.service", logging.INFO, __file__, 1, "employee created", None, None)
        record.employee_id = 7
        out = json.loads(JSONFormatter().format(record))
        self.assertEqual(out["message"], "employee created")
        self.assertEqual(out["employee_id"], 7)
        self.assertEqual(out["level"], "INFO")


class SetupLoggingTests(unittest.TestCase):
    def setUp(self):
        root = logging.getLogger()
        self.addCleanup(root.setLevel, root.level)
        self.addCleanup(self._drop_installed)

    def _drop_installed(self):
        for h in list(logging.root.handlers):
            if getattr(h, "installed_by_setup_logging", False):
                logging.root.removeHandler(h)

    def _installed(self):
        return [h for h in logging.root.handlers if getattr(h, "installed_by_setup_logging", False)]

    def test_repeated_setup_keeps_a_single_handler(self):
        setup_logging("INFO", "json")
        setup_logging("DEBUG", "text")
        installed = self._installed()
        self.assertEqual(len(installed), 1)
        self.assertNotIsInstance(installed[0].formatter, JSONFormatter)
        self.assertEqual(logging.root.level, logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
