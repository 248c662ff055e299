import unittest

from catering_server.config import Settings


class TestSettings(unittest.TestCase):

    def test_production_defaults_are_flagged(self):
        settings = Settings(ENVIRONMENT="production", DATABASE_URL="sqlite://",
                            AUTO_CREATE_TABLES=True)
        self.assertTrue(settings.is_production)
        warnings = settings.validate_settings()
        self.assertEqual(len(warnings), 3)
        self.assertTrue(warnings[0].startswith("CRITICAL"))

    def test_development_has_no_warnings(self):
        settings = Settings(ENVIRONMENT="development")
        self.assertFalse(settings.is_production)
        self.assertEqual(settings.validate_settings(), [])


if __name__ == "__main__":
    unittest.main()
