import io
import logging
import unittest
from contextlib import redirect_stderr

from wordcross.utils.logger import (
    ROOT_LOGGER_NAME,
    configure_logging,
    get_logger,
    resolve_level,
)


class LoggerTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self.addCleanup(setattr, root, "handlers", list(root.handlers))
        self.addCleanup(root.setLevel, root.level)

    def test_resolve_level(self) -> None:
        self.assertEqual(resolve_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_level(" Warning "), logging.WARNING)
        self.assertEqual(resolve_level(logging.ERROR), logging.ERROR)
        with self.assertRaises(ValueError):
            resolve_level("chatty")

    def test_configure_logging_writes_to_stderr(self) -> None:
        stream = io.StringIO()
        with redirect_stderr(stream):
            handler = configure_logging("WARNING")
        self.assertEqual(logging.getLogger().handlers, [handler])
        self.assertEqual(logging.getLogger().level, logging.WARNING)

        logger = get_logger("wordcross.tests")
        logger.info("hidden")
        logger.warning("shown")
        output = stream.getvalue()
        self.assertNotIn("hidden", output)
        self.assertIn("| WARNING | wordcross.tests | shown", output)

    def test_default_logger_name(self) -> None:
        self.assertEqual(get_logger().name, ROOT_LOGGER_NAME)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
