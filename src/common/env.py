"""Environment configuration interface for checkstyle-report.

All environment variable access goes through this module.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "on"}


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def log_level() -> str:
        """Get the logging level.

        Returns:
            Level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def report_format() -> str:
        """Get the default output format of the CLI (console or json).

        Returns:
            Output format, defaults to 'console'
        """
        return os.getenv("CHECKSTYLE_REPORT_FORMAT", "console").lower()

    @staticmethod
    def show_low_severity() -> bool:
        """Whether low severity issues are printed by the console reporter.

        Returns:
            True unless CHECKSTYLE_SHOW_LOW is set to a false value
        """
        return os.getenv("CHECKSTYLE_SHOW_LOW", "true").strip().lower() in _TRUE_VALUES


# Singleton instance for convenient access
env = Environment()
