# SimParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for SimParse."""
import logging

logger: logging.Logger = logging.getLogger("simparse")
