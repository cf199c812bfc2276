# Clapper Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for the Clapper argument parser."""
import logging

logger: logging.Logger = logging.getLogger("clapper")
