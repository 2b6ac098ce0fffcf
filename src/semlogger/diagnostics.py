"""
Operational channel for problems inside the logging path itself
"""

from loguru import logger as _logger

OPS_TAG = "semlogger"

ops_logger = _logger.bind(tag=OPS_TAG)
