"""Observability – structlog configuration and logger helpers."""
from chassis.observability.logging.factory import LoggerFactory
from chassis.observability.logging.processors import get_logger, message_type_processor

__all__ = ["LoggerFactory", "get_logger", "message_type_processor"]
