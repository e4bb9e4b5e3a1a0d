"""Observability – structured logging for the mediator and handles."""
