"""Shared pytest configuration."""

pytest_plugins = ["chassis.testing.fixtures"]
