"""Unit tests for HandlerRegistry."""

from __future__ import annotations

import pytest

from chassis.application.cqrs.registry import HandlerRegistry, Namespace
from chassis.kernel.errors import HandlerNotFoundError, RegistryFrozenError


class Ping:
    pass


class LoudPing(Ping):
    pass


class TestHandlerRegistry:
    def test_bind_and_resolve(self) -> None:
        registry = HandlerRegistry()
        handler = object()
        assert registry.bind(Namespace.READ, Ping, handler) is None
        assert registry.resolve(Namespace.READ, Ping()) is handler

    def test_resolve_missing_raises(self) -> None:
        with pytest.raises(HandlerNotFoundError) as exc_info:
            HandlerRegistry().resolve(Namespace.COMMAND, Ping())
        assert exc_info.value.message_type is Ping
        assert exc_info.value.namespace == "command"

    def test_namespaces_are_independent(self) -> None:
        registry = HandlerRegistry()
        registry.bind(Namespace.READ, Ping, object())
        with pytest.raises(HandlerNotFoundError):
            registry.resolve(Namespace.WATCH, Ping())

    def test_subclass_is_not_routed_to_parent_handler(self) -> None:
        registry = HandlerRegistry()
        registry.bind(Namespace.READ, Ping, object())
        with pytest.raises(HandlerNotFoundError):
            registry.resolve(Namespace.READ, LoudPing())

    def test_rebinding_replaces_and_returns_previous(self) -> None:
        registry = HandlerRegistry()
        first, second = object(), object()
        registry.bind(Namespace.COMMAND, Ping, first)
        assert registry.bind(Namespace.COMMAND, Ping, second) is first
        assert registry.resolve(Namespace.COMMAND, Ping()) is second
        assert len(registry) == 1

    def test_contains_and_message_types(self) -> None:
        registry = HandlerRegistry()
        registry.bind(Namespace.WATCH, Ping, object())
        assert registry.contains(Namespace.WATCH, Ping)
        assert not registry.contains(Namespace.READ, Ping)
        assert registry.message_types(Namespace.WATCH) == [Ping]

    def test_clear(self) -> None:
        registry = HandlerRegistry()
        registry.bind(Namespace.READ, Ping, object())
        registry.clear()
        assert len(registry) == 0

    def test_frozen_registry_rejects_bind_and_clear(self) -> None:
        registry = HandlerRegistry()
        registry.freeze()
        assert registry.frozen
        with pytest.raises(RegistryFrozenError):
            registry.bind(Namespace.READ, Ping, object())
        with pytest.raises(RegistryFrozenError):
            registry.clear()
