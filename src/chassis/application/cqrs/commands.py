"""Application CQRS – Command and CommandHandler."""
from __future__ import annotations

from typing import Awaitable, Callable, Generic, TypeVar

from chassis.kernel.errors import HandlerRegistrationError

R = TypeVar("R")
C = TypeVar("C", bound="Command")

RunCallback = Callable[[C], Awaitable[R]]


class Command(Generic[R]):
    """Marker base for commands (intent to change state, yielding ``R``).

    Concrete commands are usually frozen dataclasses::

        @dataclass(frozen=True)
        class CreateUser(Command[User]):
            name: str
            email: str
    """


def check_message_type(handler: object, *bases: type) -> type:
    """Return the handler's declared ``message_type`` after checking its category.

    Raises :class:`HandlerRegistrationError` when the handler declares no
    message type or one that does not derive from every class in *bases*.
    """
    message_type = getattr(handler, "message_type", None)
    if message_type is None:
        raise HandlerRegistrationError(
            f"{type(handler).__name__} declares no message_type",
            detail={"handler": type(handler).__name__},
        )
    if not isinstance(message_type, type) or not all(issubclass(message_type, b) for b in bases):
        expected = " & ".join(b.__name__ for b in bases)
        raise HandlerRegistrationError(
            f"{type(handler).__name__} binds {message_type!r}, expected a {expected} subclass",
            detail={"handler": type(handler).__name__, "expected": expected},
        )
    return message_type


class CommandHandler(Generic[C, R]):
    """Handle a single command type.

    Either pass the behaviour inline::

        handler = CommandHandler(CreateUser, run=lambda c: repo.create(c.name, c.email))

    or subclass, declare ``message_type`` and override :meth:`run`::

        class CreateUserHandler(CommandHandler[CreateUser, User]):
            message_type = CreateUser

            def __init__(self, repo: UserRepository) -> None:
                super().__init__()
                self._repo = repo

            async def run(self, command: CreateUser) -> User:
                return await self._repo.create(command.name, command.email)
    """

    message_type: type[C]

    def __init__(
        self,
        message_type: type[C] | None = None,
        run: RunCallback[C, R] | None = None,
    ) -> None:
        if message_type is not None:
            self.message_type = message_type
        check_message_type(self, Command)
        self._run = run

    async def run(self, command: C) -> R:
        if self._run is None:
            raise NotImplementedError(f"{type(self).__name__} must override run() or pass run=")
        return await self._run(command)


__all__ = ["Command", "CommandHandler", "RunCallback", "check_message_type"]
