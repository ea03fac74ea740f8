import threading
import traceback
from typing import Any, Optional, Protocol, Sequence, Tuple

from stackerrors import settings
from stackerrors.frame import RawFrame, StackFrame, capture


class StackErrorsError(Exception):
    """
    Base class for errors raised by stackerrors itself.
    """


class PanicParseError(StackErrorsError):
    def __init__(self, reason: str, line: str, message: Optional[str] = None) -> None:
        self._reason = reason
        self._line = line
        super().__init__(message or f"Invalid line ({reason}): {line}")

    def reason(self) -> str:
        return self._reason

    def line(self) -> str:
        return self._line


class Causer(Protocol):
    def cause(self) -> BaseException: ...


def is_causer(value: Any) -> bool:
    if isinstance(value, type):
        return False
    return callable(getattr(value, "cause", None))


def render_causer(err: Causer) -> str:
    """
    Render a cause-bearing error with everything it knows about itself: its
    message and traceback, followed by each error further down the `cause()`
    chain.
    """
    sections = []
    seen = set()
    current: Any = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, BaseException):
            sections.append("".join(traceback.format_exception(current)).rstrip("\n"))
        else:
            sections.append(str(current))

        current = current.cause() if is_causer(current) else None

    return "\nCaused by: ".join(sections)


class UncaughtPanic(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AnnotatedError(Exception):
    """
    An exception with a call stack attached. The stack is either recorded
    where the error was first annotated or reconstructed from panic output.
    """

    def __init__(
        self,
        cause: BaseException,
        raw_stack: Sequence[RawFrame] = (),
        frames: Optional[Sequence[StackFrame]] = None,
        prefix: str = "",
    ) -> None:
        self._cause = cause
        self._raw_stack: Tuple[RawFrame, ...] = tuple(raw_stack)
        self._frames = None if frames is None else tuple(frames)
        self._frames_lock = threading.Lock()
        self._prefix = prefix
        super().__init__(cause)
        self.__cause__ = cause

    @property
    def cause(self) -> BaseException:
        return self._cause

    @property
    def prefix(self) -> str:
        return self._prefix

    def __str__(self) -> str:
        message = str(self._cause)
        if self._prefix != "":
            message = f"{self._prefix}: {message}"

        return message

    def __reduce__(self):
        # Raw stacks hold code objects, so only the resolved frames travel.
        return (
            AnnotatedError,
            (self._cause, (), self.stack_frames(), self._prefix),
        )

    def __repr__(self) -> str:
        return f"AnnotatedError({str(self)!r})"

    def callers(self) -> Tuple[RawFrame, ...]:
        return self._raw_stack

    def stack_frames(self) -> Tuple[StackFrame, ...]:
        if self._frames is None:
            with self._frames_lock:
                if self._frames is None:
                    self._frames = tuple(StackFrame.from_raw(r) for r in self._raw_stack)

        return self._frames

    def stack(self) -> str:
        """
        Returns the frames of this error, formatted the same way a Go runtime
        formats a goroutine's stack.
        """
        return "".join(str(frame) for frame in self.stack_frames())

    def type_name(self) -> str:
        if isinstance(self._cause, UncaughtPanic):
            return "panic"

        cause_type = type(self._cause)
        if cause_type.__module__ == "builtins":
            return cause_type.__qualname__

        return f"{cause_type.__module__}.{cause_type.__qualname__}"

    def error_stack(self) -> str:
        return f"{self.type_name()} {self}\n{self.stack()}"

    def with_prefix(self, prefix: str) -> "AnnotatedError":
        if prefix == "":
            prefix = self._prefix
        elif self._prefix != "":
            prefix = f"{prefix}: {self._prefix}"

        return AnnotatedError(self._cause, self._raw_stack, self._frames, prefix)


def wrap(value: Any, skip: int) -> Optional[AnnotatedError]:
    """
    Turn `value` into an `AnnotatedError`. Errors that are already annotated
    are returned as-is. A `skip` of 0 attributes the stack to the function
    calling `wrap`, 1 to its caller, etc.
    """
    if value is None:
        return None

    if isinstance(value, AnnotatedError):
        return value

    if isinstance(value, BaseException):
        err = value
    else:
        err = Exception(str(value))

    depth = settings.settings().max_stack_depth()
    return AnnotatedError(err, capture(skip + 1, depth))
