import enum
import re
from typing import List

from stackerrors.error import AnnotatedError, PanicParseError, UncaughtPanic
from stackerrors.frame import StackFrame
from stackerrors.logging import logger

PANIC_PREFIX = "panic: "
GOROUTINE_PREFIX = "goroutine "
RUNNING_SUFFIX = "[running]:"
CREATED_BY_PREFIX = "created by "

_SPAWNING_GOROUTINE = re.compile(r" in goroutine \d+$")
_LINE_NUMBER = re.compile(r"[0-9]+")


class ParseState(enum.StrEnum):
    START = enum.auto()
    SEEK = enum.auto()
    PARSING = enum.auto()
    DONE = enum.auto()


def parse_panic(text: str) -> AnnotatedError:
    """
    Reconstruct an error from the output of a Go program that panicked. The
    stack of the running goroutine becomes the error's frames, ending with the
    frame that created the goroutine, if the runtime printed one.

    Raises `PanicParseError` if the text is not a panic or if any of the stack
    lines are malformed.
    """
    lines = [line.removesuffix("\r") for line in text.split("\n")]

    state = ParseState.START
    message = ""
    stack: List[StackFrame] = []

    i = 0
    while i < len(lines) and state != ParseState.DONE:
        line = lines[i]

        if state == ParseState.START:
            if not line.startswith(PANIC_PREFIX):
                raise PanicParseError("no prefix", line)

            message = line.removeprefix(PANIC_PREFIX)
            state = ParseState.SEEK

        elif state == ParseState.SEEK:
            if line.startswith(GOROUTINE_PREFIX) and line.endswith(RUNNING_SUFFIX):
                state = ParseState.PARSING
            else:
                logger.debug(f"Skipping line: {line}")

        elif state == ParseState.PARSING:
            if line == "":
                state = ParseState.DONE
            else:
                created_by = line.startswith(CREATED_BY_PREFIX)

                i += 1
                if i >= len(lines):
                    raise PanicParseError("unpaired", line)

                stack.append(_parse_frame(line, lines[i], created_by))
                if created_by:
                    state = ParseState.DONE

        i += 1

    if state != ParseState.DONE:
        raise PanicParseError(
            "could not parse panic", text, f"could not parse panic: {text}"
        )

    return AnnotatedError(UncaughtPanic(message), frames=stack)


# Each frame is printed on two lines:
#
#     main.(*foo).destruct(0xc208067e98)
#             /home/gopher/src/example.com/pan/main.go:22 +0x151
def _parse_frame(call: str, location: str, created_by: bool) -> StackFrame:
    name = call
    if created_by:
        name = _SPAWNING_GOROUTINE.sub("", name.removeprefix(CREATED_BY_PREFIX))

    idx = name.rfind("(")
    if idx == -1 and not created_by:
        raise PanicParseError("no call", call)
    # Spawn lines usually carry no argument list, so a "(" there may belong to a
    # receiver such as pkg.(*T).run and is only cut when the line ends with ")".
    if idx != -1 and (not created_by or name.endswith(")")):
        name = name[:idx]

    package = ""
    last_slash = name.rfind("/")
    if last_slash >= 0:
        package += name[: last_slash + 1]
        name = name[last_slash + 1 :]

    period = name.find(".")
    if period >= 0:
        package += name[:period]
        name = name[period + 1 :]

    name = name.replace("·", ".")

    if not location.startswith("\t"):
        raise PanicParseError("no tab", location)

    idx = location.rfind(":")
    if idx == -1:
        raise PanicParseError("no line number", location)

    file = location[1:idx]
    number = location[idx + 1 :]
    offset = number.find(" +")
    if offset > -1:
        number = number[:offset]

    if _LINE_NUMBER.fullmatch(number) is None:
        raise PanicParseError("bad line number", location)

    return StackFrame(file, int(number), package, name)
