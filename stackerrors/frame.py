import sys
from types import CodeType
from typing import List, Tuple

RawFrame = Tuple[CodeType, int, str]


class StackFrame:
    """
    A single position on a call stack: the file and line being executed, the
    module (or Go package) it belongs to and the function name.
    """

    __slots__ = ("_file", "_line_number", "_package", "_name")

    def __init__(self, file: str, line_number: int, package: str, name: str) -> None:
        self._file = file
        self._line_number = line_number
        self._package = package
        self._name = name

    @staticmethod
    def from_raw(raw: RawFrame) -> "StackFrame":
        code, lineno, module = raw
        return StackFrame(code.co_filename, lineno, module, code.co_qualname)

    @property
    def file(self) -> str:
        return self._file

    @property
    def line_number(self) -> int:
        return self._line_number

    @property
    def package(self) -> str:
        return self._package

    @property
    def name(self) -> str:
        return self._name

    @property
    def qualified_name(self) -> str:
        if self._package == "":
            return self._name
        return f"{self._package}.{self._name}"

    def _key(self):
        return (self._file, self._line_number, self._package, self._name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StackFrame):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"StackFrame(file={self._file!r}, line_number={self._line_number}, "
            f"package={self._package!r}, name={self._name!r})"
        )

    def __reduce__(self):
        return (StackFrame, self._key())

    def __str__(self) -> str:
        return f"{self.qualified_name}\n\t{self._file}:{self._line_number}\n"


def capture(skip: int, depth: int) -> List[RawFrame]:
    """
    Record the current thread's call stack, innermost first. A `skip` of 0
    starts at the function calling `capture`, 1 at its caller, etc. At most
    `depth` entries are kept.
    """
    frame = sys._getframe(1)
    for _ in range(skip):
        if frame is None:
            return []
        frame = frame.f_back

    stack: List[RawFrame] = []
    while frame is not None and len(stack) < depth:
        module = frame.f_globals.get("__name__", "")
        stack.append((frame.f_code, frame.f_lineno or 0, module))
        frame = frame.f_back

    return stack
