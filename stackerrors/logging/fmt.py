from stackerrors.frame import StackFrame

from .ansi import *


def frame(stack_frame: StackFrame) -> str:
    """
    Render a frame as its highlighted function name, with the location on an
    indented line below it.
    """
    name = f"{FG_CYAN_BOLD}{stack_frame.qualified_name}{RESET}"
    where = f"{FG_BLUE}{stack_frame.file}:{stack_frame.line_number}{FG_RESET}"
    return f"{name}\n  {where}"


def code(content: str) -> str:
    if content == "":
        content = "''"
    return f"{FG_BRIGHT_BLACK}{content}{FG_RESET}"
