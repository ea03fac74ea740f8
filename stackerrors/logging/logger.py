import sys
import traceback

from stackerrors import error as errors

from . import fmt
from .ansi import *

_verbose = False


def set_verbose(verbose: bool):
    global _verbose
    _verbose = verbose


def info(msg):
    print(f"[{FG_GREEN}*{FG_RESET}] {msg}", file=sys.stderr)


def warn(msg):
    print(f"[{FG_YELLOW}!{FG_RESET}] {msg}", file=sys.stderr)


def error(msg, exception: BaseException):
    print(f"{BG_RED}[×]{BG_RESET} {msg}", file=sys.stderr)

    if isinstance(exception, errors.PanicParseError):
        lines = exception.line().replace("\t", "    ").split("\n")
        print(f"    {exception.reason()}:", file=sys.stderr)
        print(file=sys.stderr)
        print(f"      {fmt.code(lines[0])}", file=sys.stderr)
        if len(lines) == 1:
            print(f"      {'^' * len(lines[0])}", file=sys.stderr)
        print(file=sys.stderr)
    elif isinstance(exception, errors.AnnotatedError):
        print(f"    {exception.type_name()}: {exception}", file=sys.stderr)
        for stack_frame in exception.stack_frames():
            for line in fmt.frame(stack_frame).splitlines():
                print(f"      {line}", file=sys.stderr)
    else:
        print(f"    {type(exception).__name__}: {exception}", file=sys.stderr)
        for line in traceback.format_exception(exception):
            for sub_line in line.splitlines():
                print(f"      {sub_line}", file=sys.stderr)


def debug(msg):
    if _verbose:
        print(msg, file=sys.stderr)


def fatal(msg):
    print(f"[{BG_RED}E{BG_RESET}] {msg}", file=sys.stderr)
    print(f"[{BG_RED}E{BG_RESET}] Exiting...", file=sys.stderr)
    sys.exit(1)
