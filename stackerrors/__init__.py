from stackerrors.api import (
    annotate,
    annotate_skip,
    base,
    full_trace,
    has_trace,
    is_,
    prefix,
    trace,
    unwrap,
)
from stackerrors.error import (
    AnnotatedError,
    Causer,
    PanicParseError,
    StackErrorsError,
    UncaughtPanic,
)
from stackerrors.frame import StackFrame
from stackerrors.panic import ParseState, parse_panic
