from typing import Any, Optional

from stackerrors.error import AnnotatedError, is_causer, render_causer, wrap


def _format(template: str, args: tuple) -> str:
    try:
        return template % args
    except (TypeError, ValueError):
        return " ".join([template, *(repr(arg) for arg in args)])


def _coerce(value: Any, format_args: tuple) -> Any:
    if is_causer(value):
        return Exception(render_causer(value))
    if type(value) == str and len(format_args) > 0:
        return Exception(_format(value, format_args))

    return value


def annotate(value: Any, *format_args: Any) -> Optional[AnnotatedError]:
    """
    Attach the caller's stack to `value`. Strings are turned into exceptions
    (formatted with `format_args` if given), errors that carry a `cause()` are
    flattened into their full text, and errors that already have a stack are
    returned unchanged.
    """
    if value is None:
        return None

    return wrap(_coerce(value, format_args), 1)


def annotate_skip(value: Any, skip: int, *format_args: Any) -> Optional[AnnotatedError]:
    """
    Like `annotate`, but with control over where the stack starts: 0 is the
    call to `annotate_skip` itself, 1 is its caller, etc. Helpers that wrap
    `annotate_skip` should add one for every frame of their own.
    """
    if value is None:
        return None

    return wrap(_coerce(value, format_args), skip)


def unwrap(err: Optional[BaseException]) -> Optional[BaseException]:
    """
    Strip all stack annotations and `cause()` layers, returning the original
    error.
    """
    current: Any = err
    deeper = current is not None
    while deeper:
        deeper = False
        if isinstance(current, AnnotatedError):
            current = current.cause
            deeper = True
        if is_causer(current):
            cause = current.cause()
            if cause is None:
                break
            current = cause
            deeper = True

    return current


def is_(err: Optional[BaseException], original: Optional[BaseException]) -> bool:
    """
    Whether `err` is, or was caused by, `original`. Annotations on either side
    and one `cause()` layer on each side are looked through.
    """
    if is_causer(err):
        err = err.cause()  # type: ignore[union-attr]
    if is_causer(original):
        original = original.cause()  # type: ignore[union-attr]
    while isinstance(original, AnnotatedError):
        original = original.cause

    seen = set()
    current = err
    while current is not None and id(current) not in seen:
        if current == original:
            return True

        seen.add(id(current))
        if isinstance(current, AnnotatedError):
            current = current.cause
        else:
            current = current.__cause__

    return err is None and original is None


def prefix(text: str, value: Any) -> Optional[AnnotatedError]:
    """
    Annotate `value` and prepend `text` to its message. Prefixes stack up:
    prefixing "b" onto an error prefixed with "a" yields "b: a: message".
    """
    if value is None:
        return None

    err = wrap(_coerce(value, ()), 1)
    assert err is not None
    return err.with_prefix(text)


def trace(err: Optional[BaseException]) -> str:
    if err is None:
        return ""

    annotated = wrap(_coerce(err, ()), 1)
    assert annotated is not None
    return annotated.stack()


def full_trace(err: Optional[BaseException]) -> str:
    """
    Returns the type of the error and its message on the first line, followed
    by the stack as returned by `trace`.
    """
    if err is None:
        return ""

    annotated = wrap(_coerce(err, ()), 1)
    assert annotated is not None
    return annotated.error_stack()


def base(template: str, *args: Any) -> Exception:
    """
    Create a plain exception with a formatted message and no stack attached.
    """
    if len(args) == 0:
        return Exception(template)

    return Exception(_format(template, args))


def has_trace(err: Any) -> bool:
    return isinstance(err, AnnotatedError)
