import sys

from stackerrors.frame import StackFrame, capture


def test_frame_renders_package_and_location():
    frame = StackFrame("/a/b.go", 10, "main", "f")

    assert str(frame) == "main.f\n\t/a/b.go:10\n"


def test_frame_without_package():
    frame = StackFrame("/usr/local/go/src/runtime/panic.go", 884, "", "panic")

    assert str(frame) == "panic\n\t/usr/local/go/src/runtime/panic.go:884\n"


def test_frames_compare_by_value():
    a = StackFrame("/a/b.go", 10, "main", "f")
    b = StackFrame("/a/b.go", 10, "main", "f")

    assert a == b
    assert hash(a) == hash(b)
    assert a != StackFrame("/a/b.go", 11, "main", "f")


def test_capture_starts_at_caller():
    stack = capture(0, 50)
    expected_line = sys._getframe().f_lineno - 1

    frame = StackFrame.from_raw(stack[0])

    assert frame.name == "test_capture_starts_at_caller"
    assert frame.package == __name__
    assert frame.line_number == expected_line


def test_capture_resolves_nested_functions():
    def inner():
        return capture(0, 50)

    stack = inner()

    assert StackFrame.from_raw(stack[0]).name == "test_capture_resolves_nested_functions.<locals>.inner"
    assert StackFrame.from_raw(stack[1]).name == "test_capture_resolves_nested_functions"


def test_capture_respects_depth():
    assert len(capture(0, 2)) == 2


def test_qualified_name():
    assert StackFrame("/a/b.go", 10, "example.com/kv", "(*store).put").qualified_name == "example.com/kv.(*store).put"
    assert StackFrame("/a/b.go", 10, "", "panic").qualified_name == "panic"
