from types import ModuleType
from typing import Iterator

import pytest

PANIC_SINGLE_FRAME = "panic: boom\n\ngoroutine 1 [running]:\nmain.f(...)\n\t/a/b.go:10 +0x1\n"

PANIC_NIL_MAP = """panic: assignment to entry in nil map

goroutine 1 [running]:
main.(*store).put(0xc000010018, {0x4b8c2a, 0x3}, 0x2a)
\t/home/gopher/src/example.com/kv/store.go:17 +0x45
example.com/kv/internal/cache.Warm·dwrap·1()
\t/home/gopher/src/example.com/kv/internal/cache/warm.go:31 +0x2e
main.main()
\t/home/gopher/src/example.com/kv/main.go:9 +0x6b

exit status 2
"""

PANIC_IN_GOROUTINE = """panic: runtime error: index out of range [5] with length 3

goroutine 7 [running]:
main.worker(0x3)
\t/srv/app/worker.go:14 +0x1d
created by main.spawn in goroutine 1
\t/srv/app/worker.go:8 +0x25
"""


@pytest.fixture(scope="function")
def settings(monkeypatch) -> Iterator[ModuleType]:
    import stackerrors.settings

    monkeypatch.setattr(stackerrors.settings, "_settings", None)
    monkeypatch.setattr(
        stackerrors.settings, "_settings_builder", stackerrors.settings.SettingsBuilder()
    )
    yield stackerrors.settings
