import sys
from pathlib import Path

import pytest

# Ensure `src/` is on sys.path so tests can import `core`, `adapters` and `cli`.
SRC = str(Path(__file__).resolve().parents[1] / "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)


class FakeVault:
    """In-memory vault that records every call.

    Knobs:
    - `fail_create`: path -> exception raised by create_folder/create_document.
    - `hidden`: paths that `exists` reports as missing even when present
      (simulates another writer winning the check-then-create race).
    - `unreadable`: paths whose read_document raises PermissionError.
    """

    def __init__(self) -> None:
        self.folders: set[str] = set()
        self.documents: dict[str, str] = {}
        self.fail_create: dict[str, Exception] = {}
        self.hidden: set[str] = set()
        self.unreadable: set[str] = set()
        self.calls: list[tuple[str, str]] = []

    async def exists(self, path: str) -> bool:
        self.calls.append(("exists", path))
        if path in self.hidden:
            return False
        return path in self.folders or path in self.documents

    async def is_document(self, path: str) -> bool:
        self.calls.append(("is_document", path))
        return path in self.documents

    async def create_folder(self, path: str) -> None:
        self.calls.append(("create_folder", path))
        if path in self.fail_create:
            raise self.fail_create[path]
        if path in self.folders or path in self.documents:
            raise FileExistsError(f"'{path}' already exists")
        self.folders.add(path)

    async def create_document(self, path: str, content: str) -> None:
        self.calls.append(("create_document", path))
        if path in self.fail_create:
            raise self.fail_create[path]
        if path in self.folders or path in self.documents:
            raise FileExistsError(f"'{path}' already exists")
        self.documents[path] = content

    async def read_document(self, path: str) -> str:
        self.calls.append(("read_document", path))
        if path in self.unreadable:
            raise PermissionError(f"permission denied: '{path}'")
        if path not in self.documents:
            raise FileNotFoundError(path)
        return self.documents[path]


@pytest.fixture
def fake_vault() -> FakeVault:
    return FakeVault()


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # Keep the developer's own config and environment out of the tests.
    for name in ("TRIP_PLANNER_ROOT_FOLDER", "TRIP_PLANNER_TEMPLATES_FOLDER", "TRIP_PLANNER_VAULT_PATH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
