import sys
from pathlib import Path

import pytest

# Ensure `import sqlvalid` works when running `pytest` without installing the package.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

TESTDATA_DIR = Path(__file__).resolve().parent / "testdata"


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch) -> None:
    from sqlvalid.config import get_settings

    monkeypatch.delenv("SQLVALID_DEBUG", raising=False)
    monkeypatch.delenv("SQLVALID_LOG_VERBOSITY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def testdata_dir() -> Path:
    return TESTDATA_DIR


@pytest.fixture
def sql_tree(tmp_path: Path):
    """Write ``{relative_path: sql}`` under ``tmp_path`` and return the root."""

    def _write(files: dict[str, str]) -> Path:
        for relative, text in files.items():
            target = tmp_path / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")
        return tmp_path

    return _write
