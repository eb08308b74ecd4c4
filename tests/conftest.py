"""Shared pytest configuration and path setup for test modules."""

import sys
from dataclasses import asdict
from pathlib import Path

import pytest

# Ensure repo root and src/ are on sys.path for all tests
_ROOT = Path(__file__).resolve().parents[1]
_SRC = _ROOT / "src"
for p in (str(_ROOT), str(_SRC)):
    if p not in sys.path:
        sys.path.insert(0, p)

from posixopt.core.utils import config as _config  # noqa: E402


@pytest.fixture(autouse=True)
def _restore_runtime_config():
    # 全局配置是进程级单例，每个测试结束后恢复原值，避免用例之间互相影响
    saved = asdict(_config.get_config())
    yield
    _config.get_config().update(**saved)
