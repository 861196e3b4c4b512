"""共通フィクスチャ。

- 乱数シード固定
- 代表的な描画矩形
- 環境変数を変えたテスト後の設定再読込
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from common import settings
from engine.core.path import Rect


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def rect300() -> Rect:
    return Rect(0.0, 0.0, 300.0, 300.0)


@pytest.fixture()
def rect_offset() -> Rect:
    return Rect(10.0, 20.0, 200.0, 100.0)


@pytest.fixture()
def env_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """環境変数を設定してから `settings.reload_from_env()` を呼ぶテスト用。

    終了時に環境変数を戻してから再読込し、他テストへ設定を持ち越さない。
    """
    yield monkeypatch
    monkeypatch.undo()
    settings.reload_from_env()
