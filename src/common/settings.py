"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, env_int, env_str


@dataclass
class _Settings:
    # Path.flatten の分割数
    ARC_SEGMENTS: int = 64
    ELLIPSE_SEGMENTS: int = 64

    # Animator の既定値
    DEFAULT_DURATION: float = 0.35
    DEFAULT_EASING: str = "ease_in_out"

    # color_ring_layers の strokeBorder 幅
    RING_LINE_WIDTH: float = 2.0

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - 分割数は 4 未満を 4 に丸める（円が多角形として破綻しない最小値）。
    - 時間/線幅は負値を 0 に丸める。
    """
    _settings.ARC_SEGMENTS = env_int("DRW_ARC_SEGMENTS", 64, min_value=4) or 64
    _settings.ELLIPSE_SEGMENTS = env_int("DRW_ELLIPSE_SEGMENTS", 64, min_value=4) or 64

    _settings.DEFAULT_DURATION = env_float("DRW_DEFAULT_DURATION", 0.35, min_value=0.0)
    _settings.DEFAULT_EASING = env_str("DRW_DEFAULT_EASING", "ease_in_out")

    _settings.RING_LINE_WIDTH = env_float("DRW_RING_LINE_WIDTH", 2.0, min_value=0.0)

    _settings.LOG_LEVEL = env_str("DRW_LOG_LEVEL", "INFO")


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
