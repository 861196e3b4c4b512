"""
どこで: `common` パッケージ。
何を: shapes/animation 双方で使う軽量ユーティリティ（BaseRegistry, 例外型など）。
なぜ: API 層から再利用する共通基盤を分離し、依存の向きを単純化するため。
"""

from .base_registry import BaseRegistry
from .errors import ParameterError, ShapeKindMismatchError

__all__ = [
    "BaseRegistry",
    "ParameterError",
    "ShapeKindMismatchError",
]
