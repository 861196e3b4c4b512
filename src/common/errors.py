"""
どこで: `common.errors`
何を: パラメータ検証で送出する例外型を定義する。
なぜ: 不正値で縮退した形状を黙って返さず、名前付きのエラーで即座に失敗させるため。
"""

from __future__ import annotations


class ParameterError(ValueError):
    """形状/アニメーションのパラメータが制約を満たさない。

    メッセージは常に ``"invalid parameter: <name> must be <constraint>"`` 形式。
    """

    def __init__(self, name: str, constraint: str) -> None:
        self.name = name
        self.constraint = constraint
        super().__init__(f"invalid parameter: {name} must be {constraint}")


class ShapeKindMismatchError(ParameterError):
    """要求された shape 種別とパラメータの種別が一致しない。"""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__("kind", f"'{expected}' (got '{actual}')")


__all__ = ["ParameterError", "ShapeKindMismatchError"]
