"""
どこで: `engine.animation` サブパッケージ。
何を: パラメータ補間・純粋な状態機械・呼び出し側所有の Animator を提供。
なぜ: 形状生成（shapes）から独立して、任意の同種パラメータ間の遷移を標本化するため。
"""

from .animator import Animator
from .interpolation import interpolate, interpolate_params, lerp
from .state import AnimationState, idle, retarget, sample, start_animation

__all__ = [
    "AnimationState",
    "Animator",
    "idle",
    "interpolate",
    "interpolate_params",
    "lerp",
    "retarget",
    "sample",
    "start_animation",
]
