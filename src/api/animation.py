"""
どこで: `api.animation`
何を: アニメーション状態機械（`engine.animation`）の薄いファサード。
なぜ: 利用者が `from api import start_animation, sample` で取得できるようにするため。
"""

from __future__ import annotations

from common.easing import cubic_bezier, get_easing, list_easings
from engine.animation import AnimationState, Animator, idle, retarget, sample, start_animation

__all__ = [
    "AnimationState",
    "Animator",
    "cubic_bezier",
    "get_easing",
    "idle",
    "list_easings",
    "retarget",
    "sample",
    "start_animation",
]
