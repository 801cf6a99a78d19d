"""Motion helpers: CSS keyframes and scroll smoothing."""

from tidewave.core.motion.keyframes import (
    KEYFRAME_GENERATORS,
    MORPH_PRESETS,
    TRANSFORM_STOPS,
    MorphVariant,
    TransformAnimation,
    build_path_keyframes_css,
    generate_path_keyframes,
    morph_keyframes,
    transform_keyframes,
)
from tidewave.core.motion.scroll_tracker import (
    ScrollTracker,
    ScrollTrackerOptions,
    ScrollTrackerState,
    advance,
)

__all__ = [
    "KEYFRAME_GENERATORS",
    "MORPH_PRESETS",
    "TRANSFORM_STOPS",
    "MorphVariant",
    "ScrollTracker",
    "ScrollTrackerOptions",
    "ScrollTrackerState",
    "TransformAnimation",
    "advance",
    "build_path_keyframes_css",
    "generate_path_keyframes",
    "morph_keyframes",
    "transform_keyframes",
]
