"""Type aliases for pivotrgb.

Provides unified type hints for color-like and pixel-array parameters.
"""

from collections.abc import Sequence

import numpy as np

# RGB or RGBA channel values
ChannelsLike = tuple[float, float, float] | tuple[float, float, float, float] | Sequence[float]

# Pixel buffer: [N, 3], [N, 4], [H, W, 3] or [H, W, 4]
PixelArray = np.ndarray
