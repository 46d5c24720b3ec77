"""Constants shared across pivotrgb modules."""

# Channel value that leaves a color unchanged under blend and additive tint
NEUTRAL_VALUE = 0.5

# Packed float layout: A7 B8 G8 R8 (low bit of alpha always cleared)
ALPHA_MASK = 0xFE000000
RGB_MASK = 0x00FFFFFF
CHANNEL_MASK = 0xFF

# Encode multiplier for RGB channels and decode divisor for alpha
ENCODE_SCALE = 255.999
ALPHA_DECODE = 254.0

# Small offset to avoid division by zero in HSL math
HSL_EPSILON = 1e-10

# Lightness at or below which from_hsl returns black
BLACK_LIGHTNESS = 0.001

# LUT resolution for Tint pipelines
DEFAULT_LUT_SIZE = 1024
MIN_LUT_SIZE = 16
MAX_LUT_SIZE = 65536

# Attempts made by random_edit before giving up
RANDOM_EDIT_ATTEMPTS = 50
