"""
Tint: Composable neutral-pivot tint pipeline with LUT pre-compilation.

This module provides a fluent API for chaining tint operations and compiling
them into a single per-channel lookup table.

Key Features:
- Method chaining for intuitive pipeline construction
- **Operation stacking with automatic optimization**: consecutive operations of
  the same kind are reduced before compilation
- Lazy compilation with dirty flag tracking
- Copy-on-write sharing of compiled LUTs between copies

Example:
    >>> pipeline = (Tint()
    ...     .multiply(Color(0.6, 0.5, 0.4))   # warm
    ...     .multiply(Color(0.6, 0.5, 0.4))   # stacked (optimized to one blend)
    ...     .contrast(1.1)
    ...     .lessen(0.5)                      # half strength
    ... )
    >>> result = pipeline(pixels)
"""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import Self

import numpy as np

from pivotrgb.color.apply import as_pixel_rows
from pivotrgb.color.kernels import apply_lut_interleaved_numba
from pivotrgb.color.values import Color
from pivotrgb.config import CONFIG, TINT_CONFIG
from pivotrgb.constants import MAX_LUT_SIZE, MIN_LUT_SIZE, NEUTRAL_VALUE
from pivotrgb.types import PixelArray
from pivotrgb.validators import validate_positive, validate_range, validate_type

logger = logging.getLogger(__name__)

_SPECS = TINT_CONFIG.get_all_specs()


def _combine(op_type: str, first, second):
    """Reduce two consecutive operations of the same type into one value.

    Uses the composition rule of the operation's spec; colors combine per
    channel and their alphas combine by the alpha spec.
    """
    spec = _SPECS[op_type]
    if isinstance(first, Color):
        return Color(
            spec.combine(first.r, second.r),
            spec.combine(first.g, second.g),
            spec.combine(first.b, second.b),
            TINT_CONFIG.alpha.combine(first.a, second.a),
        )
    return spec.combine(first, second)


def _saturate_tint(op_type: str, color: Color) -> Color:
    """Saturate tint channels into the operation's range and alpha into [0, 1]."""
    spec = _SPECS[op_type]
    return Color(
        spec.validate(color.r),
        spec.validate(color.g),
        spec.validate(color.b),
        TINT_CONFIG.alpha.validate(color.a),
    )


class Tint:
    """
    Composable tint pipeline around the 0.5 neutral pivot.

    Operations run in the order they are added. Each works on RGB channel
    values; multiply and add also multiply the pipeline's alpha factor by the
    tint color's alpha.

    Operations:
    - multiply: ``2 * v * c`` per channel (0.5 = unchanged)
    - add: ``v + (c - 0.5)`` per channel (0.5 = unchanged)
    - lighten: move toward white by a fraction
    - darken: move toward black by a fraction
    - contrast: ``(v - 0.5) * factor + 0.5``
    - lessen: weaken everything added so far toward no change

    Optimization:
        Runs of the same operation are reduced:
        - multiply(a).multiply(b) -> multiply(blend(a, b))
        - add(a).add(b) -> add(a + (b - 0.5))
        - lighten(0.5).lighten(0.5) -> lighten(0.75)
        - contrast(1.2).contrast(1.5) -> contrast(1.8)
        - lessen(0.5).lessen(0.5) -> lessen(0.25)
    """

    __slots__ = (
        "lut_size",
        "_operations",  # List of (op_type, value) in call order
        "_compiled_lut",
        "_alpha_factor",
        "_is_dirty",
        "_lut_is_shared",  # Compiled LUT is shared with a copy (COW)
    )

    def __init__(self, lut_size: int | None = None):
        """
        Initialize the tint pipeline.

        :param lut_size: Resolution of the per-channel LUT (default from CONFIG)
        :raises ValueError: If lut_size is outside valid range
        """
        if lut_size is None:
            lut_size = CONFIG.lut_size
        if not MIN_LUT_SIZE <= lut_size <= MAX_LUT_SIZE:
            raise ValueError(
                f"lut_size={lut_size} is outside valid range [{MIN_LUT_SIZE}, {MAX_LUT_SIZE}]. "
                f"Larger LUTs increase memory usage with diminishing precision gains. "
                f"Use 1024 (default) or 4096 for high precision."
            )

        self.lut_size = lut_size
        self._operations: list[tuple[str, Color | float]] = []
        self._compiled_lut: np.ndarray | None = None
        self._alpha_factor = 1.0
        self._is_dirty = True
        self._lut_is_shared = False

    @property
    def is_compiled(self) -> bool:
        """Check if LUT is compiled and up-to-date."""
        return self._compiled_lut is not None and not self._is_dirty

    @property
    def needs_compilation(self) -> bool:
        return not self.is_compiled

    @property
    def lut(self) -> np.ndarray:
        """Compiled interleaved LUT [lut_size, 3], compiling if needed."""
        if self.needs_compilation:
            self.compile()
        return self._compiled_lut

    @property
    def alpha_factor(self) -> float:
        """Factor applied to the alpha channel of RGBA pixels."""
        if self.needs_compilation:
            self.compile()
        return self._alpha_factor

    def _add_operation(self, op_type: str, value: Color | float) -> Self:
        self._operations.append((op_type, value))
        self._is_dirty = True
        return self

    # ========================================================================
    # Operations
    # ========================================================================

    @validate_type(Color, "color")
    def multiply(self, color: Color) -> Self:
        """
        Add a multiplicative (pivot blend) tint.

        :param color: Tint color; channels above 0.5 lighten, below 0.5 darken.
            Channels and alpha are saturated into [0, 1]
        :return: Self for method chaining

        Example:
            >>> Tint().multiply(Color(1.0, 0.5, 0.5))  # doubles red
        """
        return self._add_operation("multiply", _saturate_tint("multiply", color))

    @validate_type(Color, "color")
    def add(self, color: Color) -> Self:
        """
        Add an additive tint offset by ``color - 0.5``.

        :param color: Tint color; 0.5 channels leave values unchanged.
            Channels and alpha are saturated into [0, 1]
        :return: Self for method chaining
        """
        return self._add_operation("add", _saturate_tint("add", color))

    @validate_range(_SPECS["lighten"].min_value, _SPECS["lighten"].max_value, "change")
    def lighten(self, change: float) -> Self:
        """
        Move channels toward white.

        :param change: 0.0 = no change, 1.0 = white
        :return: Self for method chaining
        """
        return self._add_operation("lighten", float(change))

    @validate_range(_SPECS["darken"].min_value, _SPECS["darken"].max_value, "change")
    def darken(self, change: float) -> Self:
        """
        Move channels toward black.

        :param change: 0.0 = no change, 1.0 = black
        :return: Self for method chaining
        """
        return self._add_operation("darken", float(change))

    @validate_positive("factor")
    @validate_range(_SPECS["contrast"].min_value, _SPECS["contrast"].max_value, "factor")
    def contrast(self, factor: float) -> Self:
        """
        Scale channel distance from the 0.5 neutral point.

        :param factor: 1.0 = no change, >1.0 = more contrast, <1.0 = less (at most 5.0)
        :return: Self for method chaining
        """
        return self._add_operation("contrast", float(factor))

    @validate_range(_SPECS["lessen"].min_value, _SPECS["lessen"].max_value, "fraction")
    def lessen(self, fraction: float) -> Self:
        """
        Weaken all operations added so far.

        The result so far is interpolated from no change (0.0) to full effect
        (1.0), including the alpha factor.

        :param fraction: Strength to keep
        :return: Self for method chaining

        Example:
            >>> Tint().multiply(WARM).lessen(0.5)  # half-strength warm tint
        """
        return self._add_operation("lessen", float(fraction))

    # ========================================================================
    # Operation Optimization
    # ========================================================================

    def _optimize_operations(self) -> list[tuple[str, Color | float]]:
        """
        Reduce consecutive operations of the same type.

        Only adjacent operations are merged since different operation types do
        not commute.

        :return: Reduced list of (op_type, value)
        """
        optimized: list[tuple[str, Color | float]] = []
        for op_type, value in self._operations:
            if optimized and optimized[-1][0] == op_type:
                optimized[-1] = (op_type, _combine(op_type, optimized[-1][1], value))
            else:
                optimized.append((op_type, value))
        return optimized

    # ========================================================================
    # Compilation and Application
    # ========================================================================

    def compile(self) -> Self:
        """
        Compile all operations into a single interleaved LUT.

        :return: Self for method chaining
        """
        if self.is_compiled:
            logger.debug("[Tint] Already compiled, skipping")
            return self

        # COW: If LUT is shared, copy it before modifying
        if self._lut_is_shared and self._compiled_lut is not None:
            logger.debug("[Tint] Copying shared LUT (copy-on-write)")
            self._compiled_lut = self._compiled_lut.copy()
            self._lut_is_shared = False

        optimized = self._optimize_operations()
        logger.debug(
            "[Tint] Optimized %d operations -> %d", len(self._operations), len(optimized)
        )

        # Evaluate in float64, one column per channel
        identity = np.linspace(0.0, 1.0, self.lut_size, dtype=np.float64)[:, None]
        values = np.repeat(identity, 3, axis=1)
        alpha = 1.0

        for op_type, value in optimized:
            if op_type == "multiply":
                values = values * (2.0 * np.array([value.r, value.g, value.b]))
                alpha *= value.a
            elif op_type == "add":
                values = values + (np.array([value.r, value.g, value.b]) - NEUTRAL_VALUE)
                alpha *= value.a
            elif op_type == "lighten":
                values = values + (1.0 - values) * value
            elif op_type == "darken":
                values = values * (1.0 - value)
            elif op_type == "contrast":
                values = (values - NEUTRAL_VALUE) * value + NEUTRAL_VALUE
            elif op_type == "lessen":
                values = identity + (values - identity) * value
                alpha = 1.0 + (alpha - 1.0) * value

        self._compiled_lut = np.clip(values, 0.0, 1.0).astype(np.float32)
        self._alpha_factor = float(alpha)
        self._is_dirty = False
        logger.debug("[Tint] Compiled LUT (size=%d, alpha=%.3f)", self.lut_size, alpha)
        return self

    def is_identity(self) -> bool:
        """
        Check if this pipeline changes nothing.

        Works on the reduced operations, so runs that cancel out (such as
        ``contrast(2.0).contrast(0.5)``) count as identity. ``lessen`` keeps
        an unchanged result unchanged, and ``lessen(0.0)`` undoes everything
        before it.

        :return: True if the pipeline leaves every pixel unchanged
        """
        changed = False
        for op_type, value in self._optimize_operations():
            if op_type == "lessen":
                if value == 0.0:
                    changed = False
            elif isinstance(value, Color):
                changed = changed or not value.is_neutral()
            else:
                changed = changed or not _SPECS[op_type].is_neutral(value)
        return not changed

    def apply(self, pixels: PixelArray, inplace: bool = False) -> np.ndarray:
        """
        Apply the pipeline to a pixel array.

        :param pixels: Channel values [N, 3], [N, 4], [H, W, 3] or [H, W, 4]
        :param inplace: Modify the input directly when it is float32 and contiguous
        :return: Tinted pixels as float32, same shape as the input
        :raises ValueError: If the shape is not a supported pixel layout
        """
        result, rows = as_pixel_rows(pixels, inplace)

        # Fast-path: identity pipeline
        if self.is_identity():
            return result

        if self.needs_compilation:
            self.compile()

        apply_lut_interleaved_numba(rows, self._compiled_lut, self._alpha_factor, rows)
        logger.info("[Tint] Applied pipeline to %d pixels (inplace=%s)", rows.shape[0], inplace)
        return result

    def __call__(self, pixels: PixelArray, inplace: bool = False) -> np.ndarray:
        """
        Apply the pipeline when called as a function.

        Example:
            >>> tinted = Tint().multiply(COOL).darken(0.1)(image)
        """
        return self.apply(pixels, inplace=inplace)

    def apply_color(self, color: Color) -> Color:
        """
        Apply the pipeline to a single color.
        """
        pixel = np.array([[color.r, color.g, color.b, color.a]], dtype=np.float32)
        r, g, b, a = self.apply(pixel, inplace=True)[0]
        return Color(float(r), float(g), float(b), float(a))

    def reset(self) -> Self:
        """
        Remove all operations and compiled state.

        :return: Self for method chaining
        """
        self._operations = []
        self._compiled_lut = None
        self._alpha_factor = 1.0
        self._is_dirty = True
        self._lut_is_shared = False
        logger.debug("[Tint] Reset to defaults")
        return self

    def copy(self) -> Self:
        """
        Create an independent copy of this pipeline.

        Example:
            >>> base = Tint().multiply(WARM)
            >>> stronger = base.copy().contrast(1.2)  # base is unchanged
        """
        return deepcopy(self)

    def get_operations(self) -> list[tuple[str, Color | float]]:
        """Get all operations in call order (before optimization)."""
        return self._operations.copy()

    def get_params(self) -> dict[str, object]:
        """
        Get the optimized operations and the resulting alpha factor.

        :return: ``{"operations": [(op_type, value), ...], "alpha": float}``

        Example:
            >>> Tint().lighten(0.5).lighten(0.5).get_params()
            {'operations': [('lighten', 0.75)], 'alpha': 1.0}
        """
        return {"operations": self._optimize_operations(), "alpha": self.alpha_factor}

    def __len__(self) -> int:
        """Return number of operations (before optimization)."""
        return len(self._operations)

    def __repr__(self) -> str:
        parts = []
        for op_type, value in self._optimize_operations():
            if isinstance(value, Color):
                parts.append(f"{op_type}=({value.r:.2f}, {value.g:.2f}, {value.b:.2f})")
            else:
                parts.append(f"{op_type}={value:.2f}")

        param_str = ", ".join(parts) if parts else "identity"
        status = "compiled" if self.is_compiled else "not compiled"
        if self._operations:
            return f"Tint({param_str}) [{len(self)} ops, {status}]"
        return f"Tint({param_str}) [{status}]"

    def __copy__(self) -> Self:
        """Shallow copy delegates to deep copy."""
        return self.copy()

    def __deepcopy__(self, memo) -> Self:
        """Copy with copy-on-write sharing of the compiled LUT."""
        new = Tint(lut_size=self.lut_size)
        # Operation values are immutable (floats and frozen Colors)
        new._operations = self._operations.copy()
        new._alpha_factor = self._alpha_factor
        new._is_dirty = self._is_dirty

        if self._compiled_lut is not None:
            new._compiled_lut = self._compiled_lut
            new._lut_is_shared = True
            self._lut_is_shared = True

        return new
