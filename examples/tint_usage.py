"""
Example: neutral-pivot tinting usage.

Demonstrates how to use pivotrgb for:
- Blending single colors around the 0.5 pivot
- Tinting pixel arrays with presets
- Building a Tint pipeline
- Packing colors into floats
- Looking up palette entries
"""

import logging

import numpy as np

from pivotrgb import (
    BASIC,
    NEUTRAL,
    Color,
    Tint,
    apply_tint,
    get_tint_preset,
    pack,
    unpack,
)

# Configure logging to see tinting statistics
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def generate_sample_image(height: int = 240, width: int = 320) -> np.ndarray:
    """Generate a sample RGB gradient image."""
    ys = np.linspace(0.0, 1.0, height, dtype=np.float32)[:, None]
    xs = np.linspace(0.0, 1.0, width, dtype=np.float32)[None, :]
    image = np.empty((height, width, 3), dtype=np.float32)
    image[..., 0] = xs
    image[..., 1] = ys
    image[..., 2] = 1.0 - xs * ys
    return image


def example_1_blending():
    """Example 1: Blending single colors."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: Blending Around the 0.5 Pivot")
    print("=" * 70)

    base = Color(0.2, 0.4, 0.6)
    print(f"Base:              {base}")
    print(f"Base * NEUTRAL:    {base * NEUTRAL}")
    print(f"Base * bright red: {base * Color(1.0, 0.5, 0.5)}")
    print(f"Base + cool:       {base + get_tint_preset('cool')}")


def example_2_array_tint():
    """Example 2: Tinting an image with a preset."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: Tinting an Image with a Preset")
    print("=" * 70)

    image = generate_sample_image()
    sepia = get_tint_preset("sepia")

    result = apply_tint(image, sepia)
    print(f"Mean before: {image.reshape(-1, 3).mean(axis=0)}")
    print(f"Mean after:  {result.reshape(-1, 3).mean(axis=0)}")

    additive = apply_tint(image, sepia, mode="add")
    print(f"Mean after additive tint: {additive.reshape(-1, 3).mean(axis=0)}")


def example_3_pipeline():
    """Example 3: Chaining operations in a Tint pipeline."""
    print("\n" + "=" * 70)
    print("EXAMPLE 3: Tint Pipeline")
    print("=" * 70)

    image = generate_sample_image()

    pipeline = (
        Tint()
        .multiply(get_tint_preset("warm"))
        .contrast(1.2)
        .lighten(0.1)
        .lessen(0.8)
    )
    print(pipeline)

    result = pipeline(image)
    print(pipeline)
    print(f"Output range: [{result.min():.3f}, {result.max():.3f}]")


def example_4_packing():
    """Example 4: Packed float colors."""
    print("\n" + "=" * 70)
    print("EXAMPLE 4: Packed Float Colors")
    print("=" * 70)

    packed = pack(0.25, 0.5, 0.75, 1.0)
    print(f"Packed: {packed!r}")
    print(f"Unpacked: {unpack(packed)}")
    print(f"Color.to_packed: {Color(0.25, 0.5, 0.75).to_packed()!r}")


def example_5_palette():
    """Example 5: Palette lookups."""
    print("\n" + "=" * 70)
    print("EXAMPLE 5: Palette Lookups")
    print("=" * 70)

    palette = BASIC.with_entry("Sky Blue", Color.from_hex("#87ceeb"))
    print(palette)
    print(f"sky_blue: {palette.by_name('sky_blue')}")
    print(f"grey alias: {palette.by_name('grey')}")
    print("Darkest to lightest:", [name for name, _ in palette.by_value()])
    print("Nearest to (0.6, 0.8, 0.9):", palette.nearest(Color(0.6, 0.8, 0.9))[0])


def main():
    """Run all examples."""
    example_1_blending()
    example_2_array_tint()
    example_3_pipeline()
    example_4_packing()
    example_5_palette()


if __name__ == "__main__":
    main()
