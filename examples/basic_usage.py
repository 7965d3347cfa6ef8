"""Basic hslcolor usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from hslcolor import HSLColor, rgb_to_hsl, hsl_to_rgb, np_rgb_to_hsl, np_hsl_to_rgb


def demonstrate_scalars() -> None:
    # Convert a single pixel each way.
    bada55 = rgb_to_hsl(186, 218, 85)
    print("RGB -> HSL:", bada55)
    print("HSL -> RGB:", hsl_to_rgb(bada55))

    # Values are plain fields; build a lighter variant by hand.
    lighter = HSLColor(bada55.h, bada55.s, min(1.0, bada55.l + 0.2))
    print("Lighter:", lighter.to_rgb())

    # Grays carry no hue.
    print("Gray:", HSLColor.from_rgb((128, 128, 128)))


def demonstrate_arrays() -> None:
    # Element-wise conversion of a small swatch.
    swatch = np.array([[255, 0, 0], [0, 255, 0], [0, 0, 255], [18, 35, 67]])
    hsl = np_rgb_to_hsl(swatch[..., 0], swatch[..., 1], swatch[..., 2])
    print("Swatch as HSL:\n", hsl)

    # Rotate every hue by 180 degrees and go back to bytes.
    rotated = np_hsl_to_rgb((hsl[..., 0] + 180) % 360, hsl[..., 1], hsl[..., 2])
    print("Complementary swatch:\n", rotated)


if __name__ == "__main__":
    demonstrate_scalars()
    demonstrate_arrays()
