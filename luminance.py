# luminance.py

from colors import RGB, clamp, hsl_to_rgb, rgb_to_hsl

# Fraction of the original saturation kept after the adjustment
SATURATION_SCALE = 0.3


def extreme_adjust_luminance(color: RGB) -> RGB:
    """Invert and square the lightness, fade the saturation.

    Squaring the inverted lightness pushes the result toward the extremes:
    dark colors come out very light, light colors come out only slightly dark.
    """
    h, s, l = rgb_to_hsl(color.r, color.g, color.b)

    inverted_l = 1 - l
    faded_luminance = inverted_l ** 2
    new_luminance = clamp(faded_luminance)

    faded_saturation = s * SATURATION_SCALE

    return hsl_to_rgb(h, faded_saturation, new_luminance)


transform_color = extreme_adjust_luminance
