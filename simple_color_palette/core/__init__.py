"""simple_color_palette.core — Foundation layer.

Contains the numeric policy, sRGB transfer functions, the Components / Color /
ColorPalette model, the JSON codec, report formatting and .env loading.
This module has NO dependencies on simple_color_palette.commands,
simple_color_palette.adapters or simple_color_palette.registry.
Only stdlib and numpy are allowed here.
"""
