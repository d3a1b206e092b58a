"""Palette-building strategies.

Every .py file in this package that defines a `quantizer` object is
auto-registered by gbtile.registry.discover().
"""
