"""
hx - Hex Dump Toolkit

Paginate a byte stream and render it as a coloured hex dump or as a
Rust, C or Go array literal.
"""
__version__ = "0.3.0"
