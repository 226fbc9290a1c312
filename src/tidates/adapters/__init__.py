"""Adapters plugging the date value into third-party encode/decode protocols.

Import the submodules directly so that only the library you use gets loaded.
"""
