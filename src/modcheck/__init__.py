"""modcheck: check a Mint mod list against mod.io.

Flags mods that mod.io now reports as hidden, renamed or deleted.
"""

__version__ = "0.2.0"
