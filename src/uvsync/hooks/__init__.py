"""
package: uvsync.hooks
"""

# <AUTOGEN_INIT>
from uvsync.hooks import (
    base,
    blocks,
    dialects,
    io,
    setup_hooks,
    xlogging,
)


__all__ = [
    "base",
    "blocks",
    "dialects",
    "io",
    "setup_hooks",
    "xlogging",
]
# </AUTOGEN_INIT>

__version__ = "0.1.0"
