"""
package: uvsync.hooks.blocks
"""

# <AUTOGEN_INIT>
from uvsync.hooks.blocks import (
    errors,
    marked_block,
)


__all__ = [
    "errors",
    "marked_block",
]
# </AUTOGEN_INIT>
