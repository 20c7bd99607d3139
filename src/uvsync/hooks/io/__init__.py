"""
package: uvsync.hooks.io
"""

# <AUTOGEN_INIT>
from uvsync.hooks.io import (
    console,
    logging_utils,
)


__all__ = [
    "console",
    "logging_utils",
]
# </AUTOGEN_INIT>
