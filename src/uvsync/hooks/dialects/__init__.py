"""
package: uvsync.hooks.dialects
"""

# <AUTOGEN_INIT>
from uvsync.hooks.dialects import (
    model,
    registry,
    templates,
)


__all__ = [
    "model",
    "registry",
    "templates",
]
# </AUTOGEN_INIT>
