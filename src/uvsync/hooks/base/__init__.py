"""
package: uvsync.hooks.base
"""

# <AUTOGEN_INIT>
from uvsync.hooks.base import (
    caller_module_name_and_level,
    config,
    fs_helpers,
    os_helpers,
    string_helpers,
)


__all__ = [
    "caller_module_name_and_level",
    "config",
    "fs_helpers",
    "os_helpers",
    "string_helpers",
]
# </AUTOGEN_INIT>
