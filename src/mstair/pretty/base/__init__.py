"""
package: mstair.pretty.base
"""

# <AUTOGEN_INIT>
from mstair.pretty.base import (
    config,
    constants,
    fs_helpers,
)


__all__ = [
    "config",
    "constants",
    "fs_helpers",
]
# </AUTOGEN_INIT>
