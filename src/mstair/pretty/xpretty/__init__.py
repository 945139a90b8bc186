"""
package: mstair.pretty.xpretty
"""

# <AUTOGEN_INIT>
from mstair.pretty.xpretty import (
    dense,
    errors,
    escape,
    line_packer,
    model,
    options,
    pretty_api,
    renderer,
    scalar,
)


__all__ = [
    "dense",
    "errors",
    "escape",
    "line_packer",
    "model",
    "options",
    "pretty_api",
    "renderer",
    "scalar",
]
# </AUTOGEN_INIT>
