"""
package: mstair.pretty
"""

# <AUTOGEN_INIT>
from mstair.pretty import (
    base,
    pretty_cli,
    xlogging,
    xpretty,
)


__all__ = [
    "base",
    "pretty_cli",
    "xlogging",
    "xpretty",
]
# </AUTOGEN_INIT>

from mstair.pretty.xpretty.errors import (
    ConfigurationError,
    PrettyError,
    StructuralOverflowError,
    UnsupportedRuntimeError,
)
from mstair.pretty.xpretty.options import PrettyOptions
from mstair.pretty.xpretty.pretty_api import (
    get_defaults,
    pretty_print,
    render,
    reset_defaults,
    set_indent_width,
    set_line_width,
    set_max_gaps,
)


__all__ += [
    "ConfigurationError",
    "PrettyError",
    "PrettyOptions",
    "StructuralOverflowError",
    "UnsupportedRuntimeError",
    "get_defaults",
    "pretty_print",
    "render",
    "reset_defaults",
    "set_indent_width",
    "set_line_width",
    "set_max_gaps",
]

__version__ = "0.1.0"
