# File: src/mstair/pretty/__main__.py
"""Allow `python -m mstair.pretty`."""

from mstair.pretty.pretty_cli import main


raise SystemExit(main())

# End of file: src/mstair/pretty/__main__.py
