"""Type aliases shared across pathstr."""

import os
from typing import Union

# Anything os.fspath() accepts: str, bytes or a path-like object.
PathInput = Union[str, bytes, os.PathLike]
