"""
Custom exception hierarchy for ledgrid.

## Exception Hierarchy

```
LedGridError (base)
├── GridError
│   ├── CellOutOfRangeError
│   └── GridShapeError
├── EncodingError
│   ├── WordRangeError
│   ├── InvalidWordError
│   └── WordCountError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `LedGridError`, which provides
`user_message`, `technical_message`, `recoverable` and `recovery_hint`.

### Example: Decoding a pasted initializer

```python
from ledgrid.encoding import decode
from ledgrid.exceptions import InvalidWordError

try:
    grid = decode(["0x00000001", "0x00000000", "0x00000000", "0xFFFFFFFF"])
except InvalidWordError as e:
    print(e.get_full_message())
# User sees: "Invalid word '0xFFFFFFFF': sets bits beyond the last cell"
```

See `ledgrid.exceptions.handlers` for utilities to handle these exceptions systematically.
"""

from .base import LedGridError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .encoding import EncodingError, InvalidWordError, WordCountError, WordRangeError
from .grid import CellOutOfRangeError, GridError, GridShapeError
from .handlers import (
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
)

__all__ = [
    # Grid
    "CellOutOfRangeError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Encoding
    "EncodingError",
    "GridError",
    "GridShapeError",
    "InvalidWordError",
    # Base
    "LedGridError",
    "WordCountError",
    "WordRangeError",
    "format_error_for_display",
    # Handlers
    "handle_errors",
    "wrap_pydantic_error",
]
