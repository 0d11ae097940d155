"""
Custom exception hierarchy for colorfill.

## Exception Hierarchy

```
ColorFillError (base)
├── ColorValueError
│   ├── ColorFormatError  (also a ValueError)
│   └── ColorTypeError    (also a TypeError)
└── DocumentError
    ├── DocumentFileInvalidError
    └── DocumentValidationError
```

All custom exceptions inherit from `ColorFillError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Bad array element

```python
from colorfill.codec import parse_color_value
from colorfill.exceptions import ColorFormatError

try:
    parse_color_value(["#ff0000", 42])
except ColorFormatError as e:
    e.index    # 1
    e.reason   # FormatReason.NOT_A_STRING
```
"""

from .base import ColorFillError
from .color import ColorFormatError, ColorTypeError, ColorValueError, FormatReason
from .document import DocumentError, DocumentFileInvalidError, DocumentValidationError
from .handlers import (
    ErrorCollector,
    ErrorContext,
    collect_errors,
    format_error_for_display,
    wrap_pydantic_error,
)

__all__ = [
    # Base
    "ColorFillError",
    # Color values
    "ColorFormatError",
    "ColorTypeError",
    "ColorValueError",
    "FormatReason",
    # Documents
    "DocumentError",
    "DocumentFileInvalidError",
    "DocumentValidationError",
    # Handlers
    "ErrorCollector",
    "ErrorContext",
    "collect_errors",
    "format_error_for_display",
    "wrap_pydantic_error",
]
