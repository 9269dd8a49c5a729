"""Call-site resolution for log records.

Every public logging entry point passes an explicit ``stacklevel`` down to
``caller``, which skips exactly that many frames. Adding a wrapping layer
means incrementing the depth it passes on.
"""

import sys
from types import FrameType

from gcplog.core.models import SourceLocation


def _frame_location(frame: FrameType) -> SourceLocation:
    code = frame.f_code
    module = frame.f_globals.get("__name__", "")
    function = f"{module}.{code.co_qualname}" if module else code.co_qualname
    return SourceLocation(file=code.co_filename, line=frame.f_lineno, function=function)


def caller(depth: int = 0) -> SourceLocation | None:
    """Return the location of the frame ``depth`` levels above the caller.

    ``depth=0`` is the function that called ``caller``, ``depth=1`` its
    caller, and so on.

    Args:
        depth: Number of frames to skip above the calling function.

    Returns:
        The resolved location, or None if the stack is not that deep.
    """
    if depth < 0:
        return None
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return None
    return _frame_location(frame)
