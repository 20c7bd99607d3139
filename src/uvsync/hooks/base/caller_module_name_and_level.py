# File: src/uvsync/hooks/base/caller_module_name_and_level.py

import inspect
from types import FrameType


__all__ = [
    "caller_module_name_and_level",
]


def caller_module_name_and_level(*, stacklevel: int = 1) -> tuple[str, int]:
    """
    Resolve the name of the calling module and the number of frames walked to reach it.

    Top-level `<module>` frames are skipped while counting, so a logger created
    at import time is named after the importing module rather than the
    importlib machinery.

    :param stacklevel: Number of meaningful (non-<module>) frames to skip, at least 1.
    :return tuple[str, int]: (module name or "", frames walked from this call)
    """
    if stacklevel < 1:
        raise ValueError("stacklevel must be greater than 0")

    frame: FrameType | None = inspect.currentframe()
    walked = 0
    try:
        for _ in range(stacklevel):
            while frame and frame.f_code.co_name == "<module>":
                frame = frame.f_back
                walked += 1
            if not frame:
                break
            frame = frame.f_back
            walked += 1

        module = inspect.getmodule(frame) if frame else None
        return (module.__name__ if module else ""), walked
    finally:
        # frame -> f_locals -> frame cycle
        del frame


# End of file: src/uvsync/hooks/base/caller_module_name_and_level.py
