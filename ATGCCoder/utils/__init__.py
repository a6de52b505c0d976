from ATGCCoder.utils.device import get_device, DeviceContext
from ATGCCoder.utils.logging import get_logger, ATGCLogger
from ATGCCoder.utils.io import read_bytes, write_bytes, write_text, ensure_dir, open_binary
from ATGCCoder.utils.timing import Timer, timing_context

__all__ = [
    "get_device",
    "DeviceContext",
    "get_logger",
    "ATGCLogger",
    "read_bytes",
    "write_bytes",
    "write_text",
    "ensure_dir",
    "open_binary",
    "Timer",
    "timing_context",
]
