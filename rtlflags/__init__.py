"""rtlflags: apply rtl-sdr settings given as command-line flags."""

from .application import FLAGS, Context, visited_flags
from .domain import SamplingMode, ScientificNotation
from .errors import DeviceRejected, InvalidFormat, RtlFlagsError
from .ports import Radio

__version__ = "0.1.0"

__all__ = [
    "Context",
    "DeviceRejected",
    "FLAGS",
    "InvalidFormat",
    "Radio",
    "RtlFlagsError",
    "SamplingMode",
    "ScientificNotation",
    "visited_flags",
]
