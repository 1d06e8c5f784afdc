from ._version import __version__ as __version__
from .logic import (
    Action as Action,
)
from .logic import (
    Fade as Fade,
)
from .logic import (
    Request as Request,
)
from .logic import (
    brightness_icon as brightness_icon,
)
from .logic import (
    build_request as build_request,
)
from .logic import (
    run as run,
)
from .notify import (
    DesktopNotifier as DesktopNotifier,
)
from .xbacklight import (
    Xbacklight as Xbacklight,
)

__all__ = [
    "Action",
    "DesktopNotifier",
    "Fade",
    "Request",
    "Xbacklight",
    "brightness_icon",
    "build_request",
    "run",
]
