import logging
from enum import Enum
from typing import NamedTuple, Optional

from .exceptions import ControllerOperationError, InvocationError

logger = logging.getLogger(__name__)


DEFAULT_STEP = 5
DEFAULT_TIMEOUT_MS = 2000
DEFAULT_FADE_MS = 100
DEFAULT_STEPS = 25

MAX_FADE_MS = 60000
MAX_STEPS = 200

NOTIFICATION_ID = 1
SUMMARY = "Brightness"

LOW_BRIGHTNESS_ICON = "display-brightness-low"
MEDIUM_BRIGHTNESS_ICON = "display-brightness-medium"
HIGH_BRIGHTNESS_ICON = "display-brightness-high"

MEDIUM_BAND_START = 33
HIGH_BAND_START = 66


class Action(Enum):
    GET = "get"
    INCREASE = "increase"
    DECREASE = "decrease"
    SET = "set"
    NO_CHANGE = "no-change"


class Request(NamedTuple):
    action: Action
    percent: Optional[int] = None


class Fade(NamedTuple):
    time_ms: int = DEFAULT_FADE_MS
    steps: int = DEFAULT_STEPS


def build_request(increase: Optional[int], decrease: Optional[int], set_: Optional[int], get: bool) -> Request:
    """
    Turns the action flags of one invocation into a single Request.
    A percentage of None means the flag was not given at all; 0 is a valid increase/decrease.
    Raises InvocationError when more than one action flag is present.
    """
    given = []
    if increase is not None:
        given.append("--increase")
    if decrease is not None:
        given.append("--decrease")
    if set_ is not None:
        given.append("--set")
    if get:
        given.append("--get")
    if len(given) > 1:
        raise InvocationError(f"options {', '.join(given)} are mutually exclusive")

    if get:
        return Request(Action.GET)
    if set_ is not None:
        return Request(Action.SET, set_)
    if increase is not None:
        return Request(Action.INCREASE, increase)
    if decrease is not None:
        return Request(Action.DECREASE, decrease)
    return Request(Action.NO_CHANGE)


def brightness_icon(brightness: int) -> str:
    """
    Returns the freedesktop icon name for the band the brightness falls into.
    """
    if brightness < MEDIUM_BAND_START:
        return LOW_BRIGHTNESS_ICON
    elif brightness < HIGH_BAND_START:
        return MEDIUM_BRIGHTNESS_ICON
    else:
        return HIGH_BRIGHTNESS_ICON


def notification_body(brightness: int) -> str:
    return f"{brightness}% Brightness"


def apply_request(request: Request, fade: Fade, controller):
    """
    Performs the brightness change asked for by the request, if any.
    """
    if request.action is Action.SET:
        if not controller.set(request.percent, fade):
            raise ControllerOperationError(f"failed to set brightness to {request.percent}")
    elif request.action in (Action.INCREASE, Action.DECREASE):
        if request.action is Action.INCREASE:
            ok = controller.increase(request.percent, fade)
        else:
            ok = controller.decrease(request.percent, fade)
        if not ok:
            raise ControllerOperationError("failed to adjust the brightness level")
    else:
        # Nothing to change for --get or a bare invocation
        return
    logger.debug("Applied %s %s with %s", request.action.value, request.percent, fade)


def notify_brightness(controller, notifier, timeout_ms: int) -> int:
    """
    Reads the current brightness and shows it in a desktop notification.
    Returns the brightness that was shown.
    """
    brightness = controller.get()
    notifier.show(notification_body(brightness), brightness_icon(brightness), timeout_ms)
    return brightness


def run(request: Request, fade: Fade, timeout_ms: int, controller, notifier) -> int:
    """
    High-level function that applies the request and then reports the resulting brightness.
    Each step finishes before the next one starts and the first failure ends the run.
    """
    apply_request(request, fade, controller)
    return notify_brightness(controller, notifier, timeout_ms)
