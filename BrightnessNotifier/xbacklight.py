import logging
import math
import subprocess

from .exceptions import ControllerOperationError, ControllerSpawnError, ParseOutputError

logger = logging.getLogger(__name__)


XBACKLIGHT = "xbacklight"

MAX_REPORTED_BRIGHTNESS = 255


def round_half_away(value: float) -> int:
    """
    Rounds to the nearest integer, halves away from zero (2.5 -> 3), unlike the built-in round().
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def parse_brightness(output: str) -> int:
    """
    Parses the output of `xbacklight -get`, e.g. "42.352941\n", into a whole percentage.
    """
    text = output.strip()
    try:
        value = float(text)
    except ValueError:
        raise ParseOutputError(f"could not parse brightness from {text!r}")
    if not math.isfinite(value):
        raise ParseOutputError(f"could not parse brightness from {text!r}")

    brightness = round_half_away(value)
    if not 0 <= brightness <= MAX_REPORTED_BRIGHTNESS:
        raise ParseOutputError(f"brightness {brightness} is out of range")
    return brightness


class Xbacklight:
    """
    Runs the xbacklight program to read and change the backlight of the X11 display.
    Every operation is a single attempt; xbacklight's own stderr is left to reach the terminal.
    """

    def __init__(self, executable: str = XBACKLIGHT):
        self.executable = executable

    def _run(self, args, capture=False) -> subprocess.CompletedProcess:
        command = [self.executable] + [str(arg) for arg in args]
        logger.debug("Running %s", " ".join(command))
        try:
            return subprocess.run(command, stdout=subprocess.PIPE if capture else None)
        except OSError as e:
            raise ControllerSpawnError(f"could not run {self.executable}: {e}")

    def _change(self, option: str, percent: int, fade) -> bool:
        try:
            result = self._run([option, percent, "-time", fade.time_ms, "-steps", fade.steps])
        except ControllerSpawnError as e:
            logger.debug("%s", e)
            return False
        logger.debug("%s exited with status %d", self.executable, result.returncode)
        return result.returncode == 0

    def get(self) -> int:
        """
        Returns the current brightness in percent.
        """
        result = self._run(["-get"], capture=True)
        if result.returncode != 0:
            raise ControllerOperationError(
                f"failed to read the current brightness ({self.executable} exited with status {result.returncode})"
            )
        # Undecodable bytes become U+FFFD and are then rejected by parse_brightness
        brightness = parse_brightness(result.stdout.decode("utf-8", errors="replace"))
        logger.debug("Current brightness is %d%%", brightness)
        return brightness

    def increase(self, percent: int, fade) -> bool:
        return self._change("-inc", percent, fade)

    def decrease(self, percent: int, fade) -> bool:
        return self._change("-dec", percent, fade)

    def set(self, percent: int, fade) -> bool:
        return self._change("-set", percent, fade)
