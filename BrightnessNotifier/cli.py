import logging
import sys

import click

from ._version import __version__
from .exceptions import BrightnessNotifierError
from .logic import (
    DEFAULT_FADE_MS,
    DEFAULT_STEP,
    DEFAULT_STEPS,
    DEFAULT_TIMEOUT_MS,
    MAX_FADE_MS,
    MAX_STEPS,
    Fade,
    build_request,
    run,
)
from .notify import DesktopNotifier
from .xbacklight import Xbacklight

INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


@click.command()
@click.option("-i", "--increase", type=click.IntRange(0, 255), is_flag=False, flag_value=DEFAULT_STEP,
              default=None, metavar="PERCENTAGE",
              help=f"Increase brightness level by a specified percentage (default: +{DEFAULT_STEP}%).")
@click.option("-d", "--decrease", type=click.IntRange(0, 255), is_flag=False, flag_value=DEFAULT_STEP,
              default=None, metavar="PERCENTAGE",
              help=f"Decrease brightness level by a specified percentage (default: -{DEFAULT_STEP}%).")
@click.option("-s", "--set", "set_", type=click.IntRange(1, 100), default=None, metavar="PERCENTAGE",
              help="Set brightness level to a specified percentage (range: 1% - 100%).")
@click.option("-g", "--get", is_flag=True, default=False,
              help="Display the current brightness level without making changes.")
@click.option("-t", "--timeout", type=click.IntRange(INT32_MIN, INT32_MAX), default=DEFAULT_TIMEOUT_MS,
              show_default=True, metavar="MILLISECONDS", help="Notification timeout duration in milliseconds.")
@click.option("-f", "--fade", "fade_time", type=click.IntRange(0, MAX_FADE_MS), default=DEFAULT_FADE_MS,
              show_default=True, metavar="MILLISECONDS",
              help=f"Fade time in milliseconds for changes in brightness level (range: 0 - {MAX_FADE_MS} ms).")
@click.option("-p", "--steps", type=click.IntRange(1, MAX_STEPS), default=DEFAULT_STEPS,
              show_default=True, metavar="STEPS",
              help=f"Number of steps in the fade for changes in brightness level (range: 1 - {MAX_STEPS}).")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log what is being done to stderr.")
@click.version_option(__version__, "--version")
def main(increase, decrease, set_, get, timeout, fade_time, steps, verbose):
    """
    Brightness Notifier for LXQt.

    Changes the display brightness with xbacklight and shows the resulting
    level in a desktop notification. Intended to be bound to the brightness keys.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )

    request = build_request(increase, decrease, set_, get)

    try:
        brightness = run(request, Fade(fade_time, steps), timeout, Xbacklight(), DesktopNotifier())
    except BrightnessNotifierError as e:
        click.echo(f"Error: {e}.", err=True)
        sys.exit(1)

    click.echo(f"Current brightness: {brightness}%")
