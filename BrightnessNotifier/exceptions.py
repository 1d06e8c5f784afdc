import click


class BrightnessNotifierError(Exception):
    """
    Generic error class designed to make catching errors under one umbrella easy.
    """


class InvocationError(BrightnessNotifierError, click.UsageError):
    """Conflicting or invalid command line options"""

    def __init__(self, message: str, ctx=None):
        click.UsageError.__init__(self, message, ctx)


class ControllerSpawnError(BrightnessNotifierError, OSError):
    """The brightness program could not be started"""


class ControllerOperationError(BrightnessNotifierError):
    """The brightness program reported a failure"""


class ParseOutputError(BrightnessNotifierError, ValueError):
    """The brightness program printed something that is not a brightness"""


class NotificationError(BrightnessNotifierError):
    """The desktop notification could not be dispatched"""

    def __init__(self, detail):
        self.detail = detail
        super().__init__(f"failed to display notification: {detail}")
