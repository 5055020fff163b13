# GeneratorUI
# (generator commands, display, clipboard)
#

from functools import wraps
from threading import Timer, Lock
import logging

from blessed import Terminal
import pyperclip

from . import pwgen
from .charset import CharacterClass, parse_class
from .strength import Strength

EMPTY_POOL_MESSAGE = "Select at least one character option!"
LAST_CLASS_WARNING = "At least one option must be selected!"
COPIED_MESSAGE = "Password copied to clipboard!"
NEUTRAL_LABEL = '---'
TOAST_SECS = 2.0

STRENGTH_COLORS = {
    Strength.WEAK: 'red',
    Strength.GOOD: 'yellow',
    Strength.STRONG: 'green',
    Strength.VERY_STRONG: 'bright_green',
}

log = logging.getLogger(__name__)


def with_password(func):
    """Require generated password on display. Decorator for UI commands."""
    @wraps(func)
    def wrapper(self, *args, **kwargs):
        if self.has_password():
            func(self, *args, **kwargs)
        else:
            print("Nothing to copy.")
    return wrapper


class Toast:

    """Transient notification, dismissed automatically after `secs`."""

    def __init__(self, term, secs=TOAST_SECS):
        self._term = term
        self._secs = secs
        self._timer = None
        self._message = None
        self._warning = False
        self._serial = 0
        self._lock = Lock()

    @property
    def message(self):
        return self._message

    @property
    def warning(self):
        return self._warning

    def show(self, message, warning=False):
        with self._lock:
            self._cancel()
            self._message, self._warning = message, warning
            self._serial += 1
            self._timer = Timer(self._secs, self._expire, args=(self._serial,))
            self._timer.daemon = True
            self._timer.start()
        style = self._term.bright_red if warning else self._term.bright_green
        print(style(message))

    def dismiss(self):
        with self._lock:
            self._cancel()

    def _expire(self, serial):
        # a timer of a replaced toast must not dismiss the new one
        with self._lock:
            if serial == self._serial:
                self._cancel()

    def _cancel(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._message, self._warning = None, False


class BaseUI:

    #################
    # Other Utility #
    #################

    def _copy(self, text):
        """Wraps copy-to-clipboard function to allow overriding."""
        pyperclip.copy(text)


class GeneratorUI(BaseUI):

    """UI commands of the password generator.

    Holds current configuration and the displayed password.
    Each command derives new configuration and dispatches it
    to :func:`pwgen.generate`. The generator itself has no state.

    """

    def __init__(self, config=None, thresholds=None):
        self._config = config or pwgen.Config()
        self._thresholds = thresholds
        self._term = Terminal()
        self._toast = Toast(self._term)
        self._display = ''
        self._strength = None  # StrengthEstimate

    @property
    def config(self):
        return self._config

    @property
    def display(self):
        return self._display

    @property
    def strength(self):
        return self._strength

    @property
    def toast(self):
        return self._toast

    def has_password(self):
        return bool(self._display) and self._display != EMPTY_POOL_MESSAGE

    def generate(self):
        """Generate new password from current config and display it."""
        try:
            self._display, self._strength = pwgen.generate(self._config, self._thresholds)
        except pwgen.EmptyPoolError:
            self._display, self._strength = EMPTY_POOL_MESSAGE, None
        self._print_display()

    ###############
    # UI Commands #
    ###############

    def cmd_generate(self):
        """Generate new password"""
        self.generate()

    def cmd_length(self, length):
        """Set password length and generate new password"""
        try:
            length = int(length)
        except ValueError:
            return print("Invalid length:", length)
        if not pwgen.MIN_LENGTH <= length <= pwgen.MAX_LENGTH:
            return print(f"Length must be between {pwgen.MIN_LENGTH} and {pwgen.MAX_LENGTH}.")
        self._config = self._config.with_length(length)
        self.generate()

    def cmd_toggle(self, name):
        """Enable/disable character class and generate new password

        Classes: upper, lower, digit, symbol.
        Unique prefix is enough, e.g. ``toggle sym``.
        At least one class must stay enabled.

        """
        try:
            cls = parse_class(name)
        except ValueError as e:
            return print(e)
        config = self._config.toggle(cls)
        if not config.classes:
            self._toast.show(LAST_CLASS_WARNING, warning=True)
            return
        self._config = config
        self.generate()

    def cmd_show(self):
        """Print current settings and password"""
        print(f"Length: {self._config.length}")
        print("Classes:", ' '.join(
            ('[x] ' if cls in self._config.classes else '[ ] ') + cls.short_name
            for cls in CharacterClass))
        self._print_display()

    @with_password
    def cmd_copy(self):
        """Copy displayed password to clipboard"""
        try:
            self._copy(self._display)
        except pyperclip.PyperclipException as e:
            log.warning("Failed to copy password to clipboard: %s", e)
            return
        self._toast.show(COPIED_MESSAGE)

    ###########
    # Display #
    ###########

    def strength_indicator(self) -> str:
        """Four-segment bar with label, neutral when nothing generated."""
        if self._strength is None:
            return f"[    ] {NEUTRAL_LABEL}"
        label = self._strength.label
        bar = '#' * label.level + ' ' * (len(Strength) - label.level)
        color = getattr(self._term, STRENGTH_COLORS[label])
        return f"[{color(bar)}] {color(str(self._strength))}"

    def _print_display(self):
        if self.has_password():
            print(self._display)
        else:
            print(self._term.yellow(self._display))
        print("Strength:", self.strength_indicator())
