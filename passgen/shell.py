# ShellUI
# (shell-like user interface)
#

import textwrap
from inspect import signature

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.completion import NestedCompleter, WordCompleter

from .ui import GeneratorUI
from .backend import timeout
from .charset import class_names
from . import pwgen

SHELL_TIMEOUT_SECS = 600  # 10 minutes


class ShellInput:

    """Command line input with completion, history and status toolbar."""

    def __init__(self, commands, toolbar=None):
        completions = dict.fromkeys(commands)
        completions['toggle'] = WordCompleter(class_names())
        completions['length'] = WordCompleter(
            [str(n) for n in range(pwgen.MIN_LENGTH, pwgen.MAX_LENGTH + 1)])
        self._session = PromptSession(
            completer=NestedCompleter(completions),
            complete_while_typing=True,
            bottom_toolbar=toolbar,
            refresh_interval=0.5 if toolbar else 0,
        )

    def input(self, prompt):
        return self._session.prompt(FormattedText([('bold', prompt)]))

    def cancel(self, exception=TimeoutError):
        self._session.app.exit(exception=exception, style='class:exiting')


class ShellUI(GeneratorUI):

    """Shell allows user type and execute commands.

    Commands are the `cmd_*` methods, each taking at most one argument.
    A unique prefix selects the command (``t sym`` is ``toggle symbol``).
    Notifications are shown in bottom toolbar until dismissed.

    The entry point is :meth:`start`.

    """

    def __init__(self, config=None, thresholds=None):
        super().__init__(config, thresholds)
        self._commands = {name[4:]: getattr(self, name)
                          for name in dir(self) if name.startswith('cmd_')}
        self._quit = False

    def start(self):
        """Start the shell. Returns when done."""
        self.generate()
        try:
            session = ShellInput(sorted(self._commands), self._toolbar)
            while not self._quit:
                with timeout(SHELL_TIMEOUT_SECS, session.cancel):
                    cmdline = session.input("> ")
                if cmdline.strip():
                    self.dispatch(cmdline)
        except (KeyboardInterrupt, EOFError):
            # Ctrl-C, Ctrl-D
            pass
        except TimeoutError:
            print("Timeout after %s seconds." % SHELL_TIMEOUT_SECS)
        finally:
            self._toast.dismiss()

    def dispatch(self, cmdline):
        """Execute one command line, e.g. ``toggle upper``."""
        command, *args = cmdline.split(None, 1)
        func = self._find_command(command)
        if func is None:
            return print("Unknown command. Try 'help'.")
        try:
            func(*args)
        except TypeError:
            print(f"Usage: {self._usage(func)}")

    def cmd_quit(self):
        """Quit"""
        self._quit = True

    def cmd_help(self, command=None):
        """Print list of all commands or full help for a command"""
        if command is None:
            for name in sorted(self._commands):
                self._print_help(name)
            return
        func = self._find_command(command)
        if func is None:
            return print("Not found.")
        self._print_help(func.__name__[4:], full=True)

    def _find_command(self, command):
        candidates = [name for name in self._commands if name.startswith(command)]
        if command in self._commands:
            return self._commands[command]
        if len(candidates) == 1:
            return self._commands[candidates[0]]
        return None

    def _toolbar(self):
        if self._toast.message:
            style = 'bg:ansired' if self._toast.warning else 'bg:ansigreen'
            return FormattedText([(style, ' ' + self._toast.message + ' ')])
        strength = self._strength.label if self._strength else '---'
        return FormattedText([('', f' length={self._config.length}  strength={strength} ')])

    def _usage(self, func):
        params = ' '.join(f'<{p.name}>' if p.default is p.empty else f'[{p.name}]'
                          for p in signature(func).parameters.values())
        return f"{func.__name__[4:]} {params}".strip()

    def _print_help(self, name, full=False):
        func = self._commands[name]
        summary, _, details = func.__doc__.partition('\n')
        print(self._usage(func).ljust(18), summary.strip())
        if full and details.strip():
            print('\n', textwrap.dedent(details).strip(), sep='')
