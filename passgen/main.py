import argparse
import logging

from . import pwgen, shell, ui, backend
from .charset import CharacterClass
from .config import ConfigFile, DEFAULT_CONFIG_FILE


def load_config(config_file, length=None, disabled=()):
    """Load config file and apply command line overrides."""
    cfg = ConfigFile(config_file)
    config = cfg.config
    if length is not None:
        config = config.with_length(length)
    for cls in disabled:
        config = config.without_class(cls)
    return config, cfg.thresholds


def non_negative_int(value):
    """Argument type for lengths and counts."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {number}")
    return number


def run_shell(config_file, timeout):
    config, thresholds = load_config(config_file)
    shell.SHELL_TIMEOUT_SECS = timeout
    shell_ui = shell.ShellUI(config, thresholds)
    shell_ui.start()


def run_pwgen(config_file, length, count, disabled):
    config, thresholds = load_config(config_file, length, disabled)
    for _ in range(count):
        try:
            password, strength = pwgen.generate(config, thresholds)
        except pwgen.EmptyPoolError:
            return print(ui.EMPTY_POOL_MESSAGE)
        print(password, strength, sep='   ')


def run_copy(config_file, length, disabled):
    config, thresholds = load_config(config_file, length, disabled)
    base_ui = ui.GeneratorUI(config, thresholds)
    base_ui.generate()
    base_ui.cmd_copy()


def parse_args(argv=None):
    """Process command line args."""
    ap = argparse.ArgumentParser(prog="passgen",
                                 description="Random password generator",
                                 formatter_class=argparse.RawTextHelpFormatter)
    ap.add_argument('--debug', action='store_true',
                    help="enable debug logging (to stderr)")

    # Sub-commands
    sp = ap.add_subparsers()
    ap_shell = sp.add_parser("shell", aliases=['sh'],
                             help="start shell (default)")
    ap_shell.set_defaults(func=run_shell)
    ap_pwgen = sp.add_parser("pwgen", help="generate some random passwords")
    ap_pwgen.set_defaults(func=run_pwgen)
    ap_copy = sp.add_parser("copy", aliases=['c'],
                            help="generate a password and copy it to clipboard")
    ap_copy.set_defaults(func=run_copy)

    for subparser in (ap_shell, ap_pwgen, ap_copy):
        subparser.add_argument('-c', '--config', dest='config_file',
                               default=DEFAULT_CONFIG_FILE,
                               help="config file (default: %(default)s)")

    ap_shell.add_argument('--timeout', type=int, default=shell.SHELL_TIMEOUT_SECS,
                          help="Quit when timeout expires "
                               "(default: %(default)s)")

    for subparser in (ap_pwgen, ap_copy):
        subparser.add_argument('-l', dest='length', type=non_negative_int,
                               help="length of password "
                                    f"(default: {pwgen.DEFAULT_LENGTH}, or from config)")
        subparser.set_defaults(disabled=[])
        for cls, option in ((CharacterClass.UPPER, '--no-upper'),
                            (CharacterClass.LOWER, '--no-lower'),
                            (CharacterClass.DIGIT, '--no-digits'),
                            (CharacterClass.SYMBOL, '--no-symbols')):
            subparser.add_argument(option, dest='disabled', action='append_const', const=cls,
                                   help=f"exclude {cls.short_name} characters")

    ap_pwgen.add_argument('-n', dest='count', type=non_negative_int, default=10,
                          help="number of passwords to generate "
                               "(default: %(default)s)")

    args = ap.parse_args(args=argv)

    if 'func' not in args:
        ap_shell.parse_args(args=[], namespace=args)

    return args


def main(argv=None):
    """Main program

    :param argv: Used in tests. Default is sys.argv
    :return: None
    """
    args = parse_args(argv)
    run_func = args.func
    delattr(args, 'func')
    if args.debug:
        logging.basicConfig(level='DEBUG')
    delattr(args, 'debug')
    try:
        run_func(**vars(args))
    except backend.MissingError as e:
        print(e)
