# Config file
# (defaults for length, classes and strength thresholds)
#

import configparser
from pathlib import Path

from .charset import parse_class
from .pwgen import Config
from .strength import DEFAULT_THRESHOLDS, check_thresholds

DATA_DIR = Path('~/.passgen')
DEFAULT_CONFIG_FILE = DATA_DIR / 'passgen.conf'


class ConfigFile:

    """Settings loaded from INI file.

    Example::

        [passgen]
        length = 20
        classes = upper lower digits

        [strength]
        good = 40
        strong = 70
        very_strong = 100

    Missing file or missing keys leave defaults in place.

    """

    def __init__(self, config_file=None):
        self._config = Config()
        self._thresholds = DEFAULT_THRESHOLDS
        if config_file is not None:
            self.load(config_file)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def thresholds(self):
        return self._thresholds

    def load(self, config_file):
        config_file = Path(config_file).expanduser()
        print(f'Loading config {str(config_file)!r}...')
        config = configparser.ConfigParser()
        config.read(config_file, encoding='utf-8')
        for section in config.sections():
            if section == 'passgen':
                self._load_passgen(config[section], config_file)
            elif section == 'strength':
                self._load_strength(config[section], config_file)
            else:
                print(f"WARNING: unknown section {section!r} in config {str(config_file)!r}")

    def _load_passgen(self, section, config_file):
        for key in section:
            value = section[key]
            try:
                if key == 'length':
                    length = int(value)
                    if length < 0:
                        raise ValueError(f"negative length: {length}")
                    self._config = self._config.with_length(length)
                elif key == 'classes':
                    classes = [parse_class(name) for name in value.replace(',', ' ').split()]
                    if not classes:
                        raise ValueError("no character class")
                    self._config = Config(self._config.length, classes)
                else:
                    print(f"WARNING: unknown key [{section.name!r}] {key!r} in config {str(config_file)!r}")
            except ValueError as e:
                print(f"WARNING: invalid value [{section.name!r}] {key!r} in config {str(config_file)!r}: {e}")

    def _load_strength(self, section, config_file):
        thresholds = self._thresholds._asdict()
        for key in section:
            if key not in thresholds:
                print(f"WARNING: unknown key [{section.name!r}] {key!r} in config {str(config_file)!r}")
                continue
            try:
                thresholds[key] = float(section[key])
            except ValueError as e:
                print(f"WARNING: invalid value [{section.name!r}] {key!r} in config {str(config_file)!r}: {e}")
        try:
            self._thresholds = check_thresholds(self._thresholds._make(thresholds.values()))
        except ValueError as e:
            print(f"WARNING: {e}, using defaults")
