from passgen.config import ConfigFile
from passgen.charset import CharacterClass, ALL_CLASSES
from passgen.strength import DEFAULT_THRESHOLDS
from passgen import pwgen


def test_defaults():
    cfg = ConfigFile()
    assert cfg.config == pwgen.Config()
    assert cfg.thresholds == DEFAULT_THRESHOLDS


def test_missing_file(tmp_path, capsys):
    config_file = tmp_path / 'missing.conf'
    cfg = ConfigFile(config_file)
    assert cfg.config == pwgen.Config()
    assert capsys.readouterr().out == f"Loading config {str(config_file)!r}...\n"


def test_load(tmp_path):
    config_file = tmp_path / 'passgen.conf'
    config_file.write_text("[passgen]\n"
                           "length = 24\n"
                           "classes = upper, digits\n"
                           "[strength]\n"
                           "good = 50\n"
                           "very_strong = 120\n")
    cfg = ConfigFile(config_file)
    assert cfg.config == pwgen.Config(24, {CharacterClass.UPPER, CharacterClass.DIGIT})
    assert cfg.thresholds == (50.0, 70.0, 120.0)


def test_warnings(tmp_path, capsys):
    config_file = tmp_path / 'passgen.conf'
    config_file.write_text("[passgen]\n"
                           "length = long\n"
                           "classes = emoji\n"
                           "colour = blue\n"
                           "[strength]\n"
                           "good = 80\n"
                           "[other]\n")
    cfg = ConfigFile(config_file)
    assert cfg.config.length == pwgen.DEFAULT_LENGTH
    assert cfg.config.classes == ALL_CLASSES
    assert cfg.thresholds == DEFAULT_THRESHOLDS
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"Loading config {str(config_file)!r}..."
    assert lines[1].startswith("WARNING: invalid value ['passgen'] 'length'")
    assert lines[2].startswith("WARNING: invalid value ['passgen'] 'classes'")
    assert lines[3].startswith("WARNING: unknown key ['passgen'] 'colour'")
    assert lines[4].startswith("WARNING: Thresholds must be non-negative and non-decreasing")
    assert lines[5] == f"WARNING: unknown section 'other' in config {str(config_file)!r}"
    assert len(lines) == 6
