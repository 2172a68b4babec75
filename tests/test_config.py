from stamp_painter.config import (Config, parse_arguments, parse_dna, DEFAULT_DNA,
                                  DEFAULT_INPUT, DEFAULT_OUTPUT, DEFAULT_SPRITE)


def test_defaults():
    res = parse_arguments([])
    assert res.ok
    assert res.config == Config(DEFAULT_INPUT, DEFAULT_SPRITE, DEFAULT_OUTPUT, DEFAULT_DNA)
    assert res.config.dna_length == 500
    assert res.config.output_path == "output.png"


def test_short_and_long_flags():
    res = parse_arguments(["-i", "a.png", "--sprite", "b.png", "-o", "c.png", "--dna", "42"])
    assert res.ok
    assert res.config == Config("a.png", "b.png", "c.png", 42)


def test_unknown_flags_are_ignored():
    res = parse_arguments(["--verbose", "-x", "-d", "7", "stray"])
    assert res.ok
    assert res.config.dna_length == 7


def test_trailing_flag_without_value_is_ignored():
    res = parse_arguments(["-i", "a.png", "-o"])
    assert res.ok
    assert res.config.input_path == "a.png"
    assert res.config.output_path == DEFAULT_OUTPUT


def test_help_short_circuits():
    for flag in ("-h", "--help"):
        res = parse_arguments(["-d", "3", flag, "-d", "oops"])
        assert res.show_help
        assert not res.ok
        assert res.error is None


def test_non_numeric_dna_is_reported_not_raised():
    res = parse_arguments(["--dna", "lots"])
    assert not res.ok
    assert "lots" in res.error


def test_negative_dna_rejected():
    n, err = parse_dna("-5")
    assert n is None
    assert "negative" in err


def test_zero_dna_allowed():
    assert parse_dna("0") == (0, None)
