import pytest

from rclf.cli import main, usage

VALID = '&rcl\n&c[0]\nname; age\n"bob": 3\n&e\n'
NO_RCL = '&c[0]\nname; age\n"bob": 3\n&e\n'


@pytest.fixture
def valid_file(tmp_path):
    path = tmp_path / "doc.rclf"
    path.write_text(VALID)
    return str(path)


@pytest.fixture
def no_rcl_file(tmp_path):
    path = tmp_path / "bad.rclf"
    path.write_text(NO_RCL)
    return str(path)


def test_version(capsys):
    assert main(["version"]) == 0
    assert "version 0.1" in capsys.readouterr().out


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == usage()
    assert "[rclf] return 1: unknown arg" in captured.err


def test_usage_lists_options():
    text = usage()
    for option in ("-f", "-n", "-c", "-k", "-v"):
        assert f"  {option} " in text


def test_unknown_argument(capsys):
    assert main(["out", "-x"]) == 1
    assert "unknown arg -x" in capsys.readouterr().err


def test_option_without_operand(capsys):
    assert main(["out", "-f"]) == 1
    assert "unknown arg -f" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    missing = str(tmp_path / "missing.rclf")
    assert main(["out", "-f", missing]) == 2
    assert f"can't open file {missing}" in capsys.readouterr().err


def test_print_all(valid_file, capsys):
    assert main(["out", "-f", valid_file]) == 0
    out = capsys.readouterr().out
    assert f'[rclf] reading "{valid_file}"...' in out
    for word in ('"name"', '"age"', '"bob"', '"3"'):
        assert word in out


def test_syntax_error_reports_parsing_failure(no_rcl_file, capsys):
    assert main(["out", "-f", no_rcl_file]) == 3
    err = capsys.readouterr().err
    assert "missing &rcl tag" in err
    assert "parsing failed" in err


def test_disable_syntax_check(no_rcl_file, capsys):
    assert main(["out", "-n", "-f", no_rcl_file]) == 0
    assert '"bob"' in capsys.readouterr().out


def test_duplicate_column_fails(tmp_path, capsys):
    path = tmp_path / "dup.rclf"
    path.write_text("&c[1]\na;\nx:\n&e\n&c[1]\nb;\ny:\n&e\n")
    assert main(["out", "-n", "-f", str(path)]) == 3
    assert "duplicate column index" in capsys.readouterr().err


def test_print_column(valid_file, capsys):
    assert main(["out", "-f", valid_file, "-c", "0"]) == 0
    lines = capsys.readouterr().out.splitlines()[1:]
    assert lines[0].startswith("Col0 0/ ")
    assert lines[-1].endswith('"3"')


def test_print_key(valid_file, capsys):
    assert main(["out", "-f", valid_file, "-c", "0", "-k", "1"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == 'Col0 1 0~ "3"'


def test_print_value(valid_file, capsys):
    assert main(["out", "-f", valid_file, "-c", "0", "-k", "0", "-v", "0"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == 'Col0 0 0~ "bob"'


def test_out_of_range_key(valid_file, capsys):
    assert main(["out", "-f", valid_file, "-c", "0", "-k", "9"]) == 1
    assert "unknown arg 9" in capsys.readouterr().err


def test_out_of_range_column_prints_nothing(valid_file, capsys):
    assert main(["out", "-f", valid_file, "-c", "4"]) == 0
    assert capsys.readouterr().out.splitlines()[1:] == []