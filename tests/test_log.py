from soupdl.log import perr, pinf


def test_pinf_writes_prefixed_line(capsys):
    pinf("map saved successfully!")
    captured = capsys.readouterr()
    assert captured.err == "soupdl: info: map saved successfully!\n"
    assert captured.out == ""


def test_perr_writes_prefixed_line(capsys):
    perr("failed to get map path")
    captured = capsys.readouterr()
    assert captured.err.startswith("soupdl: error: ")
    assert captured.err.endswith("failed to get map path\n")
    assert captured.out == ""


def test_each_message_is_its_own_line(capsys):
    pinf("cleaning barrier tag 3")
    perr("max barrier check requests sent. ignoring current request.")
    lines = capsys.readouterr().err.splitlines()
    assert len(lines) == 2
    assert lines[0] == "soupdl: info: cleaning barrier tag 3"
    assert lines[1].startswith("soupdl: error: ")
    assert lines[1].endswith("max barrier check requests sent. ignoring current request.")