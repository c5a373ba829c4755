from main import parse_args


def test_defaults():
    args, rest = parse_args([])
    assert args.log_level == "WARNING"
    assert args.theme == "light"
    assert rest == []


def test_options_and_qt_passthrough():
    args, rest = parse_args(["--log-level", "DEBUG", "--theme", "dark", "-platform", "offscreen"])
    assert args.log_level == "DEBUG"
    assert args.theme == "dark"
    assert rest == ["-platform", "offscreen"]
