"""Tests for the command-line interface."""

from cavegen.cli import build_parser, main


class TestParser:
    """Tests for argument parsing."""

    def test_defaults_leave_config_untouched(self):
        args = build_parser().parse_args([])
        assert args.config is None
        assert args.seed is None
        assert args.width is None
        assert args.iterations is None
        assert args.verbose is False

    def test_overrides(self):
        args = build_parser().parse_args(
            ["--width", "40", "--seed", "3", "--fill-probability", "0.4", "-v"]
        )
        assert args.width == 40
        assert args.seed == 3
        assert args.fill_probability == 0.4
        assert args.verbose is True


class TestMain:
    """Tests for the CLI entry point."""

    def test_generates_and_reports(self, capsys):
        exit_code = main(["--width", "40", "--height", "30", "--seed", "5"])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert "Generated 40x30 cave with seed 5" in out
        assert "Wall clusters removed" in out

    def test_bundled_config(self, capsys):
        exit_code = main(["--config", "small"])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert "Generated 48x32 cave with seed 7" in out

    def test_missing_config(self):
        assert main(["--config", "no_such_cave"]) == 1

    def test_invalid_override(self):
        assert main(["--width", "2"]) == 1

    def test_solid_cave_reports_missing_endpoints(self, capsys):
        exit_code = main(
            ["--width", "12", "--height", "12", "--seed", "1", "--fill-probability", "1.0"]
        )
        out = capsys.readouterr().out

        assert exit_code == 0
        assert "Endpoints not placed" in out

    def test_malformed_toml(self, tmp_path):
        path = tmp_path / "broken.toml"
        path.write_text("width = [unclosed\n")
        assert main(["--config", str(path)]) == 1

    def test_out_of_range_config_file(self, tmp_path):
        path = tmp_path / "tiny.toml"
        path.write_text("width = 1\n")
        assert main(["--config", str(path)]) == 1
