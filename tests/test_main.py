"""
Tests for the command-line driver and console output.
"""

import config
import main
import ui.cli as cli


class TestResolvePaths:
    """Tests for resolve_paths()."""

    def test_resolve_when_two_arguments_then_uses_them(self):
        assert main.resolve_paths(["in.csv", "out.txt"]) == ("in.csv", "out.txt")

    def test_resolve_when_no_arguments_then_defaults(self, capsys):
        assert main.resolve_paths([]) == (config.DEFAULT_INPUT_FILE, config.DEFAULT_OUTPUT_FILE)
        assert "default read and write file names" in capsys.readouterr().out

    def test_resolve_when_three_arguments_then_defaults(self):
        assert main.resolve_paths(["a", "b", "c"]) == (config.DEFAULT_INPUT_FILE, config.DEFAULT_OUTPUT_FILE)


class TestMain:
    """End-to-end runs of main()."""

    def test_main_when_valid_roster_then_success_and_report_written(self, input_file, tmp_path, capsys):
        output = tmp_path / "output.txt"

        status = main.main([str(input_file), str(output)])

        assert status == main.EXIT_SUCCESS
        assert output.read_text(encoding="utf-8").startswith("Letter grade for 4 students given in")
        printed = capsys.readouterr().out
        assert "Average" in printed
        assert "Maximum" in printed

    def test_main_when_input_missing_then_failure(self, tmp_path, capsys):
        status = main.main([str(tmp_path / "missing.txt"), str(tmp_path / "out.txt")])
        assert status == main.EXIT_FAILURE
        assert "File Error" in capsys.readouterr().out

    def test_main_when_invalid_score_then_failure_and_no_output(self, tmp_path):
        source = tmp_path / "bad.txt"
        source.write_text("Bob,90,90,90,90,90,90,900\n", encoding="utf-8")
        output = tmp_path / "out.txt"

        assert main.main([str(source), str(output)]) == main.EXIT_FAILURE
        assert not output.exists()

    def test_main_when_score_count_wrong_then_failure(self, tmp_path):
        source = tmp_path / "short.txt"
        source.write_text("Bob,90,90,90\n", encoding="utf-8")
        assert main.main([str(source), str(tmp_path / "out.txt")]) == main.EXIT_FAILURE

    def test_main_when_only_blank_lines_then_failure(self, tmp_path):
        source = tmp_path / "blank.txt"
        source.write_text("\n\n", encoding="utf-8")
        assert main.main([str(source), str(tmp_path / "out.txt")]) == main.EXIT_FAILURE


class TestCliDisplay:
    """Tests for ui.cli output helpers."""

    def test_display_statistics_when_rows_then_prints_each(self, capsys):
        cli.display_statistics(["        Quiz 1  ", "Average 80.00   "])
        printed = capsys.readouterr().out
        assert "Quiz 1" in printed
        assert "Average 80.00" in printed

    def test_display_statistics_when_empty_then_warns(self, capsys):
        cli.display_statistics([])
        assert "No statistics to display" in capsys.readouterr().out

    def test_display_error_when_message_has_brackets_then_printed_verbatim(self, capsys):
        cli.display_error("bad [line]")
        assert "bad [line]" in capsys.readouterr().out
