"""Unit tests for WTR CLI commands."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli.main import build_parser, main
from core.constants import LICENCE_HEADER
from tests.fixture_rows import build_row, sample_rows, write_register_csv


@pytest.fixture()
def register_path(tmp_path: Path) -> Path:
    """Write the sample register to a temporary file."""
    return write_register_csv(tmp_path / "WTR.csv", sample_rows())


def test_build_parser_requires_a_command() -> None:
    """Parser should reject invocations without a subcommand."""
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_cli_filter_writes_point_to_point_rows(
    register_path: Path,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Filter command should write only point-to-point rows to the output file."""
    output_path = tmp_path / "p2p.csv"

    exit_code = main(
        ["filter", str(register_path), "--output", str(output_path), "--point-to-point"]
    )
    output = capsys.readouterr().out

    assert exit_code == 0 and "row_count=3" in output
    lines = output_path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == ",".join(LICENCE_HEADER)
    assert len(lines) == 4


def test_cli_filter_combines_options_as_intersection(
    register_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Company and product code options should narrow each other."""
    exit_code = main(
        [
            "filter",
            str(register_path),
            "--output",
            "-",
            "--company",
            "MBNL",
            "--product-code",
            "401010",
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out.splitlines()[1].startswith("0100006/1,")
    assert "row_count=1" in captured.err


def test_cli_filter_defaults_to_downloaded_register(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Omitting the source should read the register in the data root."""
    write_register_csv(tmp_path / "WTR.csv", sample_rows())

    exit_code = main(
        ["--data-root", str(tmp_path), "filter", "--output", "-", "--company", "Arqiva Ltd"]
    )
    captured = capsys.readouterr()

    assert exit_code == 0 and "row_count=1" in captured.err


def test_cli_companies_lists_counts(
    register_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Companies command should print one tab-separated line per company."""
    exit_code = main(["companies", str(register_path)])
    output = capsys.readouterr().out.splitlines()

    assert exit_code == 0
    assert output == ["Arqiva Ltd\t1", "MBNL\t3", "Vodafone Ltd\t2"]


def test_cli_validate_reports_code_counts(
    register_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Validate command should exit zero for known codes."""
    exit_code = main(["validate", str(register_path)])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "row_count=6" in output and "301010\t3" in output


def test_cli_validate_returns_one_for_unknown_codes(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Validate command should print a friendly error for unknown codes."""
    bad_register = write_register_csv(
        tmp_path / "bad.csv", [build_row("1", product_code="999999")]
    )

    exit_code = main(["validate", str(bad_register)])
    output = capsys.readouterr().out.strip()

    assert exit_code == 1 and output.startswith("validation_error=")


def test_cli_download_prints_register_path(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Download command should print where the register was stored."""
    monkeypatch.setattr(
        "store.register_sdk.download_register",
        lambda config, force: config.register_path,
    )

    exit_code = main(["--data-root", str(tmp_path), "download"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 0 and output == str(tmp_path.resolve() / "WTR.csv")


def test_cli_companies_counts_many_companies_in_one_pass(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Companies command should scan the rows once, not once per company."""
    rows = [
        build_row(f"{index:07d}/1", licencee_company=f"Company {index:04d}")
        for index in range(500)
    ]
    rows.append(build_row("0000500/2", licencee_company="Company 0000"))
    many_register = write_register_csv(tmp_path / "many.csv", rows)
    predicate_calls: list[str] = []

    def _counting_filter_companies(*names: str):
        def _matches(row) -> bool:
            predicate_calls.append(row.licence_number)
            return row.licencee_company in names

        return _matches

    monkeypatch.setattr("cli.main.filter_companies", _counting_filter_companies)

    exit_code = main(["companies", str(many_register)])
    output = capsys.readouterr().out.splitlines()

    assert exit_code == 0
    assert len(predicate_calls) <= 2 * len(rows)
    assert len(output) == 500
    assert output[0] == "Company 0000\t2" and output[-1] == "Company 0499\t1"
