import json

import pytest

from mocell.cli import build_parser, main


@pytest.mark.smoke
def test_cli_prints_front_as_json(capsys):
    code = main(["--cities", "6", "--pop-size", "9", "--archive-size", "5", "--max-evaluations", "45", "--seed", "1"])
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["evaluations"] == 45
    assert 1 <= len(payload["front"]) <= 5
    for member in payload["front"]:
        assert sorted(member["tour"]) == list(range(6))
        assert len(member["objectives"]) == 2


def test_cli_rejects_tiny_instances():
    with pytest.raises(SystemExit) as excinfo:
        main(["--cities", "2"])
    assert excinfo.value.code == 2


def test_cli_reports_configuration_errors():
    # budget below the grid size
    assert main(["--cities", "5", "--pop-size", "9", "--max-evaluations", "4"]) == 2


def test_parser_validates_probabilities():
    parser = build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["--crossover-prob", "1.5"])
    args = parser.parse_args(["--neighborhood", "4"])
    assert args.neighborhood == 4
