"""End-to-end tests for the click CLI."""

import json

from click.testing import CliRunner

from ims.infrastructure.cli.main import cli


def _script(tmp_path, *calls) -> str:
    path = tmp_path / "script.jsonl"
    lines = ["# seed"] + [json.dumps({"op": op, "args": args}) for op, args in calls]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)


SEED = (
    ("add_item", {"name": "Widget", "quantity": 10, "price": 2.5}),
    ("add_item", {"name": "Gadget", "quantity": 5, "price": 10.0}),
    ("record_sale", {"items": [[1, 3], [2, 1]]}),
)


class TestReplay:

    def test_replays_calls(self, tmp_path):
        result = CliRunner().invoke(cli, ["replay", _script(tmp_path, *SEED)])

        assert result.exit_code == 0, result.output
        assert "Item #1 added" in result.output
        assert "Item #2 added" in result.output
        assert "Sale #1" in result.output
        assert "17.50" in result.output

    def test_rejected_call_reported_and_run_continues(self, tmp_path):
        script = _script(
            tmp_path,
            *SEED,
            ("record_sale", {"items": [[1, 100]]}),
            ("get_item_details", {"item_id": 1}),
        )
        result = CliRunner().invoke(cli, ["replay", script])

        assert result.exit_code == 0, result.output
        assert "error: Insufficient stock for item: Widget" in result.output
        assert "> get_item_details" in result.output

    def test_wrongly_typed_arguments_do_not_abort_run(self, tmp_path):
        script = _script(
            tmp_path,
            *SEED,
            ("search_item_by_name", {"substring": 5}),
            ("get_sale", {"sequence": "x"}),
            ("record_sale", {"items": [[[1], 1]]}),
            ("get_item_details", {"item_id": [1]}),
            ("get_item_details", {"item_id": 2}),
        )
        result = CliRunner().invoke(cli, ["replay", script])

        assert result.exit_code == 0, result.output
        assert result.output.count("error: ") == 4
        assert "Gadget" in result.output.split("> get_item_details")[-1]

    def test_strict_stops_at_first_error(self, tmp_path):
        script = _script(
            tmp_path,
            ("remove_item", {"item_id": 1}),
            ("add_item", {"name": "Widget", "quantity": 1, "price": 1.0}),
        )
        result = CliRunner().invoke(cli, ["replay", "--strict", script])

        assert result.exit_code != 0
        assert "Line 2: Item with ID 1 not found" in result.output
        assert "Item #1 added" not in result.output

    def test_report(self, tmp_path):
        result = CliRunner().invoke(
            cli, ["replay", "--report", "--threshold", "5", _script(tmp_path, *SEED)]
        )

        assert result.exit_code == 0, result.output
        assert "== Financial overview" in result.output
        assert "57.50" in result.output
        assert "== Reorder suggestions (below 5)" in result.output
        assert "== Top 5 sellers" in result.output

    def test_report_defaults_from_environment(self, tmp_path):
        result = CliRunner().invoke(
            cli,
            ["replay", "--report", _script(tmp_path, *SEED)],
            env={"IMS_REORDER_THRESHOLD": "8", "IMS_TOP_N": "1"},
        )

        assert result.exit_code == 0, result.output
        assert "== Reorder suggestions (below 8)" in result.output
        assert "== Top 1 sellers" in result.output

    def test_invalid_json_line(self, tmp_path):
        path = tmp_path / "bad.jsonl"
        path.write_text("{not json}\n", encoding="utf-8")

        result = CliRunner().invoke(cli, ["replay", str(path)])

        assert result.exit_code != 0
        assert "Line 1: invalid JSON" in result.output


class TestOperations:

    def test_lists_operations(self):
        result = CliRunner().invoke(cli, ["operations"])
        assert result.exit_code == 0
        assert "record_sale" in result.output.split()
        assert "get_top_selling_items" in result.output.split()
