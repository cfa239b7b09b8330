import json

import pytest

from frs.config.settings import Settings, settings
from frs.pipelines import evaluate as evaluate_pipeline
from frs.pipelines.recommend import EXIT_INPUT_ERROR, main, render_recommendations, run

SCENARIO_INPUT = "6 2\n7\n1 2\n1 3\n2 4\n3 4\n3 5\n4 5\n4 6\n"


def test_render_recommendations(scenario):
    assert render_recommendations(scenario, 1, 2) == (
        "Friend Recommendations for 1\n"
        "By Common Friends:\n"
        "User 4 (Common Friends: 2)\n"
        "User 5 (Common Friends: 1)\n"
        "\n"
        "By Network Distance:\n"
        "User 4 (Distance: 2)\n"
        "User 5 (Distance: 2)\n"
        "\n"
        "Advanced Recommendation:\n"
        "User 4 (Score: 8)\n"
        "User 5 (Score: 2)"
    )


def test_run_reports_users_one_to_n():
    out = run(SCENARIO_INPUT)

    assert out.startswith("Social Network Structure:\nUser 0 is connected to:\nUser 1 is connected to: 2 3\n")
    for uid in range(1, 7):
        assert f"Friend Recommendations for {uid}\n" in out
    assert "Friend Recommendations for 0\n" not in out


def test_run_with_overrides():
    out = run(SCENARIO_INPUT, max_distance=3, user_ids=[1])

    assert "User 6 (Distance: 3)" in out
    assert out.count("Friend Recommendations for") == 1


def test_main_reads_input_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SCENARIO_INPUT)

    code = main(["--input", str(path), "--user", "4"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Friend Recommendations for 4" in out
    assert "User 1 (Common Friends: 2)" in out


def test_main_rejects_malformed_input(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("6 2 3\n1 2\n")

    assert main(["--input", str(path)]) == EXIT_INPUT_ERROR
    assert capsys.readouterr().out == ""


def test_settings_env_override(monkeypatch):
    monkeypatch.setenv("FRS_MAX_DISTANCE", "4")
    monkeypatch.setenv("RUN_ID", "ci")
    monkeypatch.delenv("FRS_RUN_ID", raising=False)

    assert Settings().max_distance == 4
    assert Settings.run_id_from_env() == "ci"


def test_run_evaluation_writes_artifacts(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "artifacts_dir", str(tmp_path / "artifacts"))
    edges = tmp_path / "edges.txt"
    edges.write_text("\n".join(f"{a} {b}" for a in range(8) for b in range(a + 1, 8) if (a + b) % 3))

    metrics = evaluate_pipeline.run_evaluation("unit", edges_path=str(edges), k=3, max_users=None)

    out_dir = tmp_path / "artifacts" / "unit"
    assert json.loads((out_dir / "metrics.json").read_text()) == metrics
    assert set(metrics) >= {"common_friends", "network_distance", "advanced"}
    manifest = json.loads((out_dir / "manifest.json").read_text())
    assert manifest["dataset"] == "edges.txt"
    assert manifest["strategies"] == ["common_friends", "network_distance", "advanced"]
    assert "Offline Evaluation Report" in (out_dir / "report.md").read_text()


def test_evaluate_main_reports_bad_edge_list(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "artifacts_dir", str(tmp_path))

    assert evaluate_pipeline.main(["--edges", str(tmp_path / "missing.txt")]) == 2


@pytest.mark.parametrize("user_id", [0, 99])
def test_render_recommendations_for_unknown_user(scenario, user_id):
    text = render_recommendations(scenario, user_id, 2)
    assert text.splitlines()[1:] == ["By Common Friends:", "", "By Network Distance:", "", "Advanced Recommendation:"]


def test_main_missing_input_file(tmp_path):
    assert main(["--input", str(tmp_path / "absent.txt")]) == EXIT_INPUT_ERROR


def test_main_rejects_undecodable_input(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_bytes(b"3 2 1\n1 \xff\n")

    assert main(["--input", str(path)]) == EXIT_INPUT_ERROR
    assert capsys.readouterr().out == ""


def test_max_users_setting(monkeypatch):
    monkeypatch.setenv("FRS_MAX_USERS", "25")

    assert Settings().max_users == 25
    assert settings.max_users == 500
