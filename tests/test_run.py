import json

from run import main


def test_run_prints_schedule(tmp_path, capsys):
    request_file = tmp_path / "request.json"
    request_file.write_text(json.dumps({
        "tasks": [{"id": "a", "title": "Write", "estimated_time": 45}],
        "commitments": [{"date": "2024-01-10", "start_time": "08:00", "end_time": "09:00"}],
        "chronotype": "morning",
        "date_range": {"start": "2024-01-10", "end": "2024-01-10"},
        "working_hours": {"start_hour": 8, "end_hour": 12},
    }))

    assert main([str(request_file)]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["scheduled_items"] == [{
        "task_id": "a",
        "title": "Write",
        "date": "2024-01-10",
        "start_time": "09:00",
        "duration": 45,
        "reason": "Peak focus time for the morning chronotype",
    }]
    assert output["unscheduled_task_ids"] == []


def test_run_usage(capsys):
    assert main([]) == 2
    assert "Usage" in capsys.readouterr().out
