import itertools
import json
import shutil
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch):
    """Keeps global and project config files of the developer out of the tests."""
    home_dir = tmp_path / "home" / "user"
    home_dir.mkdir(parents=True)
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home_dir)
    monkeypatch.chdir(work_dir)
    return home_dir


@pytest.fixture
def sonar_report(tmp_path: Path) -> Path:
    """A copy of a realistic preview report: 1 new BLOCKER, 1 new CRITICAL, 1 new MAJOR, 1 old MINOR."""
    target = tmp_path / "sonar-report.json"
    shutil.copy(FIXTURES_DIR / "sonar-report.json", target)
    return target


@pytest.fixture
def make_issue():
    counter = itertools.count(1)

    def _make_issue(severity="MAJOR", is_new=True, **extra):
        issue = {
            "key": extra.pop("key", f"ISSUE-{next(counter)}"),
            "component": "my:project:src/Main.java",
            "line": 1,
            "message": "Something is wrong.",
            "severity": severity,
            "rule": "squid:S0000",
            "status": "OPEN",
            "isNew": is_new,
            "creationDate": "2016-10-22T10:00:00",
        }
        issue.update(extra)
        return issue
    return _make_issue


@pytest.fixture
def write_report(tmp_path: Path):
    def _write_report(issues, name="report.json", **extra):
        data = {"version": "5.6", "issues": issues, "components": [], "rules": [], "users": []}
        data.update(extra)
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return path
    return _write_report
