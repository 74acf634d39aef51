import os

from external_apps import open_in_app, start_detached


class FakePopen:
    def __init__(self, missing=()):
        self.missing = set(missing)
        self.calls = []

    def __call__(self, argv, **kwargs):
        self.calls.append((argv, kwargs))
        if argv[0] in self.missing:
            raise FileNotFoundError(argv[0])
        return object()


def test_first_working_candidate_is_used(tmp_path):
    target = tmp_path / "data.csv"
    target.write_text("a", encoding="utf-8")
    popen = FakePopen(missing={"scalc"})
    config = {"APPS": {"libreoffice": [["scalc"], ["soffice", "--calc"]]}}

    message = open_in_app("libreoffice", str(target), config, popen=popen)

    assert message == "Opened in LibreOffice."
    assert [argv for argv, _ in popen.calls] == [
        ["scalc", str(target)],
        ["soffice", "--calc", str(target)],
    ]
    _, kwargs = popen.calls[-1]
    assert kwargs["start_new_session"] is True


def test_reports_not_found_when_nothing_starts():
    popen = FakePopen(missing={"excel"})
    config = {"APPS": {"excel": [["excel"]]}}
    assert open_in_app("excel", "x.xlsx", config, popen=popen) == "Excel not found."


def test_relative_path_is_made_absolute():
    popen = FakePopen()
    config = {"APPS": {"excel": [["excel"]]}}
    open_in_app("excel", "x.xlsx", config, popen=popen)
    argv, _ = popen.calls[0]
    assert argv[-1] == os.path.abspath("x.xlsx")


def test_missing_absolute_executable_is_skipped_without_spawning(tmp_path):
    popen = FakePopen()
    exe = str(tmp_path / "nope" / "scalc.exe")
    assert start_detached([exe, "f.csv"], popen=popen) is False
    assert popen.calls == []


def test_no_candidates_configured():
    assert open_in_app("excel", "x.xlsx", {}, popen=FakePopen()) == "Excel not found."
