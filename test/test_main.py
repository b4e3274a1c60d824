from __future__ import annotations
from collections.abc import Iterator
from pathlib import Path
import pytest
import structlog
from pyprompt.__main__ import main


@pytest.fixture(autouse=True)
def prompt_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    monkeypatch.setenv("HOME", "/home/alice")
    monkeypatch.setenv("PWD", "/home/alice/projects/app")
    monkeypatch.delenv("PYPROMPT_DEBUG", raising=False)
    cfg = tmp_path / "config.toml"
    monkeypatch.setenv("PYPROMPT_CONFIG", str(cfg))
    yield cfg
    # main() points structlog at the captured stderr
    structlog.reset_defaults()


def test_main_no_git(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--raw", "--host", "firefly"])
    assert capsys.readouterr().out == "firefly:~/projects/app$ "


def test_main_git(capsys: pytest.CaptureFixture[str]) -> None:
    main(
        [
            "--raw",
            "--git",
            ".git",
            "--head",
            "ref: refs/heads/main",
            "--hash",
            "0123456789abcdef",
            "--status",
            "## main...origin/main [ahead 2, behind 3]\nM  file1\n?? file2\n D file3",
        ]
    )
    assert capsys.readouterr().out == "~/projects/app@main#0123456↑2↓3+1~1?1$ "


def test_main_inside_git_dir(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--raw", "--git", ".", "--head", "ref: refs/heads/main", "--hash", "abc"])
    assert capsys.readouterr().out == "~/projects/app$ "


def test_main_bisecting(capsys: pytest.CaptureFixture[str]) -> None:
    main(
        [
            "--raw",
            "--git",
            ".git",
            "--head",
            "ref: refs/heads/main",
            "--hash",
            "0123456789abcdef",
            "--status",
            "## main",
            "--bisect-log",
            "--hash-length",
            "4",
        ]
    )
    assert capsys.readouterr().out == "~/projects/app@0123$ "


def test_main_bash_default(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--path-length", "1"])
    assert capsys.readouterr().out == r"\[\e[96m\]~/...app\[\e[m\]\$ "


def test_main_config_file(
    capsys: pytest.CaptureFixture[str], prompt_env: Path
) -> None:
    prompt_env.write_text('path_length = 1\ntheme = "light"\n', encoding="utf-8")
    main(["--ansi"])
    assert capsys.readouterr().out == "\x1B[34m~/...app\x1B[m$ "


def test_main_flags_override_config_file(
    capsys: pytest.CaptureFixture[str], prompt_env: Path
) -> None:
    prompt_env.write_text("path_length = 1\n", encoding="utf-8")
    main(["--raw", "--path-length", "2"])
    assert capsys.readouterr().out == "~/projects/app$ "


def test_main_invalid_config(
    capsys: pytest.CaptureFixture[str], prompt_env: Path
) -> None:
    prompt_env.write_text("path_length = 0\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["--raw"])
    assert excinfo.value.code == 2
    out, err = capsys.readouterr()
    assert out == ""
    assert "path_length must be a positive integer" in err


def test_main_debug_logs_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--raw", "--debug", "--git", ".git", "--head", "ref: refs/heads/main"])
    out, err = capsys.readouterr()
    assert out == "~/projects/app@$ "
    assert "Parsed git status" in err
    assert "Assembled prompt data" in err


def test_main_config_not_utf8(
    capsys: pytest.CaptureFixture[str], prompt_env: Path
) -> None:
    prompt_env.write_bytes(b'theme = "\xff"\n')
    with pytest.raises(SystemExit) as excinfo:
        main(["--raw"])
    assert excinfo.value.code == 2
    out, err = capsys.readouterr()
    assert out == ""
    assert str(prompt_env) in err


def test_main_config_is_directory(
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    monkeypatch.setenv("PYPROMPT_CONFIG", str(tmp_path))
    with pytest.raises(SystemExit) as excinfo:
        main(["--raw"])
    assert excinfo.value.code == 2
    assert capsys.readouterr().out == ""
