import subprocess

import pytest

from pegshell import Job, Pipeline, PipelineRunner, parse_script


@pytest.fixture
def runner(tmp_path) -> PipelineRunner:
    return PipelineRunner(cwd=tmp_path)


def test_run_single_job(runner):
    result = runner.run(parse_script("echo hello world")[0])
    assert result.exit_code == 0
    assert result.stdout == "hello world\n"


def test_run_pipeline_chains_jobs(runner):
    result = runner.run(parse_script("printf 'b\\na\\n' | sort | tr a-z A-Z")[0])
    assert result.stdout == "A\nB\n"


def test_redirection_files(runner, tmp_path):
    (tmp_path / "in.txt").write_text("hello\n")
    result = runner.run(parse_script("cat < in.txt > out.txt")[0])
    assert result.exit_code == 0
    assert result.stdout == ""
    assert (tmp_path / "out.txt").read_text() == "hello\n"


def test_exit_code_of_last_job(runner):
    assert runner.run(parse_script("false")[0]).exit_code != 0
    assert runner.run(parse_script("false | true")[0]).exit_code == 0


def test_stderr_is_captured(runner):
    result = runner.run(parse_script("ls missing-file-for-test")[0])
    assert result.exit_code != 0
    assert "missing-file-for-test" in result.stderr


def test_unknown_program(runner):
    result = runner.run(Pipeline(jobs=[Job.from_words(["pegshell-no-such-program"])]))
    assert result.exit_code == 127
    assert result.stderr


def test_missing_stdin_file(runner):
    result = runner.run(parse_script("cat < nope.txt")[0])
    assert result.exit_code == 1
    assert "nope.txt" in result.stderr


def test_background_pipeline_is_not_awaited(runner, tmp_path):
    result = runner.run(parse_script("echo later & > bg.txt")[0])
    assert result.exit_code == 0
    assert len(runner.background) == 1
    assert runner.wait_background() == [0]
    assert runner.background == []
    assert (tmp_path / "bg.txt").read_text() == "later\n"


def test_finished_background_processes_are_dropped(runner):
    runner.run(parse_script("true &")[0])
    assert len(runner.background) == 1
    runner.background[0].wait()
    runner.run(parse_script("true")[0])
    assert runner.background == []


def test_abort_closes_pipes(runner):
    process = subprocess.Popen(["printf", "x"], stdout=subprocess.PIPE, text=True)
    runner._abort([process])
    assert process.stdout.closed
    assert process.returncode is not None


def test_failed_spawn_in_pipeline_reports_missing_program(runner):
    result = runner.run(parse_script("printf x | pegshell-no-such-program")[0])
    assert result.exit_code == 127
