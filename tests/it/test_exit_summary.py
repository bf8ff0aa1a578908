"""End-to-end: summaries are printed by the interpreter at exit."""

import os
import subprocess
import sys
import textwrap

SCRIPT = textwrap.dedent(
    """
    from simplecheck import InstanceCounter, check, check_exception

    class Widget(InstanceCounter):
        pass

    def does_throw():
        raise RuntimeError("oh oh")

    widgets = [Widget() for _ in range(3)]
    del widgets[0]

    check(True)
    check(1, 1)
    check("abc", "abc")
    check_exception(does_throw)
    check(False)
    check("abc", "cde")
    check(1.5, 1)
    check(1, 2, "Error message")
    """
)


def _run(project_root, source):
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(project_root), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-c", source],
        capture_output=True,
        text=True,
        cwd=project_root,
        env=env,
        timeout=60,
    )


class TestExitSummary:
    def test_summary_and_instance_report(self, project_root):
        result = _run(project_root, SCRIPT)
        assert result.returncode == 0, result.stderr

        out = result.stdout
        assert out.count("Test successful!") == 4
        assert out.count("Error in test:") == 4
        assert out.count("Test summary:") == 1
        assert "Executed tests: 8\nFailed tests: 4\n" in out
        assert "\n--------------------------------------\nTest summary:\n" in out
        assert "Widget at the end of the program is 2 (NOT zero!)" in out
        assert "The total number of objects created was 3" in out

    def test_reports_in_reverse_order_of_first_use(self, project_root):
        """Widget is used before the first check, so its report comes last."""
        out = _run(project_root, SCRIPT).stdout
        assert out.index("Test summary:") < out.index("objects of type Widget")

    def test_no_checks_no_summary(self, project_root):
        result = _run(project_root, "import simplecheck\n")
        assert result.returncode == 0
        assert result.stdout == ""

    def test_module_runner(self, project_root, tmp_path):
        blocks = tmp_path / "it_blocks.py"
        blocks.write_text(
            "from simplecheck import check, check_block\n"
            "@check_block\n"
            "def block():\n"
            "    check(2, 3)\n"
        )
        source = (
            "import sys\n"
            "from simplecheck.cli import main\n"
            f"sys.exit(main(['run', '--strict', {str(blocks)!r}]))\n"
        )
        result = _run(project_root, source)
        assert result.returncode == 1
        assert "Failed tests: 1" in result.stdout
