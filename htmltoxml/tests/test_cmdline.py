import os
import subprocess
import sys

import pytest

here = os.path.dirname(__file__)
script = os.path.abspath(os.path.join(here, os.pardir, os.pardir, "convert.py"))

pytestmark = pytest.mark.skipif(not os.path.exists(script),
                                reason="convert.py is only available in a source checkout")


def run(args, input):
    env = dict(os.environ)
    env["PYTHONIOENCODING"] = "utf-8"
    env["PYTHONPATH"] = os.pathsep.join(
        [os.path.dirname(script)] + [p for p in [env.get("PYTHONPATH")] if p])
    return subprocess.run([sys.executable, script] + args, input=input,
                          stdout=subprocess.PIPE, stderr=subprocess.PIPE,
                          env=env, check=True)


def test_stdin():
    result = run([], b"<p>A<p>B")
    assert result.stdout.decode("utf-8") == "<p>A</p><p>B</p>"
    assert result.stderr == b""


def test_file(tmp_path):
    path = tmp_path / "doc.html"
    path.write_bytes("<ul><li>caf\xe9".encode("windows-1252"))
    result = run(["--encoding", "windows-1252", str(path)], None)
    assert result.stdout.decode("utf-8") == "<ul><li>caf\xe9</li></ul>"


def test_errors():
    result = run(["-e", "-"], b"<p>x</div>")
    assert result.stdout.decode("utf-8") == "<p>x</p>"
    stderr = result.stderr.decode("utf-8")
    assert "Conversion errors:" in stderr
    assert "Position 4: Unexpected end tag (div)" in stderr
