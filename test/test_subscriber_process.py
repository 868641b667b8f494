import os
import signal
import subprocess
import sys
import time
from pathlib import Path

import pytest

pytest.importorskip("rclpy")

PACKAGE_ROOT = Path(__file__).resolve().parent.parent


def _start_node(*ros_args):
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in [str(PACKAGE_ROOT), env.get("PYTHONPATH", "")] if p
    )
    cmd = [sys.executable, "-m", "point_cloud_subscriber.subscriber_node"]
    if ros_args:
        cmd += ["--ros-args", *ros_args]
    return subprocess.Popen(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        env=env,
        cwd=str(PACKAGE_ROOT),
    )


def _interrupt_after(proc, seconds):
    """Let the node spin for ``seconds``, then send SIGINT and collect its output."""
    time.sleep(seconds)
    still_running = proc.poll() is None
    if still_running:
        proc.send_signal(signal.SIGINT)
    try:
        output, _ = proc.communicate(timeout=15)
    except subprocess.TimeoutExpired:
        proc.kill()
        output, _ = proc.communicate()
        pytest.fail(f"node did not exit after SIGINT:\n{output}")
    return still_running, output


def _node_lines(output, level):
    return [
        line for line in output.splitlines()
        if f"[{level}]" in line and "[point_cloud_subscriber]" in line
    ]


def test_idle_node_logs_nothing_and_exits_zero_on_sigint():
    proc = _start_node()
    still_running, output = _interrupt_after(proc, 3.0)

    assert still_running, output
    assert _node_lines(output, "INFO") == []
    assert proc.returncode == 0, output


def test_startup_line_is_debug_only():
    proc = _start_node("--log-level", "point_cloud_subscriber:=debug")
    still_running, output = _interrupt_after(proc, 3.0)

    assert still_running, output
    debug = _node_lines(output, "DEBUG")
    assert any("Waiting for PointCloud2 on /pct/point_cloud" in line for line in debug), output
    assert _node_lines(output, "INFO") == []
    assert proc.returncode == 0, output
