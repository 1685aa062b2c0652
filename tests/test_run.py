# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: tests/test_run.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from syncmem.harness import HarnessModel, MemoryModel, build_harness, run

pytestmark = pytest.mark.usefixtures("restore_root_logger")


def test_run_writes_results(tmp_path: Path) -> None:
    outdir = tmp_path / "out"
    rc = run.main(["--cycles", "12", "--seed", "0x2a", "--outdir", str(outdir)])
    assert rc == 0
    data = json.loads((outdir / "results.json").read_text())
    assert data["cycles"] == 12
    assert data["seed"] == 42
    assert data["vectors_applied"] == 12
    assert data["errors"] == 0
    log = (outdir / "run.log").read_text()
    assert "PASS" in log
    # The file log carries no ANSI color codes
    assert "\033[" not in log


def test_run_defaults_to_ten_cycles(tmp_path: Path) -> None:
    assert run.main(["--outdir", str(tmp_path)]) == 0
    data = json.loads((tmp_path / "results.json").read_text())
    assert data["cycles"] == 10
    # A seed is always picked so the run can be replayed
    assert isinstance(data["seed"], int)


def test_run_with_config_file(tmp_path: Path) -> None:
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("cycles: 30\nseed: 3\naddr_mode: range\n")
    assert run.main([str(cfg), "--outdir", str(tmp_path / "o")]) == 0
    data = json.loads((tmp_path / "o" / "results.json").read_text())
    assert data["cycles"] == 30
    assert data["seed"] == 3


def test_command_line_beats_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("SYNCMEM_CYCLES", "50")
    assert run.main(["--cycles", "6", "--outdir", str(tmp_path)]) == 0
    data = json.loads((tmp_path / "results.json").read_text())
    assert data["cycles"] == 6


def test_env_cycles_used(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SYNCMEM_CYCLES", "4")
    assert run.main(["--outdir", str(tmp_path)]) == 0
    assert json.loads((tmp_path / "results.json").read_text())["cycles"] == 4


def test_bad_seed_exits() -> None:
    with pytest.raises(SystemExit, match="Invalid seed"):
        run.main(["--seed", "banana"])


class _StuckOutputModel(MemoryModel):
    def tick(self, reset, wr_en, rd_en, wr_data, addr) -> int:  # type: ignore[override]
        return super().tick(reset, wr_en, rd_en, wr_data, addr) | 0x80


def _broken_harness(config: HarnessModel):
    orch = build_harness(config)
    broken = _StuckOutputModel()
    orch.model = broken
    orch.clock = type(orch.clock)()
    orch.clock.add_listener(lambda: broken.clock_edge(orch.bus))
    return orch


def test_scoreboard_errors_exit_nonzero(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(run, "build_harness", _broken_harness)
    assert run.main(["--cycles", "5", "--seed", "1", "--outdir", str(tmp_path)]) == 1
    data = json.loads((tmp_path / "results.json").read_text())
    assert data["errors"] == 1
    assert "FAIL" in (tmp_path / "run.log").read_text()


@pytest.mark.parametrize("cycles", ["0", "-3"])
def test_invalid_cycles_exit_cleanly(cycles: str) -> None:
    with pytest.raises(SystemExit, match="Invalid configuration"):
        run.main(["--cycles", cycles])


def test_invalid_config_file_exits_cleanly(tmp_path: Path) -> None:
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("addr_mode: range\naddr_min: 50\naddr_max: 10\n")
    with pytest.raises(SystemExit, match="Invalid configuration"):
        run.main([str(cfg)])
