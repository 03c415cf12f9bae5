from __future__ import annotations

from wpdev import utils
from wpdev.utils import CommandResult, drop_noise_lines


def test_run_id_is_short_hex():
    rid = utils._gen_run_id()
    assert len(rid) == 8
    int(rid, 16)
    assert rid != utils._gen_run_id()


def test_diagnostic_prefers_stderr_and_drops_noise():
    result = CommandResult(1, "from stdout", "PHP Warning: junk\n\x1b[31mError: boom\x1b[0m\n")
    assert result.diagnostic() == "Error: boom"
    assert CommandResult(1, "only stdout", "").diagnostic() == "only stdout"


def test_drop_noise_lines_skips_stack_frames():
    assert drop_noise_lines("#0: frame\nreal line\n\n") == ["real line"]
