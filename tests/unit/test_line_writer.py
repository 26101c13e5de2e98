import io
import re
import threading

import dlog
from dlog import DATE, LONGFILE, MICROSECONDS, SHORTFILE, STD_FLAGS, TIME, UTC, LineWriter
from logshim import Level


def test_print_concatenates_parts_without_separators() -> None:
    out = io.StringIO()
    LineWriter(out, flags=0).print("WARN", " a: 1", " done")
    assert out.getvalue() == "WARN a: 1 done\n"


def test_std_flags_prefix_date_and_time() -> None:
    out = io.StringIO()
    LineWriter(out, flags=STD_FLAGS).print("INFO x")
    assert re.fullmatch(r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2} INFO x\n", out.getvalue())


def test_microseconds_and_utc() -> None:
    out = io.StringIO()
    LineWriter(out, flags=TIME | MICROSECONDS | UTC).print("x")
    assert re.fullmatch(r"\d{2}:\d{2}:\d{2}\.\d{6} x\n", out.getvalue())


def test_prefix_comes_first() -> None:
    out = io.StringIO()
    LineWriter(out, prefix="[svc] ", flags=DATE).print("x")
    assert re.fullmatch(r"\[svc\] \d{4}/\d{2}/\d{2} x\n", out.getvalue())


def test_shortfile_names_the_calling_module() -> None:
    out = io.StringIO()
    log = dlog.new(out, Level.INFO, flags=SHORTFILE)
    log.info().msg("here")
    assert re.fullmatch(r"test_line_writer\.py:\d+: INFO here\n", out.getvalue())


def test_longfile_uses_full_path() -> None:
    out = io.StringIO()
    LineWriter(out, flags=LONGFILE).print("x")
    path = out.getvalue().split(":", 1)[0]
    assert path.endswith("test_line_writer.py")
    assert path != "test_line_writer.py"


def test_named_streams_resolve_at_write_time(capsys) -> None:
    LineWriter("stdout", flags=0).print("to out")
    LineWriter(flags=0).print("to err")
    captured = capsys.readouterr()
    assert captured.out == "to out\n"
    assert captured.err == "to err\n"


def test_concurrent_writes_do_not_interleave() -> None:
    out = io.StringIO()
    log = dlog.new(out, Level.INFO, flags=0)

    def worker(n: int) -> None:
        for i in range(200):
            log.info().integer("worker", n).integer("i", i).msg("tick")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    lines = out.getvalue().splitlines()
    assert len(lines) == 800
    assert all(re.fullmatch(r"INFO worker: \d i: \d+ tick", line) for line in lines)
