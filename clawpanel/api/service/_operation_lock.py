"""One lifecycle operation at a time per service port, across threads and processes."""

import os
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import psutil

from ...utils.get_home_dir import get_home_dir
from .ServiceError import OperationInProgress


def _pid_alive(pid: int) -> bool:
    return pid > 0 and psutil.pid_exists(pid)


def _read_holder(lock_file: Path) -> int:
    try:
        return int(lock_file.read_text(encoding="utf-8").strip() or "0")
    except (OSError, ValueError):
        return 0


def _try_create(lock_file: Path) -> bool:
    """Create ``lock_file`` stamped with our pid; False if it already exists."""
    try:
        fd = os.open(lock_file, os.O_CREAT | os.O_EXCL | os.O_WRONLY)
    except FileExistsError:
        return False
    try:
        os.write(fd, str(os.getpid()).encode("utf-8"))
    finally:
        os.close(fd)
    return True


def _claim_stale(lock_file: Path, stale_pid: int) -> bool:
    """Move a dead holder's lock out of the way.

    The rename is atomic, so exactly one caller ends up with the stale file.
    If the file changed hands between reading it and renaming it, it is put
    back and False is returned.
    """
    claimed = lock_file.with_name(f"{lock_file.name}.{uuid.uuid4().hex}")
    try:
        os.rename(lock_file, claimed)
    except FileNotFoundError:
        # Already cleared by someone else.
        return True
    if _read_holder(claimed) == stale_pid:
        claimed.unlink(missing_ok=True)
        return True
    try:
        os.link(claimed, lock_file)
    except FileExistsError:
        pass
    finally:
        claimed.unlink(missing_ok=True)
    return False


@contextmanager
def operation_lock(port: int, run_dir: Path | None = None) -> Iterator[None]:
    """Hold ``service-<port>.lock`` for the duration of the block.

    The lock file holds the owner's pid. A lock whose owner is dead is claimed
    and replaced; a live owner (including another thread of this process)
    raises OperationInProgress instead of waiting.
    """
    if run_dir is None:
        run_dir = get_home_dir("run")
    run_dir.mkdir(parents=True, exist_ok=True)
    lock_file = run_dir / f"service-{port}.lock"

    if not _try_create(lock_file):
        holder = _read_holder(lock_file)
        if _pid_alive(holder) or not _claim_stale(lock_file, holder) or not _try_create(lock_file):
            raise OperationInProgress(port, _read_holder(lock_file) or holder)
    try:
        yield
    finally:
        lock_file.unlink(missing_ok=True)
