from __future__ import annotations

from pathlib import Path
from typing import Optional

from loguru import logger
from tensorboardX import SummaryWriter

from evoforage.utils.trackers.base import LogWriter
from evoforage.utils.trackers.configs import TBConfig


class TBWriter(LogWriter):
    """Writes generation metrics straight to a tensorboardX SummaryWriter."""

    def __init__(self, cfg: TBConfig):
        self.cfg = cfg
        logdir = Path(cfg.logdir).resolve()
        logdir.mkdir(parents=True, exist_ok=True)
        self._writer: Optional[SummaryWriter] = SummaryWriter(
            str(logdir), **cfg.summary_writer_kwargs
        )
        logger.info("[TBWriter] Writing to {}", logdir)

    def scalar(self, metric: str, value: float, step: int) -> None:
        if self._writer is None:
            return
        self._writer.add_scalar(metric, float(value), global_step=step)

    def text(self, tag: str, text: str, step: int) -> None:
        if self._writer is None:
            return
        self._writer.add_text(tag, text, global_step=step)

    def close(self) -> None:
        if self._writer is None:
            return
        try:
            self._writer.flush()
        finally:
            self._writer.close()
            self._writer = None
