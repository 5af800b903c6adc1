from evoforage.utils.trackers.base import LogWriter
from evoforage.utils.trackers.configs import TBConfig
from evoforage.utils.trackers.tensorboard import TBWriter

__all__ = ["LogWriter", "TBConfig", "TBWriter"]
