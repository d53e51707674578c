from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

from .config import DOCPATH_CONFIG


@dataclass(frozen=True)
class _DocpathConfigSnapshot:
    log_level: str
    rich_logging: bool
    create_path: bool
    overwrite: bool

    @classmethod
    def capture(cls) -> "_DocpathConfigSnapshot":
        return cls(
            log_level=DOCPATH_CONFIG.log_level,
            rich_logging=DOCPATH_CONFIG.rich_logging,
            create_path=DOCPATH_CONFIG.create_path,
            overwrite=DOCPATH_CONFIG.overwrite,
        )

    def restore(self) -> None:
        DOCPATH_CONFIG.log_level = self.log_level
        DOCPATH_CONFIG.rich_logging = self.rich_logging
        DOCPATH_CONFIG.create_path = self.create_path
        DOCPATH_CONFIG.overwrite = self.overwrite


def _apply_test_config() -> None:
    DOCPATH_CONFIG.log_level = "DEBUG"
    DOCPATH_CONFIG.rich_logging = True
    DOCPATH_CONFIG.create_path = True
    DOCPATH_CONFIG.overwrite = True


@contextmanager
def docpath_test_env() -> Generator[None, None, None]:
    """Run with predictable defaults and restore ``DOCPATH_CONFIG`` afterwards."""

    snapshot = _DocpathConfigSnapshot.capture()
    _apply_test_config()
    try:
        yield
    finally:
        snapshot.restore()
