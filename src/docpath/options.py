from __future__ import annotations

import chz


@chz.chz
class SetOptions:
    """Write policy for ``set``: path creation and overwriting of existing values."""

    create_path: bool = chz.field(default=True)
    overwrite: bool = chz.field(default=True)


__all__ = ["SetOptions"]
