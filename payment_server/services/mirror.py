"""JSON file mirror of the payments table."""

from __future__ import annotations

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Iterable

from payment_server.modules.payments import Payment

logger = logging.getLogger(__name__)


class MirrorWriteError(RuntimeError):
    """Raised when the mirror file cannot be written."""


class PaymentMirror:
    """Rewrites a side file with the full payment snapshot.

    The file is never patched: each call serialises the whole collection to a
    temporary sibling and renames it over the target, so readers only ever see
    a complete document.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def write(self, payments: Iterable[Payment]) -> None:
        rows = [payment.to_payload() for payment in payments]
        tmp_path = self._path.with_name(f".{self._path.name}.tmp")
        try:
            document = json.dumps(rows, indent=2, ensure_ascii=False)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(document, encoding="utf-8")
            os.replace(tmp_path, self._path)
        except (OSError, TypeError, ValueError) as exc:
            tmp_path.unlink(missing_ok=True)
            raise MirrorWriteError(f"cannot write mirror {self._path}: {exc}") from exc
        logger.debug("Mirrored %d payments to %s", len(rows), self._path)

    async def write_async(self, payments: Iterable[Payment]) -> None:
        await asyncio.to_thread(self.write, list(payments))

    def read(self) -> list[dict]:
        return json.loads(self._path.read_text(encoding="utf-8"))
