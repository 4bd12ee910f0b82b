# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from cashly.shared.config import load_config
from cashly.shared.errors import register_error_handler


def configure_error_handling(app: Flask, *, debug_mode: bool | None = None) -> None:
    if debug_mode is None:
        debug_mode = load_config().debug_logging
    register_error_handler(app, debug_mode=debug_mode)
