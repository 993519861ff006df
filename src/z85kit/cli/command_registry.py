#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    codec as codec_command,
    config as config_command,
    demo as demo_command,
    efficiency as efficiency_command,
    transcode as transcode_command,
)


def register(app: typer.Typer) -> None:
    codec_command.register(app)
    transcode_command.register(app)
    efficiency_command.register(app)
    demo_command.register(app)
    config_command.register(app)
