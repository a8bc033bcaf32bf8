# -*- coding: utf-8 -*-
"""
@Time    : 2025/8/22 09:47
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Minimal HTTP listener bound to PORT
"""
import time
from contextlib import nullcontext

import uvicorn
from fastapi import FastAPI


class EmbeddedServer(uvicorn.Server):
    """uvicorn server that leaves SIGINT/SIGTERM to the bot's own shutdown sequence"""

    def capture_signals(self):
        return nullcontext()

    def install_signal_handlers(self) -> None:
        return None


def create_http_app() -> FastAPI:
    app = FastAPI(title="taobot")
    started_at = time.time()

    @app.get("/")
    def root():
        return {"message": "taobot is running"}

    @app.get("/health")
    def health():
        return {"status": "ok", "uptime": round(time.time() - started_at, 3)}

    return app


def build_http_server(app: FastAPI, port: int) -> EmbeddedServer:
    config = uvicorn.Config(app, host="0.0.0.0", port=port, log_level="warning")
    return EmbeddedServer(config)
