from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, List

from dotenv import load_dotenv

from wscommons.core.params import read_params
from wscommons.core.tracing import LogConfig, parse_level, parse_sink


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    cors_origins: List[str]
    log_sink: str
    log_level: str
    log_path: str
    trace: bool
    params_path: str
    params: Dict[str, str]

    def log_config(self) -> LogConfig:
        level = "trace" if self.trace else self.log_level
        return LogConfig(sink=self.log_sink, level=level, path=self.log_path)


def _parse_origins(value: str | None) -> List[str]:
    if not value:
        return ["http://localhost:5173"]
    parts = [p.strip() for p in value.split(",")]
    return [p for p in parts if p]


def _parse_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def get_settings() -> Settings:
    load_dotenv()
    log_sink = os.getenv("WSC_LOG_SINK", "stderr")
    log_level = os.getenv("WSC_LOG_LEVEL", "info")
    parse_sink(log_sink)
    parse_level(log_level)
    params_path = os.getenv("WSC_PARAMS_PATH", "")
    return Settings(
        host=os.getenv("WSC_HOST", "0.0.0.0"),
        port=int(os.getenv("WSC_PORT", "8000")),
        cors_origins=_parse_origins(os.getenv("WSC_CORS_ORIGINS")),
        log_sink=log_sink.strip().lower(),
        log_level=log_level.strip().lower(),
        log_path=os.getenv("WSC_LOG_PATH", "logs/errlog.txt"),
        trace=_parse_bool(os.getenv("WSC_TRACE")),
        params_path=params_path,
        params=read_params(params_path) if params_path else {},
    )
