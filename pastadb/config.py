# pastadb/config.py
from __future__ import annotations

import os

import yaml
from pydantic import BaseModel, field_validator

# data_dir 解析顺序：
# 1) 环境变量 PASTADB_DATA_DIR（最高优先级）
# 2) config.yaml 的 data_dir（路径可由参数或 PASTADB_CONFIG 指定）
# 3) 兜底：当前目录下 pasta_data/
DEFAULT_DATA_DIR = "pasta_data"
DEFAULT_CONFIG_FILE = "config.yaml"


class StorageConfig(BaseModel):
    data_dir: str

    @field_validator("data_dir")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("data_dir must not be blank")
        return v


def _read_config_yaml(path: str) -> dict:
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
        out = {}
        v = cfg.get("data_dir") if isinstance(cfg, dict) else None
        if isinstance(v, str) and v.strip():
            out["data_dir"] = v.strip()
        return out
    except (OSError, ValueError, yaml.YAMLError):
        return {}


def load_config(config_path: str | None = None) -> StorageConfig:
    env_dir = os.environ.get("PASTADB_DATA_DIR")
    if env_dir and env_dir.strip():
        return StorageConfig(data_dir=env_dir)

    path = config_path or os.environ.get("PASTADB_CONFIG") or DEFAULT_CONFIG_FILE
    cfg = _read_config_yaml(path)
    return StorageConfig(data_dir=cfg.get("data_dir", DEFAULT_DATA_DIR))
