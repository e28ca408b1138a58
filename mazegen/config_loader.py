from pathlib import Path
from typing import Dict
import os
import yaml

# environment variable -> (section or None for top level, key)
ENV_KEYS = {
    'MAZEGEN_OUTPUT_DIR': (None, 'output_dir'),
    'MAZEGEN_COUNT': (None, 'count'),
    'MAZEGEN_WORKERS': (None, 'workers'),
    'MAZEGEN_SIZE': ('maze', 'size'),
    'MAZEGEN_ENTRANCE': ('maze', 'entrance'),
    'MAZEGEN_EXIT': ('maze', 'exit'),
    'MAZEGEN_SEED': ('maze', 'seed'),
    'MAZEGEN_CELL_PX': ('maze', 'cell_px'),
}

INT_KEYS = {'count', 'workers', 'seed', 'cell_px'}


def _merge(base: Dict, extra: Dict) -> Dict:
    for k, v in extra.items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            _merge(base[k], v)
        else:
            base[k] = v
    return base


def load_config(config_dir: str | Path = 'config') -> Dict:
    config_dir = Path(config_dir)
    base = config_dir / 'config.yaml'
    local = config_dir / 'local.yaml'
    cfg: Dict = {}
    if base.exists():
        _merge(cfg, yaml.safe_load(base.read_text(encoding='utf-8')) or {})
    if local.exists():
        _merge(cfg, yaml.safe_load(local.read_text(encoding='utf-8')) or {})
    # Pull overrides from environment
    for env, (section, key) in ENV_KEYS.items():
        val = os.getenv(env)
        if val is None:
            continue
        if key in INT_KEYS:
            val = int(val)
        target = cfg.setdefault(section, {}) if section else cfg
        target[key] = val
    return cfg


def parse_size(size: str) -> tuple[int, int]:
    # sizes are written WIDTHxHEIGHT
    w, h = map(int, str(size).lower().split('x'))
    return w, h
