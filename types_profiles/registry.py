from typing import Dict, List, Any
import json
import os
from dataclasses import replace

import yaml

from app.config import GeneratorConfig, DEFAULT_CONFIG


def _load_single_profile(path: str) -> Dict[str, Any]:
    with open(path, 'r', encoding='utf-8') as f:
        if path.lower().endswith(('.yml', '.yaml')):
            data = yaml.safe_load(f) or {}
        else:
            data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Profile must be a mapping: {path}")
    return data


def load_profiles(paths: List[str], base: GeneratorConfig = DEFAULT_CONFIG) -> GeneratorConfig:
    """Apply YAML/JSON profiles on top of ``base`` in the given order."""
    config = base
    loaded: List[str] = []
    for p in paths:
        if not p:
            continue
        if not os.path.isfile(p):
            raise FileNotFoundError(f"Profile file not found: {p}")
        try:
            profile = _load_single_profile(p)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ValueError(f"Invalid profile {p}: {e}") from e
        config = config.merged(profile)
        loaded.append(p)
    if loaded:
        config = replace(config, profiles=tuple(loaded))
    return config
