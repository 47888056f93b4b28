"""EvaluatorConfig dataclass and loader for classification settings."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from pageorder.rule_engine.models import ClassificationMode

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = ".pageorder.json"


@dataclass
class EvaluatorConfig:
    mode: ClassificationMode = ClassificationMode.STRICT
    verify_repairs: bool = False


def load_evaluator_config(path: Path | None = None) -> EvaluatorConfig:
    """Load evaluator config from the ``evaluator`` section of a JSON file."""
    if path is None:
        path = Path.cwd() / DEFAULT_CONFIG_NAME
    config = EvaluatorConfig()
    if path.exists():
        try:
            text = path.read_text()
            if text.strip():
                data = json.loads(text)
                section = data.get("evaluator", {})
                if isinstance(section, dict):
                    _apply(config, section)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load evaluator config from {path}: {e}")
    if env_mode := os.environ.get("PAGEORDER_MODE"):
        try:
            config.mode = ClassificationMode(env_mode.lower())
        except ValueError:
            logger.warning(f"Ignoring unknown PAGEORDER_MODE: {env_mode}")
    if env_verify := os.environ.get("PAGEORDER_VERIFY_REPAIRS"):
        config.verify_repairs = env_verify.lower() in ("true", "1", "yes")
    return config


def _apply(cfg: EvaluatorConfig, data: dict[str, object]) -> None:
    mode = data.get("mode")
    if isinstance(mode, str) and mode in {m.value for m in ClassificationMode}:
        cfg.mode = ClassificationMode(mode)
    if "verify_repairs" in data and isinstance(data["verify_repairs"], bool):
        cfg.verify_repairs = data["verify_repairs"]
