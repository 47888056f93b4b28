"""Rule engine: page ordering rules, their index, and evaluator settings."""

from pageorder.rule_engine.config import EvaluatorConfig, load_evaluator_config
from pageorder.rule_engine.index import RuleIndex
from pageorder.rule_engine.models import ClassificationMode, PageRule, UpdateStatus

__all__ = [
    "ClassificationMode",
    "EvaluatorConfig",
    "PageRule",
    "RuleIndex",
    "UpdateStatus",
    "load_evaluator_config",
]
