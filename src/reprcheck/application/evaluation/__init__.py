"""Constant evaluation for array lengths."""

from reprcheck.application.evaluation.const_evaluator import ConstEvaluator, parse_int_literal

__all__ = ["ConstEvaluator", "parse_int_literal"]
