"""Evaluation: the evaluator, closure application and special forms."""
