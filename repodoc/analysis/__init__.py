"""Heuristic repository analysis."""

from .classifier import analyze, classify, infer_project_type, summarize

__all__ = ["analyze", "classify", "infer_project_type", "summarize"]
