"""Metric accumulators, one module per metric family."""

from .bundle import MetricsBundle
from .cognitive import ROOT_CONTEXT, BooleanSequence, NestingContext
from .common import FunctionAggregate, Visit

__all__ = [
    "MetricsBundle",
    "NestingContext",
    "ROOT_CONTEXT",
    "BooleanSequence",
    "FunctionAggregate",
    "Visit",
]
