"""
polymetric - multi-language source code metrics

Parses source files with tree-sitter and computes cyclomatic, cognitive,
Halstead, LOC, argument, method, exit, ABC, NPA/NPM, maintainability index
and WMC metrics per function, class and file, aggregated up the scope tree.
"""

__version__ = "0.3.0"

from .api import analyze, analyze_file, count_nodes, function_spans, strip_comments
from .config import AnalysisConfig, load_config
from .langs import available_languages, detect_language, get_language
from .runner import FileRunner, RunReport, collect_files
from .spaces import Space, SpaceKind

__all__ = [
    "analyze",  # Main entry point
    "analyze_file",
    "function_spans",
    "count_nodes",
    "strip_comments",
    "AnalysisConfig",
    "load_config",
    "available_languages",
    "detect_language",
    "get_language",
    "FileRunner",
    "RunReport",
    "collect_files",
    "Space",
    "SpaceKind",
]
