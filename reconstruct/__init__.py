"""
reconstruct — rdzeń rekonstrukcji akapitów numerowanych z zaszumionego tekstu.

Publiczne API:
  extract_paragraphs(text, numbers, policy, config)   -> list[ParagraphRecord]
  extract_all_paragraphs(text, policy, config)        -> list[ParagraphRecord]
  paragraph_numbers(text, policy, config)             -> list[int]
  classify(line, config)                              -> LineClass
  clean_lines(text, config)                           -> tuple[LineRecord, ...]
  valid_numbers(lines, policy)                        -> frozenset[int]
  assemble(lines, valid, number, config)              -> ParagraphRecord | None
  load_config(path)                                   -> ReconstructionConfig

Rdzeń jest czysty: bez I/O, bez stanu między wywołaniami.
"""

from .assembler import assemble
from .classifier import classify
from .config import DEFAULT_CONFIG, ReconstructionConfig, config_from_env, load_config
from .errors import ConfigError, InputError
from .noise_filter import clean_lines
from .pipeline import (
    coerce_policy,
    extract_all_paragraphs,
    extract_paragraphs,
    paragraph_numbers,
    run_request,
    validate_requested_numbers,
)
from .registry import ordered_numbers, valid_numbers

__all__ = [
    "assemble",
    "classify",
    "DEFAULT_CONFIG",
    "ReconstructionConfig",
    "config_from_env",
    "load_config",
    "ConfigError",
    "InputError",
    "clean_lines",
    "coerce_policy",
    "extract_all_paragraphs",
    "extract_paragraphs",
    "paragraph_numbers",
    "run_request",
    "validate_requested_numbers",
    "ordered_numbers",
    "valid_numbers",
]
