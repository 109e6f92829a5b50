"""Use case orchestration for the docco generator."""

from .generate import GenerateResult, GenerateUseCase, RunContext
from .self_test import SelfTestOutcome, SelfTestUseCase

__all__ = [
    "GenerateUseCase",
    "GenerateResult",
    "RunContext",
    "SelfTestUseCase",
    "SelfTestOutcome",
]
