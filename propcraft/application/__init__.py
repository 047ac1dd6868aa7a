"""Application layer use cases for propcraft."""

from .sampling_usecase import SampleRun, SamplingUseCase

__all__ = ["SampleRun", "SamplingUseCase"]
