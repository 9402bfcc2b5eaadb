"""Stamp use case."""

from vcstamp.core.stamp.stamp_usecase import StampRequest, StampResponse, StampUseCase

__all__ = ["StampRequest", "StampResponse", "StampUseCase"]
