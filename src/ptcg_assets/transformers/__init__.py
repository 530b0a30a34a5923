"""Transformers producing the published asset tree from source images."""

from .card_transformer import CardTransformer
from .expansion_transformer import ExpansionTransformer
from .image_optimizer import ImageOptimizer, OptimizeSummary
from .transformer import AssetTransformer

__all__ = [
    "AssetTransformer",
    "CardTransformer",
    "ExpansionTransformer",
    "ImageOptimizer",
    "OptimizeSummary",
]
