"""Aggregators collecting source images for the asset catalog."""

from .card_manifest import CardManifestBuilder
from .expansion_sources import ExpansionSourceAggregator
from .source_downloader import DownloadSummary, SourceDownloader, load_manifest

__all__ = [
    "CardManifestBuilder",
    "DownloadSummary",
    "ExpansionSourceAggregator",
    "SourceDownloader",
    "load_manifest",
]
