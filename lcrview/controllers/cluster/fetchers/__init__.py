"""Fetchers for cluster data."""

from lcrview.controllers.cluster.fetchers.workload_fetcher import WorkloadFetcher

__all__ = ["WorkloadFetcher"]
