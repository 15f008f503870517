"""Parsers for kubectl JSON output."""

from lcrview.controllers.cluster.parsers.deployment_parser import DeploymentParser
from lcrview.controllers.cluster.parsers.pod_parser import PodParser

__all__ = ["DeploymentParser", "PodParser"]
