"""HTTP driver module."""

from webdrive_runner.drivers.http.config import HttpDriverConfig
from webdrive_runner.drivers.http.driver import HttpDriver
from webdrive_runner.drivers.http.manifest import http_manifest

__all__ = ["HttpDriver", "HttpDriverConfig", "http_manifest"]
