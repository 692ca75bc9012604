"""HTTP driver manifest."""

from webdrive_runner.drivers.http.config import HttpDriverConfig
from webdrive_runner.drivers.http.driver import HttpDriver
from webdrive_runner.drivers.manifest import DriverManifest

http_manifest = DriverManifest(
    name="http",
    config_cls=HttpDriverConfig,
    driver_factory=HttpDriver.from_config,
)
