"""Driver provisioning module for browser sessions."""

from sitecheck.driver_provisioning.driver_installer import DriverInstaller

__all__ = ["DriverInstaller"]
