#!/usr/bin/env python3
"""Install the configured browser driver ahead of a test run and print its path."""

import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from sitecheck.config.check_config import get_check_settings
from sitecheck.driver_provisioning.driver_installer import DriverInstaller
from sitecheck.error_handling.errors import BrowserCheckError


def provision_driver():
    try:
        settings = get_check_settings()
        path = DriverInstaller.from_settings(settings).install()
    except BrowserCheckError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if path:
        print(path)
    else:
        print('Driver manager disabled; selenium will resolve the driver at launch')


if __name__ == '__main__':
    provision_driver()
