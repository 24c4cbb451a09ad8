"""Allow running as ``python -m zabbix_api``."""

from zabbix_api.cli.main import run

if __name__ == "__main__":
    run()
