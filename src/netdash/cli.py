"""
netdash command line entry point.
"""

import logging

import click

from netdash import __version__
from netdash.dns.cli import dns
from netdash.logging_config import configure_logging
from netdash.mail.cli import mail
from netdash.rbl.cli import rbl
from netdash.services.cli import services
from netdash.subnet.cli import subnet


logger = logging.getLogger(__name__)


@click.group()
@click.version_option(__version__, prog_name="netdash")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write logs to this file")
def main(debug: bool, log_file: str | None):
    """Network information dashboard.

    Subnet and VLSM calculators, public IP and geolocation, WHOIS, DNS,
    proxy detection, blacklist and email header tools.
    """
    configure_logging(debug=debug, log_file=log_file)
    logger.debug("netdash %s starting", __version__)


main.add_command(subnet)
main.add_command(services)
main.add_command(dns)
main.add_command(rbl)
main.add_command(mail)


if __name__ == "__main__":
    main()
