"""
netdash - Network Information Dashboard

Public network lookups (public IP, geolocation, WHOIS, DNS, proxy
detection, blacklist simulation, email header tracing) and an IPv4
subnet/VLSM calculator, from the terminal or as a library.
"""

__version__ = "0.1.0"
