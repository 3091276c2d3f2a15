"""Resource models for network configuration, IP sets, reservations, dnsmasq and transport URLs."""

__version__ = "0.1.0"