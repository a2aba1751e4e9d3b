"""
smh - ssh to hosts by alias or MAC address.

Resolves an ssh destination through a hosts file and an arp-scan of
the local network, then hands off to ssh.
"""

__version__ = "0.1.0"
