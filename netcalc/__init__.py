"""IPv4 network calculator: address ranges, masks, broadcast addresses, subnetting and step-by-step explanations."""

__version__ = "0.1.0"