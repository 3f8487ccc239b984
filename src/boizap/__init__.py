"""BoiZap Market - livestock growth projection and valuation"""

__version__ = "0.1.0"
