"""Cart and checkout engine for the Dots artisan marketplace"""

__version__ = "1.0.0"
