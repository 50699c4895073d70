"""Race Strategy Optimiser: setup validation, recommendation and race projection."""

__version__ = "1.0.0"
