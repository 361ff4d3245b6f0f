"""Personal assistant framework core: file store, chores, data flags and display model."""

__version__ = "0.1.0"