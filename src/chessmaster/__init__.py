"""Chess position model, FEN codec and move-application engine."""

__version__ = "0.1.0"
