"""Static generative compositions of dot wheels."""

__version__ = "0.1.0"
