"""Interface layer - demo handlers invoked by the CLI."""
from .demo_handlers import DEMOS, run_demo

__all__ = ['DEMOS', 'run_demo']
