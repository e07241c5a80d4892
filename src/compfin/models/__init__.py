from .asset_model import BlackScholesModel, MonteCarloAssetModel
from .bs import TerminalLaw

__all__ = [
    "MonteCarloAssetModel",
    "BlackScholesModel",
    "TerminalLaw",
]
