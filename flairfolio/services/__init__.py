from .portfolio_service import (
    PortfolioService,
    get_portfolio_service,
)

__all__ = [
    "PortfolioService",
    "get_portfolio_service",
]
