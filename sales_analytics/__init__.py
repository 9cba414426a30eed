from sales_analytics.engine import analyze_sales_data
from sales_analytics.errors import (
    InvalidCollectionError,
    MissingInputError,
    MissingStrategyError,
    SalesAnalysisError,
)
from sales_analytics.models import AnalysisOptions, ReportRow, SalesData
from sales_analytics.strategies import calculate_bonus_by_profit, calculate_simple_revenue

__all__ = [
    "analyze_sales_data",
    "AnalysisOptions",
    "ReportRow",
    "SalesData",
    "calculate_bonus_by_profit",
    "calculate_simple_revenue",
    "SalesAnalysisError",
    "MissingInputError",
    "InvalidCollectionError",
    "MissingStrategyError",
]
