"""
Calculation Constants for the charging analytics API.

Centralized location for constants used in calculations.
Values configurable at deploy time are read from Config.
"""

from charging_api.config import Config

# Rounding
AVERAGE_DECIMALS = 0  # Averages are reported as whole numbers
RATIO_DECIMALS = 2  # Per-session ratios (kWh/session, revenue/session)
PERCENT_DECIMALS = 1  # Shares reported as percentages

# Peak-hour estimate for views without a peak-hour column (display only)
PEAK_HOUR_ESTIMATE_RATIO = Config.PEAK_HOUR_ESTIMATE_RATIO
