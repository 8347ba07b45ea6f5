"""DayBalance - daily life-investment journal and insights engine."""

__version__ = "0.1.0"
