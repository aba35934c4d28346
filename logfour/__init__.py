"""Building blocks for log4j-style logging: error records, property files, time formatting and appender collections."""

__version__ = "1.6.0"