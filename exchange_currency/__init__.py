"""Exchange Currency: консольный конвертер валют по курсам ExchangeRate-API."""

__version__ = "1.0.0"
